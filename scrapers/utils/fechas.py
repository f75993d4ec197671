"""
Parsing de fechas en español para los feriados de gob.pe
La página no publica el año, así que se infiere a partir de la fecha actual
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


MESES = {
    'enero': 1, 'febrero': 2, 'marzo': 3, 'abril': 4,
    'mayo': 5, 'junio': 6, 'julio': 7, 'agosto': 8,
    'septiembre': 9, 'octubre': 10, 'noviembre': 11, 'diciembre': 12
}

# Ejemplo: "Miércoles 23 de julio"
PATRON_FECHA = re.compile(r'(\d+)\s+de\s+(\w+)', re.IGNORECASE)


@dataclass(frozen=True)
class ResultadoFecha:
    """
    Resultado del parsing de una fecha.

    Si el texto no se pudo interpretar, `fecha` es el momento actual y
    `es_fallback` queda en True con el motivo del fallo.
    """
    fecha: datetime
    es_fallback: bool = False
    motivo: Optional[str] = None


def _fallback(texto: str, motivo: str, hoy: datetime) -> ResultadoFecha:
    print(f"⚠️  No se pudo parsear la fecha '{texto}': {motivo}")
    return ResultadoFecha(fecha=hoy, es_fallback=True, motivo=motivo)


def parse_fecha_espanol(texto: str, hoy: Optional[datetime] = None) -> ResultadoFecha:
    """
    Parsea una fecha parcial en español (ej: "23 de julio").

    El año es el actual, salvo que el mes ya haya pasado: en ese caso se
    asume el año siguiente. Un día ya pasado del mes en curso se queda en
    el año actual.

    Args:
        texto: Texto con la fecha, puede llevar palabras alrededor
        hoy: Fecha de referencia (por defecto datetime.now())

    Returns:
        ResultadoFecha, nunca lanza excepción
    """
    hoy = hoy or datetime.now()

    match = PATRON_FECHA.search(texto or '')
    if not match:
        return _fallback(texto, 'formato no reconocido', hoy)

    dia = int(match.group(1))
    mes_texto = match.group(2).lower()
    mes = MESES.get(mes_texto)

    if mes is None:
        return _fallback(texto, f"mes desconocido '{mes_texto}'", hoy)

    year = hoy.year + 1 if mes < hoy.month else hoy.year

    try:
        return ResultadoFecha(fecha=datetime(year, mes, dia))
    except (ValueError, OverflowError) as e:
        return _fallback(texto, f"fecha inválida {dia}/{mes}/{year} ({e})", hoy)


def parse_spanish_date(texto: str) -> datetime:
    """Devuelve solo la fecha parseada (o la actual si falla)"""
    return parse_fecha_espanol(texto).fecha


def format_date(fecha: datetime) -> str:
    """Formatea como YYYY-MM-DD para comparar por día"""
    return f"{fecha.year}-{fecha.month:02d}-{fecha.day:02d}"

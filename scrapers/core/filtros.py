"""
Filtros sobre la lista de feriados que usa la API
"""

from datetime import datetime
from typing import Iterable, List, Optional

from scrapers.core.models import Feriado
from scrapers.utils.fechas import format_date


MARCADOR_SECTOR_PUBLICO = 'sector público'


def filtrar_sector_publico(
    festivos: Iterable[Feriado],
    incluir_sector_publico: bool,
    marcador: str = MARCADOR_SECTOR_PUBLICO
) -> List[Feriado]:
    """
    Quita los feriados solo para el sector público, salvo que se pidan.

    Args:
        festivos: Feriados extraídos
        incluir_sector_publico: True para devolverlos todos
        marcador: Texto que identifica los feriados del sector público
    """
    if incluir_sector_publico:
        return list(festivos)
    return [f for f in festivos if not f.es_sector_publico(marcador)]


def es_feriado(festivos: Iterable[Feriado], hoy: Optional[datetime] = None) -> bool:
    """True si alguno de los feriados cae hoy (se compara solo el día)"""
    hoy_texto = format_date(hoy or datetime.now())
    return any(format_date(f.date) == hoy_texto for f in festivos)

"""
gob.pe Scraper - Feriados del Perú
Extrae los feriados publicados en https://www.gob.pe/feriados

La página no es nuestra y puede cambiar sin aviso: todos los selectores
están en SELECTORES, es lo único que habría que tocar.
"""

import asyncio
from typing import List, Dict, Optional
from bs4 import BeautifulSoup

from .base_scraper import BaseScraper
from scrapers.core.models import Feriado
from scrapers.utils.fechas import parse_fecha_espanol
from utils.normalizer import normalize_spaces, clean_date_text


SELECTORES = {
    # Próximo feriado (bloque destacado)
    'proximo': '.holidays__recent-holiday',
    'proximo_fecha': '.holidays__recent-holiday-date',
    'proximo_nombre': '.holidays__recent-holiday-name',
    # Lista de feriados del año
    'item': 'li.holidays__list-item',
    'item_fecha': '.holidays__list-item-date',
    'item_nombre': '.holidays__list-item-name',
}


def _texto(elemento) -> str:
    """Texto sin etiquetas y con espacios normalizados"""
    if elemento is None:
        return ""
    return normalize_spaces(elemento.get_text())


def _crear_feriado(fecha_texto: str, nombre: str) -> Optional[Feriado]:
    # Entradas incompletas se descartan sin error
    if not fecha_texto or not nombre:
        return None
    resultado = parse_fecha_espanol(fecha_texto)
    return Feriado(date_string=fecha_texto, date=resultado.fecha, name=nombre)


class GobPeScraper(BaseScraper):
    """
    Scraper de feriados desde gob.pe

    Recorre dos zonas de la página de forma independiente:
    1. El bloque del próximo feriado (va primero en el resultado)
    2. La lista de feriados del año
    """

    def __init__(self, url: Optional[str] = None, config: Optional[Dict] = None):
        super().__init__(fuente='gob_pe', config=config)
        self.url = url

    def get_source_url(self) -> str:
        return self.url or self.config.get('url', '')

    def parse_festivos(self, content: str) -> List[Feriado]:
        """
        Parsea feriados desde el HTML de gob.pe.
        Una zona que no se encuentre simplemente no aporta feriados.
        """
        soup = BeautifulSoup(content, 'lxml')

        festivos = []
        festivos.extend(self._parse_proximo_feriado(soup))
        festivos.extend(self._parse_lista(soup))

        print(f"   🔍 Feriados encontrados: {len(festivos)}")
        return festivos

    def _parse_proximo_feriado(self, soup: BeautifulSoup) -> List[Feriado]:
        """Bloque destacado con el próximo feriado"""
        bloque = soup.select_one(SELECTORES['proximo'])
        if bloque is None:
            return []

        fecha_texto = _texto(bloque.select_one(SELECTORES['proximo_fecha']))
        nombre = _texto(bloque.select_one(SELECTORES['proximo_nombre']))

        feriado = _crear_feriado(fecha_texto, nombre)
        return [feriado] if feriado else []

    def _parse_lista(self, soup: BeautifulSoup) -> List[Feriado]:
        """
        Lista de feriados. La fecha puede venir partida en varios <span>
        ("Miércoles", "23 de julio:"), se unen en orden y se quitan los
        dos puntos finales.
        """
        festivos = []

        for item in soup.select(SELECTORES['item']):
            fragmentos = [_texto(span) for span in item.select(SELECTORES['item_fecha'])]
            fecha_texto = clean_date_text(' '.join(f for f in fragmentos if f))
            nombre = _texto(item.select_one(SELECTORES['item_nombre']))

            feriado = _crear_feriado(fecha_texto, nombre)
            if feriado:
                festivos.append(feriado)

        return festivos


def scrape_feriados(url: Optional[str] = None, config: Optional[Dict] = None) -> List[Feriado]:
    """Scraping síncrono con un scraper nuevo en cada llamada"""
    return GobPeScraper(url=url, config=config).scrape()


async def extract_holidays(url: Optional[str] = None, config: Optional[Dict] = None) -> List[Feriado]:
    """
    Descarga y extrae los feriados de gob.pe.

    La descarga y el parsing se ejecutan en un thread para no bloquear
    el event loop. Nunca lanza excepción: en el peor caso devuelve [].
    """
    return await asyncio.to_thread(scrape_feriados, url, config)

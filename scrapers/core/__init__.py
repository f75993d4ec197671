"""
Núcleo de extracción de feriados
Incluye el scraper de gob.pe y los filtros que usa la API
"""

from .models import Feriado
from .gobpe_scraper import GobPeScraper, extract_holidays, scrape_feriados
from .filtros import filtrar_sector_publico, es_feriado

__all__ = [
    'Feriado',
    'GobPeScraper',
    'extract_holidays',
    'scrape_feriados',
    'filtrar_sector_publico',
    'es_feriado',
]

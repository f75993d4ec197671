"""
Scraping de feriados desde la línea de comandos

Uso:
    python scrape_feriados.py
    python scrape_feriados.py --sector-publico --json data/feriados.json --excel data/feriados.xlsx
"""

import argparse
import sys
from typing import List, Optional

from scrapers.core import GobPeScraper, filtrar_sector_publico


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Feriados del Perú desde gob.pe')
    parser.add_argument('--url', help='URL alternativa de la página de feriados')
    parser.add_argument('--sector-publico', action='store_true',
                        help='Incluir feriados solo para el sector público')
    parser.add_argument('--json', dest='json_path', help='Guardar resultado en JSON')
    parser.add_argument('--excel', dest='excel_path', help='Guardar resultado en Excel')
    args = parser.parse_args(argv)

    scraper = GobPeScraper(url=args.url)
    festivos = scraper.scrape()

    if not festivos:
        print("❌ No se encontraron feriados")
        return 1

    scraper.festivos = filtrar_sector_publico(
        festivos,
        args.sector_publico,
        scraper.config.get('marcador_sector_publico', 'sector público')
    )
    scraper.metadata['num_festivos'] = len(scraper.festivos)
    scraper.print_summary()

    if args.json_path:
        scraper.save_to_json(args.json_path)
    if args.excel_path:
        scraper.save_to_excel(args.excel_path)

    return 0


if __name__ == '__main__':
    sys.exit(main())

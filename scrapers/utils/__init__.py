"""
Utilidades de fechas en español
"""

from .fechas import ResultadoFecha, parse_fecha_espanol, parse_spanish_date, format_date

__all__ = ['ResultadoFecha', 'parse_fecha_espanol', 'parse_spanish_date', 'format_date']

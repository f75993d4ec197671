"""
Scrapers de feriados del Perú
"""

"""
Utilidades del proyecto
"""

from .normalizer import (
    TextoNormalizer,
    normalize_spaces,
    clean_date_text
)

__all__ = [
    'TextoNormalizer',
    'normalize_spaces',
    'clean_date_text'
]

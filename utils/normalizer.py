"""
Normalizador de textos extraídos de gob.pe
Limpia espacios y dos puntos sobrantes de nombres y fechas
"""

import re


class TextoNormalizer:
    """Normalización de los textos de nombre y fecha de cada feriado"""

    @staticmethod
    def normalize_spaces(texto: str) -> str:
        """Colapsa espacios, tabs y saltos de línea en un único espacio"""
        if not texto:
            return ""
        return re.sub(r'\s+', ' ', texto).strip()

    @classmethod
    def clean_date_text(cls, texto: str) -> str:
        """
        Limpia el texto de una fecha de la lista
        "Miércoles 23 de julio:" -> "Miércoles 23 de julio"
        """
        texto = cls.normalize_spaces(texto)
        return re.sub(r':\s*$', '', texto).strip()


# Funciones de conveniencia
def normalize_spaces(texto: str) -> str:
    return TextoNormalizer.normalize_spaces(texto)


def clean_date_text(texto: str) -> str:
    return TextoNormalizer.clean_date_text(texto)

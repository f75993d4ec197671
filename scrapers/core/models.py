"""
Modelo de datos de un feriado extraído de gob.pe
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict


@dataclass(frozen=True)
class Feriado:
    """
    Feriado tal como se publica en gob.pe.

    `date_string` es el texto original (útil para depurar la página),
    `date` la fecha resuelta a partir de él.
    """
    date_string: str
    date: datetime
    name: str

    def es_sector_publico(self, marcador: str) -> bool:
        """True si el nombre o la fecha llevan el marcador del sector público"""
        return marcador in self.name or marcador in self.date_string

    def to_dict(self) -> Dict[str, str]:
        return {
            'dateString': self.date_string,
            'date': self.date.isoformat(),
            'name': self.name,
        }

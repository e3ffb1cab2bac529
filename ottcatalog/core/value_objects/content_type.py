"""
Objet valeur pour le type de contenu du protocole Stremio.
"""

from enum import Enum
from typing import Optional


class ContentType(Enum):
    """Type de contenu expose dans les catalogues.

    Valeurs:
        MOVIE: Film (long-metrage)
        SERIES: Serie TV
    """

    MOVIE = "movie"
    SERIES = "series"

    @property
    def tmdb_path(self) -> str:
        """Segment d'URL TMDB correspondant ("movie" ou "tv")."""
        return "movie" if self is ContentType.MOVIE else "tv"

    @classmethod
    def parse(cls, value: str) -> Optional["ContentType"]:
        """
        Convertit une chaine de requete en ContentType.

        Accepte aussi "tv" (vocabulaire TMDB) comme alias de SERIES.

        Returns:
            Le ContentType correspondant, ou None si la valeur est inconnue
        """
        normalized = (value or "").strip().lower()
        if normalized == "tv":
            return cls.SERIES
        for member in cls:
            if member.value == normalized:
                return member
        return None

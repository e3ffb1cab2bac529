"""
Utilitaires et constantes pour OttCatalog.

Ce module contient les constantes, jeux de donnees embarques et fonctions
utilitaires partagees.
"""

from ottcatalog.utils.constants import (
    CATALOGS,
    DEFAULT_PLATFORMS,
    ID_NAMESPACE,
    VIDEO_EXTENSIONS,
)

__all__ = [
    "CATALOGS",
    "DEFAULT_PLATFORMS",
    "ID_NAMESPACE",
    "VIDEO_EXTENSIONS",
]

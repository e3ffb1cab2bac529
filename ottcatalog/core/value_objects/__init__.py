"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- ContentType : Type de contenu (MOVIE, SERIES)
- Result : Resultat interne ok/raison
- ContentIdentity, IdentityKind, parse_identity : Parsing des identifiants de contenu
"""

from ottcatalog.core.value_objects.content_type import ContentType
from ottcatalog.core.value_objects.identity import (
    ContentIdentity,
    IdentityKind,
    looks_like_imdb_id,
    parse_identity,
)
from ottcatalog.core.value_objects.result import Result

__all__ = [
    "ContentType",
    "ContentIdentity",
    "IdentityKind",
    "Result",
    "looks_like_imdb_id",
    "parse_identity",
]

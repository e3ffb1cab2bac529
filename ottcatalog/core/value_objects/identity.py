"""
Parsing des identifiants de contenu recus par les routes meta et stream.

Formats reconnus :
- ttXXXXXXX[:saison:episode] : identifiant IMDb (format Stremio pour les series)
- {ns}:tmdb:{type}:{tmdbId}[:saison:episode] : contenu enrichi via TMDB
- {ns}:{source}:{type}:{index}[:saison:episode] : item produit par un adaptateur
- {titre}:{annee}[:saison:episode] : identite titre/annee
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

IMDB_ID_PATTERN = re.compile(r"^tt\d{7,8}$")

_EPISODE_SUFFIX = r"(?::(?P<season>\d+):(?P<episode>\d+))?"
_IMDB_RE = re.compile(r"^(?P<base>tt\d{7,8})" + _EPISODE_SUFFIX + r"$")
_TITLE_YEAR_RE = re.compile(
    r"^(?P<base>(?P<title>[^:]+):(?P<year>(?:19|20)\d{2}))" + _EPISODE_SUFFIX + r"$"
)


class IdentityKind(Enum):
    """Nature d'un identifiant de contenu."""

    IMDB = "imdb"
    TMDB = "tmdb"
    SOURCE = "source"
    TITLE_YEAR = "title_year"


@dataclass(frozen=True)
class ContentIdentity:
    """
    Identite de contenu parsee.

    Attributs:
        kind: Nature de l'identifiant
        base_id: Identifiant sans suffixe saison/episode
        external_id: ID IMDb ou TMDB selon le kind
        title: Titre (kind TITLE_YEAR)
        year: Annee (kind TITLE_YEAR)
        season: Saison demandee (streams de series)
        episode: Episode demande (streams de series)
    """

    kind: IdentityKind
    base_id: str
    external_id: Optional[str] = None
    title: Optional[str] = None
    year: Optional[int] = None
    season: Optional[int] = None
    episode: Optional[int] = None


def looks_like_imdb_id(value: Optional[str]) -> bool:
    """Verifie si une chaine ressemble a un identifiant IMDb (tt + 7-8 chiffres)."""
    return bool(value) and bool(IMDB_ID_PATTERN.match(value))


def _episode_numbers(match: re.Match) -> tuple[Optional[int], Optional[int]]:
    season = match.group("season")
    episode = match.group("episode")
    if season is None or episode is None:
        return None, None
    return int(season), int(episode)


def parse_identity(value: str, namespace: str) -> Optional[ContentIdentity]:
    """
    Parse un identifiant de contenu.

    Args:
        value: Identifiant brut recu dans l'URL
        namespace: Prefixe des identifiants produits par l'add-on

    Returns:
        ContentIdentity, ou None si le format n'est pas reconnu
    """
    if not value:
        return None
    value = value.strip()

    match = _IMDB_RE.match(value)
    if match:
        season, episode = _episode_numbers(match)
        return ContentIdentity(
            kind=IdentityKind.IMDB,
            base_id=match.group("base"),
            external_id=match.group("base"),
            season=season,
            episode=episode,
        )

    ns = re.escape(namespace)
    tmdb_re = re.compile(
        rf"^(?P<base>{ns}:tmdb:(?:movie|series):(?P<tmdb>\d+))" + _EPISODE_SUFFIX + r"$"
    )
    match = tmdb_re.match(value)
    if match:
        season, episode = _episode_numbers(match)
        return ContentIdentity(
            kind=IdentityKind.TMDB,
            base_id=match.group("base"),
            external_id=match.group("tmdb"),
            season=season,
            episode=episode,
        )

    source_re = re.compile(
        rf"^(?P<base>{ns}:[\w-]+:(?:movie|series):[\w-]+)" + _EPISODE_SUFFIX + r"$"
    )
    match = source_re.match(value)
    if match:
        season, episode = _episode_numbers(match)
        return ContentIdentity(
            kind=IdentityKind.SOURCE,
            base_id=match.group("base"),
            season=season,
            episode=episode,
        )

    # Un identifiant de l'add-on mal forme ne doit pas etre lu comme titre:annee
    if value.startswith(f"{namespace}:"):
        return None

    match = _TITLE_YEAR_RE.match(value)
    if match:
        season, episode = _episode_numbers(match)
        return ContentIdentity(
            kind=IdentityKind.TITLE_YEAR,
            base_id=match.group("base"),
            title=match.group("title").strip(),
            year=int(match.group("year")),
            season=season,
            episode=episode,
        )

    return None

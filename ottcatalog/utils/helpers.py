"""
Fonctions utilitaires partagees dans le projet OttCatalog.

Ce module centralise les fonctions reutilisees a travers le codebase :
- strip_invisible_chars / clean_title : nettoyage des titres scrapes
- parse_year : extraction de l'annee d'un releaseInfo
- title_search_variants : variantes de titre pour la recherche TMDB
- absolute_url : resolution des URLs relatives des pages scrapees
- is_video_file / matches_episode / matches_season : heuristiques de fichiers
"""

import re
import unicodedata
from typing import Optional
from urllib.parse import urljoin

from ottcatalog.core.value_objects.content_type import ContentType
from ottcatalog.utils.constants import (
    DEFAULT_MOVIE_POSTER,
    DEFAULT_SERIES_POSTER,
    VIDEO_EXTENSIONS,
)

_YEAR_RE = re.compile(r"\b((?:19|20)\d{2})\b")
_TRAILING_YEAR_RE = re.compile(r"\s*\(\s*(?:19|20)\d{2}\s*\)\s*$")
_SEASON_SUFFIX_RE = re.compile(
    r"\s*[-:,]?\s*(?:\(?\s*season\s*\d+\s*\)?|\bS\d{1,2}\b)\s*$", re.IGNORECASE
)
_PUNCTUATION_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def strip_invisible_chars(text: str) -> str:
    """
    Retire les caractères Unicode invisibles d'une chaîne.

    Supprime les caractères de contrôle et les marques directionnelles
    qui peuvent provenir des pages scrapees (LRM, RLM, BOM, etc.).
    """
    result = []
    for char in text:
        category = unicodedata.category(char)
        if category in ("Cf", "Cc"):
            continue
        result.append(char)
    return "".join(result)


def clean_title(title: Optional[str]) -> str:
    """Nettoie un titre : retire les caractères invisibles et les espaces superflus."""
    if not title:
        return ""
    return _WHITESPACE_RE.sub(" ", strip_invisible_chars(title)).strip()


def parse_year(release_info: Optional[str]) -> int:
    """
    Extrait l'annee d'un releaseInfo.

    Args:
        release_info: Chaine d'affichage ("2020", "2019 • 2 Seasons", ...)

    Returns:
        L'annee sur 4 chiffres, ou 0 si absente ou non numerique
    """
    if not release_info:
        return 0
    match = _YEAR_RE.search(release_info)
    return int(match.group(1)) if match else 0


def strip_title_suffixes(title: str) -> str:
    """
    Retire l'annee entre parentheses et le suffixe de saison en fin de titre.

    Ex: "Mirzapur (2018)" -> "Mirzapur", "Kota Factory Season 2" -> "Kota Factory"
    """
    cleaned = clean_title(title)
    previous = None
    while previous != cleaned:
        previous = cleaned
        cleaned = _TRAILING_YEAR_RE.sub("", cleaned)
        cleaned = _SEASON_SUFFIX_RE.sub("", cleaned).strip()
    return cleaned or clean_title(title)


def title_search_variants(title: str) -> list[str]:
    """
    Génère les variantes de recherche d'un titre, dans l'ordre d'essai.

    1. Titre nettoye (annee et saison retirees)
    2. Variante sans ponctuation
    3. Trois premiers mots

    Les doublons et variantes vides sont retires en gardant l'ordre.
    """
    base = strip_title_suffixes(title)
    normalized = _WHITESPACE_RE.sub(" ", _PUNCTUATION_RE.sub(" ", base)).strip()
    first_words = " ".join(normalized.split()[:3])

    variants: list[str] = []
    for candidate in (base, normalized, first_words):
        if candidate and candidate not in variants:
            variants.append(candidate)
    return variants


def absolute_url(base_url: str, url: Optional[str]) -> Optional[str]:
    """Resout une URL relative par rapport a l'URL de base de la plateforme."""
    if not url:
        return None
    url = url.strip()
    if url.startswith("//"):
        return f"https:{url}"
    if url.startswith("http"):
        return url
    return urljoin(base_url.rstrip("/") + "/", url.lstrip("/"))


def is_video_file(filename: Optional[str]) -> bool:
    """Verifie si un nom de fichier porte une extension video connue."""
    if not filename:
        return False
    return filename.lower().endswith(VIDEO_EXTENSIONS)


def matches_episode(
    filename: str, season: Optional[int], episode: Optional[int]
) -> bool:
    """
    Verifie qu'un nom de fichier correspond a la saison/episode demandes.

    Formats reconnus (insensibles a la casse) :
    - SxxEyy (ex: S02E05)
    - "season N" et "episode M" presents separement

    Sans saison connue, tout fichier correspond. Sans episode connu,
    seule la saison est verifiee.
    """
    if season is None:
        return True
    if episode is None:
        return matches_season(filename, season)

    name = filename.lower()
    sxe = re.compile(rf"s0*{season}e0*{episode}(?!\d)", re.IGNORECASE)
    if sxe.search(name):
        return True

    season_re = re.compile(rf"season\s*0*{season}(?!\d)", re.IGNORECASE)
    episode_re = re.compile(rf"episode\s*0*{episode}(?!\d)", re.IGNORECASE)
    return bool(season_re.search(name)) and bool(episode_re.search(name))


def matches_season(filename: str, season: Optional[int]) -> bool:
    """Verifie qu'un nom contient le jeton de saison (sXX ou "season N")."""
    if season is None:
        return True
    name = filename.lower()
    if re.search(rf"s0*{season}(?:e\d+|(?!\d))", name):
        return True
    return bool(re.search(rf"season\s*0*{season}(?!\d)", name))


def query_terms(query: str) -> list[str]:
    """
    Mots significatifs d'une requete de streams (annee exclue).

    Utilise pour filtrer la bibliotheque des services debrid.
    """
    normalized = _PUNCTUATION_RE.sub(" ", clean_title(query).lower())
    return [word for word in normalized.split() if not _YEAR_RE.fullmatch(word)]


def matches_query(name: str, query: str) -> bool:
    """Verifie que tous les mots du titre recherche apparaissent dans le nom."""
    terms = query_terms(query)
    if not terms:
        return False
    haystack = set(_PUNCTUATION_RE.sub(" ", name.lower()).replace("_", " ").split())
    return all(term in haystack for term in terms)


def default_poster(content_type: ContentType) -> str:
    """Affiche de remplacement selon le type de contenu."""
    if content_type is ContentType.MOVIE:
        return DEFAULT_MOVIE_POSTER
    return DEFAULT_SERIES_POSTER

"""
Service d'enrichissement des items de catalogue via l'API de metadonnees.

EnricherService remplace un item "mince" (scrape ou curate) par la fiche
TMDB correspondante, en conservant son identifiant et ses liens.

Ordre de resolution:
1. Identifiant de style IMDb (tt + 7-8 chiffres) -> recherche directe /find
2. Sinon, ou si absent de TMDB -> recherche titre/annee sur les variantes
   du titre (nettoye, sans ponctuation, trois premiers mots)
3. Details complets du premier resultat

Toute erreur (reseau, HTTP, format) rend l'item d'origine inchange.
L'espacement des appels est delegue au RateLimiter partage.
"""

import dataclasses
from typing import Optional, Sequence

from loguru import logger

from ottcatalog.core.entities.content import ContentItem, SeasonSummary
from ottcatalog.core.ports.api_clients import IMetadataClient, MediaDetails
from ottcatalog.core.value_objects.content_type import ContentType
from ottcatalog.core.value_objects.identity import looks_like_imdb_id
from ottcatalog.core.value_objects.result import Result
from ottcatalog.services.rate_limiter import RateLimiter
from ottcatalog.utils.constants import (
    DEFAULT_DESCRIPTION,
    DEFAULT_GENRE,
    DEFAULT_POSTER_SHAPE,
    ID_NAMESPACE,
)
from ottcatalog.utils.helpers import parse_year, title_search_variants


def format_rating(vote_average: Optional[float]) -> Optional[str]:
    """Note affichee ("7.5", "8"), None si absente ou nulle."""
    if not vote_average or vote_average <= 0:
        return None
    return f"{round(vote_average, 1):g}"


def format_release_info(details: MediaDetails) -> str:
    """Annee, suivie du nombre de saisons pour une serie ("2019 • 2 Seasons")."""
    year = str(details.year) if details.year else ""
    seasons = details.number_of_seasons
    if details.content_type is ContentType.SERIES and seasons:
        return f"{year} • {seasons} Season{'s' if seasons > 1 else ''}"
    return year


class EnricherService:
    """
    Enrichissement TMDB des items, sequentiel et tolerant aux pannes.

    Attributes:
        RATE_LIMIT_DELAY: Delai par defaut entre requetes API (0.25s = 4 req/s)

    Example:
        enricher = EnricherService(tmdb_client=client, rate_limiter=RateLimiter(0.25))
        items = await enricher.enrich_batch(items)
    """

    RATE_LIMIT_DELAY: float = 0.25

    def __init__(
        self,
        tmdb_client: Optional[IMetadataClient] = None,
        rate_limiter: Optional[RateLimiter] = None,
    ) -> None:
        """
        Initialise le service d'enrichissement.

        Args:
            tmdb_client: Client de metadonnees (enrichissement desactive si None)
            rate_limiter: Limiteur partage entre tous les appels API
        """
        self._client = tmdb_client
        self._limiter = rate_limiter or RateLimiter(self.RATE_LIMIT_DELAY)

    @property
    def enabled(self) -> bool:
        return self._client is not None

    async def enrich_batch(self, items: Sequence[ContentItem]) -> list[ContentItem]:
        """Enrichit les items un par un, dans l'ordre."""
        if not self.enabled:
            return list(items)
        enriched = [await self.enrich(item) for item in items]
        logger.info("Enrichissement termine", total=len(items))
        return enriched

    async def enrich(self, item: ContentItem) -> ContentItem:
        """
        Enrichit un item.

        Returns:
            L'item enrichi, ou l'item d'origine si aucune fiche n'est trouvee
        """
        if not self.enabled:
            return item
        try:
            result = await self._lookup(item)
        except Exception as e:
            logger.warning(f"Erreur d'enrichissement pour '{item.name}': {e}")
            return item

        if not result.ok:
            logger.debug(f"Pas d'enrichissement pour '{item.name}': {result.reason}")
            return item
        return self.to_item(result.value, original=item)

    async def _lookup(self, item: ContentItem) -> Result[MediaDetails]:
        if looks_like_imdb_id(item.id):
            async with self._limiter:
                details = await self._client.find_by_imdb_id(item.id, item.type)
            if details is not None:
                return Result.success(details)

        year = parse_year(item.release_info) or None
        for variant in title_search_variants(item.name):
            async with self._limiter:
                results = await self._client.search(variant, item.type, year=year)
            if not results:
                continue
            async with self._limiter:
                details = await self._client.get_details(results[0].id, item.type)
            if details is None:
                return Result.failure(f"details not found for TMDB id {results[0].id}")
            return Result.success(details)

        return Result.failure("no search match")

    async def details_by_tmdb_id(
        self, tmdb_id: str, content_type: ContentType
    ) -> Optional[ContentItem]:
        """Fiche d'un identifiant TMDB, ou None si introuvable ou en erreur."""
        if not self.enabled:
            return None
        try:
            async with self._limiter:
                details = await self._client.get_details(tmdb_id, content_type)
        except Exception as e:
            logger.warning(f"Erreur TMDB pour l'id {tmdb_id}: {e}")
            return None
        return self.to_item(details) if details else None

    async def details_by_imdb_id(
        self, imdb_id: str, content_type: ContentType
    ) -> Optional[ContentItem]:
        """Fiche d'un identifiant IMDb ; l'item conserve l'ID IMDb."""
        if not self.enabled:
            return None
        try:
            async with self._limiter:
                details = await self._client.find_by_imdb_id(imdb_id, content_type)
        except Exception as e:
            logger.warning(f"Erreur TMDB pour l'id {imdb_id}: {e}")
            return None
        if details is None:
            return None
        item = self.to_item(details)
        return dataclasses.replace(item, id=imdb_id)

    def to_item(
        self, details: MediaDetails, original: Optional[ContentItem] = None
    ) -> ContentItem:
        """
        Convertit une fiche TMDB en ContentItem.

        L'identifiant et les liens de l'item d'origine sont conserves ; un
        item sans identifiant recoit "{ns}:tmdb:{type}:{tmdbId}".
        """
        content_type = details.content_type
        fallback_title = original.name if original else details.title
        name = details.title or details.original_title or fallback_title

        item_id = original.id if original and original.id else (
            f"{ID_NAMESPACE}:tmdb:{content_type.value}:{details.id}"
        )

        return ContentItem(
            id=item_id,
            type=content_type,
            name=name,
            poster=self._client.poster_url(details.poster_path) or (original.poster if original else None),
            background=self._client.backdrop_url(details.backdrop_path) or (original.background if original else None),
            poster_shape=DEFAULT_POSTER_SHAPE,
            description=(
                details.overview
                or (original.description if original else "")
                or DEFAULT_DESCRIPTION.format(title=fallback_title)
            ),
            genres=list(details.genres) or [DEFAULT_GENRE],
            release_info=format_release_info(details),
            links=list(original.links) if original else [],
            imdb_rating=format_rating(details.vote_average),
            runtime=f"{details.runtime} min" if content_type is ContentType.MOVIE and details.runtime else None,
            language=details.original_language,
            country=details.origin_country,
            status=details.status,
            number_of_seasons=details.number_of_seasons if content_type is ContentType.SERIES else None,
            seasons=[
                SeasonSummary(
                    season_number=s.season_number,
                    name=s.name,
                    episode_count=s.episode_count,
                    air_date=s.air_date,
                )
                for s in details.seasons
            ],
        )

"""
Service de catalogue.

Resout une requete (type, catalogue) : selection des adaptateurs d'apres la
definition du catalogue, agregation, enrichissement optionnel, puis mise en
cache de la reponse. Chaque item servi est indexe par son identifiant pour
les recherches meta et stream ulterieures.
"""

from typing import Mapping, Optional, Sequence
from urllib.parse import parse_qs

from loguru import logger

from ottcatalog.adapters.api.cache import MemoryCache
from ottcatalog.core.entities.catalog import CatalogDefinition
from ottcatalog.core.entities.content import ContentItem
from ottcatalog.core.ports.sources import ISourceAdapter
from ottcatalog.core.value_objects.content_type import ContentType
from ottcatalog.services.aggregator import Aggregator
from ottcatalog.services.enricher import EnricherService

# Taille de page des catalogues (parametre "skip" du protocole)
PAGE_SIZE = 100


def parse_extra(extra: Optional[str]) -> dict[str, str]:
    """Parse le segment "extra" d'une route catalogue ("skip=100&search=rrr")."""
    if not extra:
        return {}
    return {key: values[0] for key, values in parse_qs(extra).items() if values}


class CatalogService:
    """
    Construction et cache des catalogues.

    Example:
        service = container.catalog_service()
        items = await service.get_catalog(ContentType.MOVIE, "indian-movies")
    """

    def __init__(
        self,
        catalogs: Sequence[CatalogDefinition],
        adapters: Sequence[ISourceAdapter],
        aggregator: Aggregator,
        enricher: EnricherService,
        cache: MemoryCache,
        enrich: bool = True,
    ) -> None:
        self._catalogs = {catalog.id: catalog for catalog in catalogs}
        self._adapters: Mapping[str, ISourceAdapter] = {a.name: a for a in adapters}
        self._aggregator = aggregator
        self._enricher = enricher
        self._cache = cache
        self._enrich = enrich

    @property
    def catalogs(self) -> list[CatalogDefinition]:
        return list(self._catalogs.values())

    def definition(self, content_type: ContentType, catalog_id: str) -> Optional[CatalogDefinition]:
        """Definition du catalogue, ou None si inconnu ou d'un autre type."""
        catalog = self._catalogs.get(catalog_id)
        if catalog is None or catalog.type is not content_type:
            return None
        return catalog

    async def get_catalog(
        self,
        content_type: ContentType,
        catalog_id: str,
        extra: Optional[str] = None,
    ) -> list[ContentItem]:
        """
        Items d'un catalogue.

        Args:
            content_type: Type demande
            catalog_id: Identifiant du catalogue
            extra: Parametres additionnels (skip, search, genre)

        Returns:
            Les items, ou une liste vide si le catalogue est inconnu
        """
        catalog = self.definition(content_type, catalog_id)
        if catalog is None:
            logger.info("Catalogue inconnu", type=content_type.value, catalog=catalog_id)
            return []

        items = await self._load(catalog)
        return self._apply_extra(items, parse_extra(extra))

    async def _load(self, catalog: CatalogDefinition) -> list[ContentItem]:
        cache_key = f"catalog:{catalog.type.value}:{catalog.id}"
        cached = await self._cache.get(cache_key)
        if cached is not None:
            return cached

        adapters = [self._adapters[name] for name in catalog.sources if name in self._adapters]
        items = await self._aggregator.aggregate(adapters, catalog.type, catalog.id)
        if self._enrich and self._enricher.enabled:
            items = await self._enricher.enrich_batch(items)

        await self._cache.set(cache_key, items)
        for item in items:
            await self._cache.set(f"item:{item.id}", item)
        logger.info("Catalogue construit", catalog=catalog.id, count=len(items))
        return items

    @staticmethod
    def _apply_extra(items: list[ContentItem], extra: dict[str, str]) -> list[ContentItem]:
        search = extra.get("search", "").strip().lower()
        if search:
            items = [item for item in items if search in item.name.lower()]
        genre = extra.get("genre")
        if genre:
            items = [item for item in items if genre in item.genres]
        try:
            skip = max(0, int(extra.get("skip", 0)))
        except ValueError:
            skip = 0
        return items[skip: skip + PAGE_SIZE]

    async def find_item(self, item_id: str) -> Optional[ContentItem]:
        """Item deja servi par un catalogue, ou None."""
        return await self._cache.get(f"item:{item_id}")

"""
Service meta : fiche detaillee d'un contenu a partir de son identifiant.
"""

from typing import Optional

from loguru import logger

from ottcatalog.core.entities.content import ContentItem
from ottcatalog.core.value_objects.content_type import ContentType
from ottcatalog.core.value_objects.identity import ContentIdentity, IdentityKind, parse_identity
from ottcatalog.services.catalog import CatalogService
from ottcatalog.services.enricher import EnricherService
from ottcatalog.utils.constants import ID_NAMESPACE


class MetaService:
    """
    Resolution des fiches meta.

    - {ns}:tmdb:{type}:{id} -> details TMDB
    - ID IMDb -> item du catalogue enrichi, sinon recherche TMDB /find
    - {titre}:{annee} -> enrichissement par recherche
    - autres identifiants {ns}: -> item du catalogue, enrichi
    """

    def __init__(self, catalog_service: CatalogService, enricher: EnricherService) -> None:
        self._catalog = catalog_service
        self._enricher = enricher

    async def get_meta(self, content_type: ContentType, item_id: str) -> Optional[ContentItem]:
        """Fiche du contenu, ou None si l'identifiant est inconnu ou mal forme."""
        identity = parse_identity(item_id, ID_NAMESPACE)
        if identity is None:
            logger.debug("Identifiant meta non reconnu", id=item_id)
            return None
        return await self.resolve(content_type, identity)

    async def resolve(
        self, content_type: ContentType, identity: ContentIdentity
    ) -> Optional[ContentItem]:
        if identity.kind is IdentityKind.TMDB:
            return await self._enricher.details_by_tmdb_id(identity.external_id, content_type)

        if identity.kind is IdentityKind.IMDB:
            # Un item deja servi par un catalogue garde ses liens
            cataloged = await self._catalog.find_item(identity.base_id)
            if cataloged is not None:
                return await self._enricher.enrich(cataloged)
            return await self._enricher.details_by_imdb_id(identity.external_id, content_type)

        if identity.kind is IdentityKind.TITLE_YEAR:
            thin = ContentItem(
                id=identity.base_id,
                type=content_type,
                name=identity.title,
                release_info=str(identity.year),
            )
            return await self._enricher.enrich(thin)

        item = await self._catalog.find_item(identity.base_id)
        if item is None:
            return None
        return await self._enricher.enrich(item)

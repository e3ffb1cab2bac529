"""
Service stream : streams d'un contenu (episode compris pour les series).
"""

from typing import Optional

from loguru import logger

from ottcatalog.core.entities.content import StreamRecord
from ottcatalog.core.ports.streams import StreamQuery
from ottcatalog.core.value_objects.content_type import ContentType
from ottcatalog.core.value_objects.identity import ContentIdentity, IdentityKind, parse_identity
from ottcatalog.services.meta import MetaService
from ottcatalog.services.stream_resolver import StreamResolver
from ottcatalog.utils.constants import ID_NAMESPACE
from ottcatalog.utils.helpers import parse_year, strip_title_suffixes


class StreamService:
    """
    Derive la requete "{titre} {annee}" de l'identifiant puis interroge le
    resolveur. Un identifiant mal forme ou inconnu donne une liste vide.
    """

    def __init__(
        self,
        resolver: StreamResolver,
        meta_service: MetaService,
        enabled: bool = True,
    ) -> None:
        self._resolver = resolver
        self._meta = meta_service
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    async def get_streams(self, content_type: ContentType, item_id: str) -> list[StreamRecord]:
        if not self._enabled:
            return []

        identity = parse_identity(item_id, ID_NAMESPACE)
        if identity is None:
            logger.debug("Identifiant stream non reconnu", id=item_id)
            return []

        if identity.kind is IdentityKind.TITLE_YEAR:
            query = f"{identity.title} {identity.year}"
        else:
            query = await self._query_from_meta(content_type, identity)
            if query is None:
                return []

        return await self._resolver.resolve(
            StreamQuery(
                query=query,
                content_type=content_type,
                season=identity.season,
                episode=identity.episode,
            )
        )

    async def _query_from_meta(
        self, content_type: ContentType, identity: ContentIdentity
    ) -> Optional[str]:
        item = await self._meta.resolve(content_type, identity)
        if item is None:
            return None
        title = strip_title_suffixes(item.name)
        year = parse_year(item.release_info)
        return f"{title} {year}" if year else title

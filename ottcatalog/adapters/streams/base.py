"""
Base commune des fournisseurs debrid.

Chaque fournisseur parcourt la bibliotheque de l'utilisateur sur son
service, retient les fichiers video dont le nom correspond au titre
recherche (et a l'episode demande pour les series), puis retourne les
liens de telechargement debrides.
"""

from abc import abstractmethod
from typing import Optional

import httpx
from loguru import logger

from ottcatalog.core.entities.content import StreamRecord
from ottcatalog.core.ports.streams import IStreamProvider, StreamQuery
from ottcatalog.core.value_objects.content_type import ContentType
from ottcatalog.utils.helpers import is_video_file, matches_episode, matches_query

# Nombre maximum de torrents de la bibliotheque examines par recherche
MAX_TORRENTS = 5


class DebridProvider(IStreamProvider):
    """
    Fournisseur debrid avec client httpx paresseux.

    Les sous-classes implementent _search() et peuvent lever : search()
    convertit toute erreur HTTP ou toute reponse de forme inattendue
    en liste vide.
    """

    BASE_URL = ""
    LABEL = ""

    def __init__(
        self,
        api_key: Optional[str],
        enabled: bool = True,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._api_key = api_key
        self._enabled = enabled
        self._timeout = timeout
        self._client = client

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    @property
    def enabled(self) -> bool:
        """Actif = active dans la configuration ET muni d'une cle API."""
        return self._enabled and self.configured

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._api_key}"}

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.BASE_URL,
                headers=self._auth_headers(),
                timeout=self._timeout,
            )
        return self._client

    async def search(self, query: StreamQuery) -> list[StreamRecord]:
        if not self.enabled:
            return []
        try:
            streams = await self._search(query)
        except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Recherche debrid en erreur", provider=self.name, error=str(e))
            return []
        logger.debug("Streams debrid trouves", provider=self.name, count=len(streams))
        return streams

    @abstractmethod
    async def _search(self, query: StreamQuery) -> list[StreamRecord]:
        ...

    @staticmethod
    def matches_title(name: Optional[str], query: StreamQuery) -> bool:
        """Le nom d'un torrent de la bibliotheque correspond-il au titre recherche."""
        return bool(name) and matches_query(name, query.query)

    @staticmethod
    def accepts_file(filename: Optional[str], query: StreamQuery) -> bool:
        """Fichier video, et pour une serie, du bon episode."""
        if not is_video_file(filename):
            return False
        if query.content_type is ContentType.SERIES:
            return matches_episode(filename, query.season, query.episode)
        return True

    def _record(self, url: str, filename: str, group_id: str) -> StreamRecord:
        return StreamRecord(
            url=url,
            title=f"{self.LABEL} - {filename}",
            binge_group=f"{self.name.lower()}-{group_id}",
            filename=filename,
        )

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

"""
Index torrent de repli (API compatible apibay).

Interroge les miroirs dans l'ordre ; le premier qui repond une liste JSON
l'emporte. Chaque resultat devient un lien magnet.
"""

from typing import Optional, Sequence
from urllib.parse import quote

import httpx
from loguru import logger

from ottcatalog.core.entities.content import StreamRecord
from ottcatalog.core.ports.streams import IStreamProvider, StreamQuery
from ottcatalog.utils.constants import (
    EMPTY_INFO_HASH,
    TORRENT_MIRRORS,
    TORRENT_RESULTS_PER_MIRROR,
    TORRENT_USER_AGENT,
)


def magnet_link(info_hash: str, name: str) -> str:
    return f"magnet:?xt=urn:btih:{info_hash}&dn={quote(name)}"


class TorrentIndex(IStreamProvider):
    """Recherche de torrents publics, utilisee quand aucun service debrid ne repond."""

    def __init__(
        self,
        mirrors: Sequence[str] = TORRENT_MIRRORS,
        timeout: float = 5.0,
        max_results: int = TORRENT_RESULTS_PER_MIRROR,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._mirrors = list(mirrors)
        self._timeout = timeout
        self._max_results = max_results
        self._client = client

    @property
    def name(self) -> str:
        return "torrent"

    @property
    def configured(self) -> bool:
        return bool(self._mirrors)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"User-Agent": TORRENT_USER_AGENT},
                timeout=self._timeout,
            )
        return self._client

    async def _query_mirrors(self, query: str) -> list[dict]:
        for mirror in self._mirrors:
            url = f"{mirror.rstrip('/')}/q.php"
            try:
                response = await self._get_client().get(url, params={"q": query, "cat": 0})
                response.raise_for_status()
                data = response.json()
            except (httpx.HTTPError, ValueError) as e:
                logger.debug("Miroir torrent indisponible", mirror=mirror, error=str(e))
                continue
            if isinstance(data, list):
                return data
        return []

    async def search(self, query: StreamQuery) -> list[StreamRecord]:
        results = await self._query_mirrors(query.query)

        streams = []
        for torrent in results[: self._max_results]:
            if not isinstance(torrent, dict):
                continue
            info_hash = torrent.get("info_hash")
            name = torrent.get("name")
            if not info_hash or not name or info_hash == EMPTY_INFO_HASH:
                continue
            streams.append(
                StreamRecord(
                    url=magnet_link(info_hash, name),
                    title=f"Torrent - {name}",
                    binge_group=f"torrent-{info_hash}",
                    filename=name,
                    info_hash=info_hash,
                    file_idx=0,
                )
            )
        logger.debug("Streams torrent trouves", count=len(streams))
        return streams

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

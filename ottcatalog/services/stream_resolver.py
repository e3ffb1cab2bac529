"""
Resolveur de streams.

Deroulement d'une requete:
    NotStarted -> ProvidersInFlight
        -> au moins un stream : Done
        -> aucun stream : TorrentFallbackInFlight -> Done

Les fournisseurs debrid configures sont interroges en parallele ; si leur
resultat combine est vide, l'index torrent prend le relais. Les streams
sont ensuite filtres (fichier video, saison/episode), dedupliques par URL
et memorises 30 minutes par (requete, type, saison, episode).
"""

import asyncio
from enum import Enum
from typing import Optional, Sequence

from loguru import logger

from ottcatalog.adapters.api.cache import MemoryCache
from ottcatalog.core.entities.content import StreamRecord
from ottcatalog.core.ports.streams import IStreamProvider, StreamQuery
from ottcatalog.core.value_objects.content_type import ContentType
from ottcatalog.utils.constants import TORRENT_MAX_RESULTS
from ottcatalog.utils.helpers import is_video_file, matches_episode, matches_season


class ResolutionState(Enum):
    """Etapes d'une resolution de streams."""

    NOT_STARTED = "not_started"
    PROVIDERS_IN_FLIGHT = "providers_in_flight"
    TORRENT_FALLBACK_IN_FLIGHT = "torrent_fallback_in_flight"
    DONE = "done"


def dedupe_by_url(streams: Sequence[StreamRecord]) -> list[StreamRecord]:
    """Deduplique par URL, le premier rencontre l'emporte."""
    seen: set[str] = set()
    unique = []
    for stream in streams:
        if stream.url in seen:
            continue
        seen.add(stream.url)
        unique.append(stream)
    return unique


def keep_stream(stream: StreamRecord, query: StreamQuery) -> bool:
    """
    Filtre un stream selon son nom de fichier.

    - Fichier direct : extension video obligatoire, et pour une serie avec
      saison/episode connus, le nom doit encoder le meme episode
    - Torrent (nom sans extension) : seul le jeton de saison est verifie
    """
    filename = stream.filename or ""
    is_series = query.content_type is ContentType.SERIES
    if stream.is_torrent:
        return not is_series or matches_season(filename, query.season)
    if not is_video_file(filename):
        return False
    if is_series and query.season is not None and query.episode is not None:
        return matches_episode(filename, query.season, query.episode)
    return True


class StreamResolver:
    """
    Agregation des streams des fournisseurs avec repli torrent.

    Example:
        resolver = StreamResolver(providers, torrent_index, cache=MemoryCache(ttl=1800))
        streams = await resolver.resolve(StreamQuery("RRR 2022", ContentType.MOVIE))
    """

    def __init__(
        self,
        providers: Sequence[IStreamProvider],
        torrent_index: Optional[IStreamProvider],
        cache: MemoryCache,
        max_torrent_results: int = TORRENT_MAX_RESULTS,
    ) -> None:
        self._providers = list(providers)
        self._torrent_index = torrent_index
        self._cache = cache
        self._max_torrent_results = max_torrent_results
        self.last_state = ResolutionState.NOT_STARTED

    @property
    def active_providers(self) -> list[IStreamProvider]:
        """Fournisseurs actives et configures."""
        return [p for p in self._providers if getattr(p, "enabled", p.configured)]

    async def resolve(self, query: StreamQuery) -> list[StreamRecord]:
        """
        Resout les streams d'une requete.

        Returns:
            Streams filtres et dedupliques (liste vide si rien n'est trouve)
        """
        cached = await self._cache.get(query.cache_key)
        if cached is not None:
            logger.debug("Streams servis depuis le cache", query=query.query)
            return cached

        self.last_state = ResolutionState.PROVIDERS_IN_FLIGHT
        streams = await self._search_providers(query)

        if not streams and self._torrent_index is not None:
            self.last_state = ResolutionState.TORRENT_FALLBACK_IN_FLIGHT
            logger.info("Aucun stream debrid, repli sur l'index torrent", query=query.query)
            streams = await self._search_torrents(query)

        unique = dedupe_by_url([s for s in streams if keep_stream(s, query)])
        self.last_state = ResolutionState.DONE

        await self._cache.set(query.cache_key, unique)
        logger.info("Streams resolus", query=query.query, count=len(unique))
        return unique

    async def _search_providers(self, query: StreamQuery) -> list[StreamRecord]:
        providers = self.active_providers
        outcomes = await asyncio.gather(
            *(provider.search(query) for provider in providers),
            return_exceptions=True,
        )

        streams: list[StreamRecord] = []
        for provider, outcome in zip(providers, outcomes):
            if isinstance(outcome, BaseException):
                logger.warning("Fournisseur de streams en erreur", provider=provider.name, error=str(outcome))
                continue
            logger.debug("Streams fournisseur", provider=provider.name, count=len(outcome))
            streams.extend(outcome)
        return streams

    async def _search_torrents(self, query: StreamQuery) -> list[StreamRecord]:
        try:
            streams = await self._torrent_index.search(query)
        except Exception as e:
            logger.warning(f"Repli torrent en echec: {e}")
            return []
        return streams[: self._max_torrent_results]

    def status(self) -> dict[str, dict[str, bool]]:
        """Etat de chaque fournisseur : {nom: {enabled, configured}}."""
        return {
            provider.name: {
                "enabled": bool(getattr(provider, "enabled", provider.configured)),
                "configured": provider.configured,
            }
            for provider in self._providers
        }

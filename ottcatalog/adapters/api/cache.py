"""
Cache memoire borne avec TTL pour les appels sortants.

Une instance par preoccupation (requetes HTTP, reponses de catalogue,
recherches de streams, API de metadonnees), creee une seule fois par le
conteneur et injectee. Le cache vit uniquement en memoire : un redemarrage
du processus le vide.

Regles:
- Une entree dont l'age depasse strictement le TTL n'est plus servie
- Au-dela de max_size entrees, la moins recemment utilisee est evincee
"""

import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass
class CacheEntry:
    """Valeur memorisee et instant de stockage (horloge monotone, secondes)."""

    value: Any
    timestamp: float
    ttl: float


class MemoryCache:
    """
    Cache asynchrone LRU avec TTL.

    Les methodes sont async pour rester interchangeables avec un cache
    distant, mais n'effectuent aucune entree/sortie.

    Attributes:
        SEARCH_TTL: Duree de vie des resultats de recherche (24h)
        DETAILS_TTL: Duree de vie des details (7 jours)

    Example:
        cache = MemoryCache(ttl=6 * 3600, max_size=1000)
        await cache.set("tmdb:search:rrr", results)
        data = await cache.get("tmdb:search:rrr")
    """

    SEARCH_TTL = 24 * 60 * 60
    DETAILS_TTL = 7 * 24 * 60 * 60

    def __init__(
        self,
        ttl: float = 6 * 60 * 60,
        max_size: int = 1000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialise le cache.

        Args:
            ttl: Duree de vie par defaut en secondes
            max_size: Nombre maximum d'entrees avant eviction LRU
            clock: Horloge en secondes (injectable pour les tests)
        """
        self._ttl = ttl
        self._max_size = max(1, max_size)
        self._clock = clock
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()

    @property
    def ttl(self) -> float:
        return self._ttl

    async def get(self, key: str) -> Optional[Any]:
        """
        Recupere une valeur du cache.

        Args:
            key: Cle unique identifiant la donnee

        Returns:
            La valeur stockee ou None si absente ou expiree
        """
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.timestamp > entry.ttl:
            del self._entries[key]
            return None
        self._entries.move_to_end(key)
        return entry.value

    async def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """
        Stocke une valeur dans le cache.

        Args:
            key: Cle unique identifiant la donnee
            value: Valeur a stocker
            ttl: Duree de vie en secondes (TTL du cache si absent)
        """
        self._entries[key] = CacheEntry(
            value=value,
            timestamp=self._clock(),
            ttl=self._ttl if ttl is None else ttl,
        )
        self._entries.move_to_end(key)
        while len(self._entries) > self._max_size:
            self._entries.popitem(last=False)

    async def set_search(self, key: str, value: Any) -> None:
        """Stocke un resultat de recherche (TTL de 24h)."""
        await self.set(key, value, self.SEARCH_TTL)

    async def set_details(self, key: str, value: Any) -> None:
        """Stocke les details d'un media (TTL de 7 jours)."""
        await self.set(key, value, self.DETAILS_TTL)

    async def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

"""
Limiteur de debit partage pour les appels a l'API de metadonnees.

Garantit un intervalle minimal entre deux acquisitions, quel que soit
l'ordre ou la concurrence des appelants. Le premier appel n'attend pas.
"""

import asyncio
import time
from typing import Awaitable, Callable, Optional


class RateLimiter:
    """
    Espacement minimal entre deux appels (0.25s = 4 req/s pour TMDB).

    Example:
        limiter = RateLimiter(min_interval=0.25)
        async with limiter:
            await client.search(...)
    """

    def __init__(
        self,
        min_interval: float = 0.25,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._min_interval = max(0.0, min_interval)
        self._clock = clock
        self._sleep = sleep
        self._last: Optional[float] = None
        self._lock = asyncio.Lock()

    @property
    def min_interval(self) -> float:
        return self._min_interval

    async def acquire(self) -> None:
        """Attend le temps necessaire pour respecter l'intervalle minimal."""
        async with self._lock:
            if self._last is not None and self._min_interval > 0:
                wait = self._min_interval - (self._clock() - self._last)
                if wait > 0:
                    await self._sleep(wait)
            self._last = self._clock()

    async def __aenter__(self) -> "RateLimiter":
        await self.acquire()
        return self

    async def __aexit__(self, *exc_info) -> None:
        return None

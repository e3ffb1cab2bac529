"""
Cache de recuperation HTTP.

Enveloppe httpx.AsyncClient d'un MemoryCache : une meme requete (URL +
options) n'est emise qu'une fois par periode de TTL. Les echecs ne sont
pas memorises, la requete suivante retente l'appel.

Usage:
    fetcher = CachedFetcher(cache=MemoryCache(ttl=6 * 3600))
    html = await fetcher.fetch("https://www.aha.video/movies")
    data = await fetcher.fetch(url, response_type="json", headers={...})
"""

import json
from typing import Any, Optional

import httpx
from loguru import logger

from ottcatalog.adapters.api.cache import MemoryCache
from ottcatalog.core.ports.http import IFetcher
from ottcatalog.core.value_objects.result import Result
from ottcatalog.utils.constants import DEFAULT_USER_AGENT


def cache_key(url: str, options: dict[str, Any]) -> str:
    """Cle deterministe : JSON trie de l'URL et des options."""
    return json.dumps({"url": url, "options": options}, sort_keys=True, default=str)


class CachedFetcher(IFetcher):
    """
    Implementation de IFetcher avec cache memoire.

    Attributes:
        _cache: Cache dedie aux requetes sortantes
        _timeout: Timeout par defaut en secondes
        _user_agent: User-Agent envoye sur chaque requete
    """

    def __init__(
        self,
        cache: MemoryCache,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._cache = cache
        self._timeout = timeout
        self._user_agent = user_agent
        self._client = client

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(follow_redirects=True)
        return self._client

    async def fetch(self, url: str, **options: Any) -> Optional[Any]:
        """
        Recupere une URL via le cache.

        Returns:
            Corps de la reponse, ou None en cas d'echec
        """
        result = await self.fetch_result(url, **options)
        if not result.ok:
            return None
        return result.value

    async def fetch_result(self, url: str, **options: Any) -> Result[Any]:
        """Variante de fetch() conservant la raison d'un echec."""
        key = cache_key(url, options)
        cached = await self._cache.get(key)
        if cached is not None:
            logger.debug("Cache HTTP: hit", url=url)
            return Result.success(cached)

        result = await self._request(url, **options)
        if result.ok:
            await self._cache.set(key, result.value)
        else:
            logger.warning("Echec de recuperation", url=url, reason=result.reason)
        return result

    async def _request(
        self,
        url: str,
        method: str = "GET",
        headers: Optional[dict[str, str]] = None,
        params: Optional[dict[str, Any]] = None,
        json: Optional[Any] = None,
        data: Optional[dict[str, Any]] = None,
        timeout: Optional[float] = None,
        response_type: str = "text",
    ) -> Result[Any]:
        request_headers = {"User-Agent": self._user_agent}
        request_headers.update(headers or {})
        try:
            response = await self._get_client().request(
                method.upper(),
                url,
                headers=request_headers,
                params=params,
                json=json,
                data=data,
                timeout=timeout or self._timeout,
            )
            response.raise_for_status()
        except httpx.TimeoutException:
            return Result.failure("timeout")
        except httpx.HTTPStatusError as e:
            return Result.failure(f"HTTP {e.response.status_code}")
        except httpx.HTTPError as e:
            return Result.failure(f"{type(e).__name__}: {e}")

        if response_type == "json":
            try:
                return Result.success(response.json())
            except ValueError:
                return Result.failure("invalid JSON body")
        return Result.success(response.text)

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

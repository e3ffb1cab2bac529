"""
Tests du cache de recuperation HTTP (CachedFetcher).
"""

import httpx
import pytest
import respx

from ottcatalog.adapters.api.cache import MemoryCache
from ottcatalog.adapters.http.fetcher import CachedFetcher, cache_key
from tests.fixtures.factories import ManualClock

URL = "https://www.aha.video/movies"


@pytest.fixture
def fetch_cache(clock: ManualClock) -> MemoryCache:
    return MemoryCache(ttl=6 * 3600, clock=clock)


@pytest.fixture
def fetcher(fetch_cache: MemoryCache) -> CachedFetcher:
    return CachedFetcher(cache=fetch_cache, timeout=5, user_agent="TestAgent/1.0")


class TestCacheKey:
    """Tests de la cle de cache."""

    def test_key_independent_of_option_order(self) -> None:
        first = cache_key(URL, {"timeout": 5, "headers": {"A": "1"}})
        second = cache_key(URL, {"headers": {"A": "1"}, "timeout": 5})
        assert first == second

    def test_key_differs_by_options(self) -> None:
        assert cache_key(URL, {}) != cache_key(URL, {"response_type": "json"})


class TestCachedFetcher:
    """Tests de CachedFetcher.fetch()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_fetch_returns_body_and_sends_user_agent(self, fetcher: CachedFetcher):
        route = respx.get(URL).mock(return_value=httpx.Response(200, text="<html></html>"))

        body = await fetcher.fetch(URL)

        assert body == "<html></html>"
        assert route.calls[0].request.headers["User-Agent"] == "TestAgent/1.0"

    @pytest.mark.asyncio
    @respx.mock
    async def test_second_fetch_served_from_cache(self, fetcher: CachedFetcher):
        """Une meme URL n'est demandee qu'une fois par periode de TTL."""
        route = respx.get(URL).mock(return_value=httpx.Response(200, text="page"))

        await fetcher.fetch(URL)
        body = await fetcher.fetch(URL)

        assert body == "page"
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_refetch_after_ttl(self, fetcher: CachedFetcher, clock: ManualClock):
        """Au-dela du TTL, la requete est emise de nouveau."""
        route = respx.get(URL).mock(return_value=httpx.Response(200, text="page"))

        await fetcher.fetch(URL)
        clock.advance(6 * 3600 + 0.001)
        await fetcher.fetch(URL)

        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_failure_returns_none_and_is_not_cached(self, fetcher: CachedFetcher):
        route = respx.get(URL).mock(
            side_effect=[httpx.Response(503), httpx.Response(200, text="ok")]
        )

        assert await fetcher.fetch(URL) is None
        assert await fetcher.fetch(URL) == "ok"
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_failure_reason_is_kept(self, fetcher: CachedFetcher):
        respx.get(URL).mock(return_value=httpx.Response(404))

        result = await fetcher.fetch_result(URL)

        assert not result.ok
        assert result.reason == "HTTP 404"

    @pytest.mark.asyncio
    @respx.mock
    async def test_timeout_returns_none(self, fetcher: CachedFetcher):
        respx.get(URL).mock(side_effect=httpx.ReadTimeout("slow"))

        result = await fetcher.fetch_result(URL)

        assert not result.ok
        assert result.reason == "timeout"

    @pytest.mark.asyncio
    @respx.mock
    async def test_json_response_type(self, fetcher: CachedFetcher):
        respx.get("https://api.example.com/trending").mock(
            return_value=httpx.Response(200, json={"movies": ["RRR"]})
        )

        data = await fetcher.fetch("https://api.example.com/trending", response_type="json")

        assert data == {"movies": ["RRR"]}

    @pytest.mark.asyncio
    @respx.mock
    async def test_invalid_json_is_failure(self, fetcher: CachedFetcher):
        respx.get("https://api.example.com/trending").mock(
            return_value=httpx.Response(200, text="not json")
        )

        result = await fetcher.fetch_result("https://api.example.com/trending", response_type="json")

        assert not result.ok

    @pytest.mark.asyncio
    @respx.mock
    async def test_extra_headers_are_merged(self, fetcher: CachedFetcher):
        route = respx.get(URL).mock(return_value=httpx.Response(200, text="page"))

        await fetcher.fetch(URL, headers={"Referer": "https://www.google.com/"})

        headers = route.calls[0].request.headers
        assert headers["Referer"] == "https://www.google.com/"
        assert headers["User-Agent"] == "TestAgent/1.0"

"""
Tests for TMDBClient - TMDB API client implementation.

Uses respx to mock httpx calls and verifies:
- Search returns SearchResult objects (movie and tv endpoints)
- Details returns MediaDetails (seasons, runtime, origin country)
- /find lookup by IMDb id
- Cache is checked BEFORE API calls (cache-first pattern)
"""

from unittest.mock import AsyncMock

import httpx
import pytest
import respx

from ottcatalog.adapters.api.cache import MemoryCache
from ottcatalog.adapters.api.tmdb_client import TMDBClient
from ottcatalog.core.ports.api_clients import IMetadataClient, MediaDetails, SearchResult
from ottcatalog.core.value_objects.content_type import ContentType
from tests.fixtures.tmdb_responses import (
    TMDB_FIND_EMPTY_RESPONSE,
    TMDB_FIND_MOVIE_RESPONSE,
    TMDB_FIND_TV_RESPONSE,
    TMDB_MOVIE_DETAILS_RESPONSE,
    TMDB_SEARCH_EMPTY_RESPONSE,
    TMDB_SEARCH_MOVIE_RESPONSE,
    TMDB_SEARCH_TV_RESPONSE,
    TMDB_TV_DETAILS_RESPONSE,
)

BASE = "https://api.themoviedb.org/3"


@pytest.fixture
def mock_cache() -> AsyncMock:
    """Mock MemoryCache for testing."""
    cache = AsyncMock(spec=MemoryCache)
    cache.get.return_value = None  # Cache miss by default
    return cache


@pytest.fixture
def tmdb_client(mock_cache: AsyncMock) -> TMDBClient:
    """TMDBClient instance with mocked cache."""
    return TMDBClient(api_key="test_api_key", cache=mock_cache)


class TestTMDBClientInterface:
    """Test TMDBClient implements IMetadataClient correctly."""

    def test_implements_interface(self, tmdb_client: TMDBClient):
        assert isinstance(tmdb_client, IMetadataClient)

    def test_source_property_returns_tmdb(self, tmdb_client: TMDBClient):
        assert tmdb_client.source == "tmdb"

    def test_poster_url_uses_configured_size(self, tmdb_client: TMDBClient):
        assert tmdb_client.poster_url("/abc.jpg") == "https://image.tmdb.org/t/p/w500/abc.jpg"
        assert tmdb_client.backdrop_url("/bg.jpg") == "https://image.tmdb.org/t/p/original/bg.jpg"

    def test_image_urls_none_without_path(self, tmdb_client: TMDBClient):
        assert tmdb_client.poster_url(None) is None
        assert tmdb_client.backdrop_url("") is None


class TestTMDBSearch:
    """Tests for TMDBClient.search() method."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_movie_returns_results(self, tmdb_client: TMDBClient):
        route = respx.get(f"{BASE}/search/movie").mock(
            return_value=httpx.Response(200, json=TMDB_SEARCH_MOVIE_RESPONSE)
        )

        results = await tmdb_client.search("RRR", ContentType.MOVIE, year=2022)

        assert len(results) == 1
        assert isinstance(results[0], SearchResult)
        assert results[0].id == "579974"
        assert results[0].title == "RRR"
        assert results[0].year == 2022
        params = route.calls[0].request.url.params
        assert params["year"] == "2022"
        assert params["region"] == "IN"
        assert params["api_key"] == "test_api_key"

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_tv_uses_first_air_date_year(self, tmdb_client: TMDBClient):
        route = respx.get(f"{BASE}/search/tv").mock(
            return_value=httpx.Response(200, json=TMDB_SEARCH_TV_RESPONSE)
        )

        results = await tmdb_client.search("The Family Man", ContentType.SERIES, year=2019)

        assert results[0].id == "93352"
        assert results[0].year == 2019
        assert results[0].original_title is None
        assert route.calls[0].request.url.params["first_air_date_year"] == "2019"

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_empty_results(self, tmdb_client: TMDBClient):
        respx.get(f"{BASE}/search/movie").mock(
            return_value=httpx.Response(200, json=TMDB_SEARCH_EMPTY_RESPONSE)
        )

        assert await tmdb_client.search("zzzz", ContentType.MOVIE) == []

    @pytest.mark.asyncio
    async def test_search_checks_cache_first(
        self, tmdb_client: TMDBClient, mock_cache: AsyncMock
    ):
        """A cache hit must not trigger any HTTP call."""
        cached = [SearchResult(id="1", title="Cached", source="tmdb")]
        mock_cache.get.return_value = cached

        with respx.mock(assert_all_called=False) as router:
            route = router.get(f"{BASE}/search/movie")
            results = await tmdb_client.search("Cached", ContentType.MOVIE)

        assert results == cached
        assert not route.called
        mock_cache.get.assert_awaited_once_with("tmdb:search:movie:Cached:")

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_stores_results_in_cache(
        self, tmdb_client: TMDBClient, mock_cache: AsyncMock
    ):
        respx.get(f"{BASE}/search/movie").mock(
            return_value=httpx.Response(200, json=TMDB_SEARCH_MOVIE_RESPONSE)
        )

        results = await tmdb_client.search("RRR", ContentType.MOVIE, year=2022)

        mock_cache.set_search.assert_awaited_once_with("tmdb:search:movie:RRR:2022", results)

    @pytest.mark.asyncio
    @respx.mock
    async def test_v4_token_sent_as_bearer(self, mock_cache: AsyncMock):
        token = "x" * 64
        client = TMDBClient(api_key=token, cache=mock_cache)
        route = respx.get(f"{BASE}/search/movie").mock(
            return_value=httpx.Response(200, json=TMDB_SEARCH_EMPTY_RESPONSE)
        )

        await client.search("RRR", ContentType.MOVIE)

        request = route.calls[0].request
        assert request.headers["Authorization"] == f"Bearer {token}"
        assert "api_key" not in request.url.params


class TestTMDBDetails:
    """Tests for TMDBClient.get_details() method."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_movie_details(self, tmdb_client: TMDBClient):
        respx.get(f"{BASE}/movie/579974").mock(
            return_value=httpx.Response(200, json=TMDB_MOVIE_DETAILS_RESPONSE)
        )

        details = await tmdb_client.get_details("579974", ContentType.MOVIE)

        assert isinstance(details, MediaDetails)
        assert details.title == "RRR"
        assert details.year == 2022
        assert details.runtime == 187
        assert details.genres == ("Action", "Drama")
        assert details.origin_country == "IN"
        assert details.imdb_id == "tt8178634"

    @pytest.mark.asyncio
    @respx.mock
    async def test_tv_details_skip_specials(self, tmdb_client: TMDBClient):
        respx.get(f"{BASE}/tv/93352").mock(
            return_value=httpx.Response(200, json=TMDB_TV_DETAILS_RESPONSE)
        )

        details = await tmdb_client.get_details("93352", ContentType.SERIES)

        assert details.number_of_seasons == 2
        assert [s.season_number for s in details.seasons] == [1, 2]
        assert details.origin_country == "IN"
        assert details.original_language == "hi"
        assert details.imdb_id == "tt9544034"

    @pytest.mark.asyncio
    @respx.mock
    async def test_details_not_found_returns_none(self, tmdb_client: TMDBClient):
        respx.get(f"{BASE}/movie/999").mock(return_value=httpx.Response(404))

        assert await tmdb_client.get_details("999", ContentType.MOVIE) is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_details_server_error_propagates(self, tmdb_client: TMDBClient):
        respx.get(f"{BASE}/movie/1").mock(return_value=httpx.Response(500))

        with pytest.raises(httpx.HTTPStatusError):
            await tmdb_client.get_details("1", ContentType.MOVIE)


class TestTMDBFind:
    """Tests for TMDBClient.find_by_imdb_id() method."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_find_movie_then_details(self, tmdb_client: TMDBClient):
        find_route = respx.get(f"{BASE}/find/tt8178634").mock(
            return_value=httpx.Response(200, json=TMDB_FIND_MOVIE_RESPONSE)
        )
        respx.get(f"{BASE}/movie/579974").mock(
            return_value=httpx.Response(200, json=TMDB_MOVIE_DETAILS_RESPONSE)
        )

        details = await tmdb_client.find_by_imdb_id("tt8178634", ContentType.MOVIE)

        assert details.id == "579974"
        assert find_route.calls[0].request.url.params["external_source"] == "imdb_id"

    @pytest.mark.asyncio
    @respx.mock
    async def test_find_without_type_tries_series(self, tmdb_client: TMDBClient):
        respx.get(f"{BASE}/find/tt9544034").mock(
            return_value=httpx.Response(200, json=TMDB_FIND_TV_RESPONSE)
        )
        respx.get(f"{BASE}/tv/93352").mock(
            return_value=httpx.Response(200, json=TMDB_TV_DETAILS_RESPONSE)
        )

        details = await tmdb_client.find_by_imdb_id("tt9544034")

        assert details.content_type is ContentType.SERIES
        assert details.title == "The Family Man"

    @pytest.mark.asyncio
    @respx.mock
    async def test_find_wrong_type_returns_none(self, tmdb_client: TMDBClient):
        respx.get(f"{BASE}/find/tt9544034").mock(
            return_value=httpx.Response(200, json=TMDB_FIND_TV_RESPONSE)
        )

        assert await tmdb_client.find_by_imdb_id("tt9544034", ContentType.MOVIE) is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_find_no_match(self, tmdb_client: TMDBClient):
        respx.get(f"{BASE}/find/tt0000001").mock(
            return_value=httpx.Response(200, json=TMDB_FIND_EMPTY_RESPONSE)
        )

        assert await tmdb_client.find_by_imdb_id("tt0000001") is None

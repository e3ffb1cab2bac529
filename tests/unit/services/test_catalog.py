"""
Tests du service de catalogue et du manifeste.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from ottcatalog.adapters.api.cache import MemoryCache
from ottcatalog.core.entities.catalog import CatalogDefinition
from ottcatalog.core.ports.sources import ISourceAdapter
from ottcatalog.core.value_objects.content_type import ContentType
from ottcatalog.services.aggregator import Aggregator
from ottcatalog.services.catalog import CatalogService, parse_extra
from ottcatalog.services.enricher import EnricherService
from ottcatalog.services.manifest import build_manifest
from ottcatalog.utils.constants import CATALOGS
from ottcatalog.utils.datasets import CURATED_TITLES
from tests.fixtures.factories import make_item

MOVIE = ContentType.MOVIE
SERIES = ContentType.SERIES

DEFINITIONS = (
    CatalogDefinition("indian-movies", MOVIE, "Indian OTT Movies", ("platforms", "curated")),
    CatalogDefinition("trending-series", SERIES, "Trending Shows", ("trending",)),
)


def adapter(name: str, items) -> MagicMock:
    mock = MagicMock(spec=ISourceAdapter)
    mock.name = name
    mock.resolve = AsyncMock(return_value=items)
    return mock


@pytest.fixture
def adapters():
    return [
        adapter("platforms", [make_item("RRR", release_info="2022", item_id="ottcatalog:aha:movie:0")]),
        adapter("curated", [make_item("Leo", release_info="2023", item_id="tt15654328", genres=["Action"])]),
        adapter("trending", [make_item("Kota Factory", SERIES, item_id="ottcatalog:trending:series:1")]),
    ]


@pytest.fixture
def enricher():
    mock = MagicMock(spec=EnricherService)
    mock.enabled = True
    mock.enrich_batch = AsyncMock(side_effect=lambda items: items)
    return mock


@pytest.fixture
def service(adapters, enricher) -> CatalogService:
    return CatalogService(
        catalogs=DEFINITIONS,
        adapters=adapters,
        aggregator=Aggregator(),
        enricher=enricher,
        cache=MemoryCache(ttl=3600),
    )


class TestParseExtra:
    def test_parse(self) -> None:
        assert parse_extra("skip=100&search=kota") == {"skip": "100", "search": "kota"}
        assert parse_extra(None) == {}


class TestCatalogService:
    """Tests de CatalogService.get_catalog()."""

    @pytest.mark.asyncio
    async def test_uses_only_catalog_sources(self, service, adapters) -> None:
        items = await service.get_catalog(MOVIE, "indian-movies")

        assert [item.name for item in items] == ["Leo", "RRR"]
        adapters[2].resolve.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_catalog_or_type_mismatch(self, service) -> None:
        assert await service.get_catalog(MOVIE, "nope") == []
        assert await service.get_catalog(SERIES, "indian-movies") == []

    @pytest.mark.asyncio
    async def test_response_is_cached(self, service, adapters, enricher) -> None:
        await service.get_catalog(MOVIE, "indian-movies")
        await service.get_catalog(MOVIE, "indian-movies")

        assert adapters[0].resolve.await_count == 1
        assert enricher.enrich_batch.await_count == 1

    @pytest.mark.asyncio
    async def test_enrichment_disabled(self, adapters, enricher) -> None:
        service = CatalogService(DEFINITIONS, adapters, Aggregator(), enricher, MemoryCache(), enrich=False)

        await service.get_catalog(MOVIE, "indian-movies")

        enricher.enrich_batch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_search_genre_and_skip(self, service) -> None:
        assert [i.name for i in await service.get_catalog(MOVIE, "indian-movies", "search=rr")] == ["RRR"]
        assert [i.name for i in await service.get_catalog(MOVIE, "indian-movies", "genre=Action")] == ["Leo"]
        assert [i.name for i in await service.get_catalog(MOVIE, "indian-movies", "skip=1")] == ["RRR"]
        assert await service.get_catalog(MOVIE, "indian-movies", "skip=100") == []

    @pytest.mark.asyncio
    async def test_served_items_are_indexed(self, service) -> None:
        await service.get_catalog(SERIES, "trending-series")

        item = await service.find_item("ottcatalog:trending:series:1")

        assert item.name == "Kota Factory"
        assert await service.find_item("ottcatalog:unknown:movie:1") is None


class TestManifest:
    def test_manifest_lists_catalogs(self) -> None:
        manifest = build_manifest(CATALOGS, version="1.0.0")

        assert manifest["resources"] == ["catalog", "meta"]
        assert manifest["types"] == ["movie", "series"]
        assert len(manifest["catalogs"]) == len(CATALOGS)
        assert manifest["catalogs"][0]["id"] == "indian-movies"
        assert {"name": "search"} in manifest["catalogs"][0]["extra"]
        assert "tt" in manifest["idPrefixes"]

    def test_stream_resource_when_enabled(self) -> None:
        manifest = build_manifest(CATALOGS, version="1.0.0", streams_enabled=True)

        assert "stream" in manifest["resources"]

    def test_genre_filter_is_declared(self) -> None:
        manifest = build_manifest(CATALOGS, version="1.0.0")

        genre = next(e for e in manifest["catalogs"][0]["extra"] if e["name"] == "genre")
        curated_genres = {g for *_, genres in CURATED_TITLES for g in genres}
        assert curated_genres <= set(genre["options"])

    def test_only_stremio_prefixes_are_announced(self) -> None:
        manifest = build_manifest(CATALOGS, version="1.0.0")

        assert manifest["idPrefixes"] == ["ottcatalog:", "tt"]

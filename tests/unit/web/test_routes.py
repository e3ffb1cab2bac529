"""
Tests des routes du protocole Stremio via TestClient.

Le container est construit avec des Settings de test ; les adaptateurs
sources et le service de streams sont remplaces (aucun appel reseau).
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from ottcatalog.container import Container
from ottcatalog.core.entities.content import StreamRecord
from ottcatalog.core.ports.sources import ISourceAdapter
from ottcatalog.core.value_objects.content_type import ContentType
from ottcatalog.services.meta import MetaService
from ottcatalog.services.streams import StreamService
from ottcatalog.web.app import create_app
from tests.fixtures.factories import make_item


def fake_adapter(name: str, items) -> MagicMock:
    mock = MagicMock(spec=ISourceAdapter)
    mock.name = name
    mock.resolve = AsyncMock(
        side_effect=lambda content_type, catalog_id: [i for i in items if i.type is content_type]
    )
    return mock


@pytest.fixture
def stream_service():
    service = MagicMock(spec=StreamService)
    service.get_streams = AsyncMock(
        return_value=[
            StreamRecord(
                url="https://dl.example/rrr.mkv",
                title="Real Debrid - RRR.2022.mkv",
                binge_group="realdebrid-1",
                filename="RRR.2022.mkv",
            )
        ]
    )
    return service


@pytest.fixture
def container(test_settings, stream_service) -> Container:
    container = Container()
    container.config.override(providers.Object(test_settings))
    container.source_adapters.override(
        providers.Object(
            [
                fake_adapter(
                    "platforms",
                    [
                        make_item("RRR", release_info="2022", item_id="ottcatalog:aha:movie:0"),
                        make_item("Kota Factory", ContentType.SERIES, "2019", "ottcatalog:zee5:series:0"),
                    ],
                ),
                fake_adapter("curated", []),
                fake_adapter("trending", []),
            ]
        )
    )
    container.stream_service.override(providers.Object(stream_service))
    return container


@pytest.fixture
def client(container) -> TestClient:
    return TestClient(create_app(container), raise_server_exceptions=False)


class TestManifestRoutes:
    def test_manifest(self, client: TestClient) -> None:
        response = client.get("/manifest.json")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "com.ottcatalog.india"
        assert "stream" in data["resources"]
        assert response.headers["Cache-Control"] == "public, max-age=3600"

    def test_landing_page(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "stremio://" in response.text

    def test_landing_page_disabled_serves_manifest(self, client: TestClient, test_settings) -> None:
        test_settings.landing_page = False

        response = client.get("/")

        assert response.json()["name"] == "India OTT Catalog"

    def test_health(self, client: TestClient) -> None:
        data = client.get("/health").json()

        assert data["status"] == "ok"
        assert data["version"]
        assert data["timestamp"]

    def test_options_preflight(self, client: TestClient) -> None:
        response = client.options("/catalog/movie/indian-movies.json")

        assert response.status_code == 200
        assert response.headers["Access-Control-Allow-Origin"] == "*"


class TestCatalogRoutes:
    def test_catalog(self, client: TestClient) -> None:
        response = client.get("/catalog/movie/indian-movies.json")

        metas = response.json()["metas"]
        assert [m["name"] for m in metas] == ["RRR"]
        assert metas[0]["id"] == "ottcatalog:aha:movie:0"
        assert metas[0]["releaseInfo"] == "2022"

    def test_catalog_with_extra(self, client: TestClient) -> None:
        response = client.get("/catalog/series/indian-series/search=kota.json")

        assert [m["name"] for m in response.json()["metas"]] == ["Kota Factory"]

    def test_unknown_catalog_and_type(self, client: TestClient) -> None:
        assert client.get("/catalog/movie/unknown.json").json() == {"metas": []}
        assert client.get("/catalog/channel/indian-movies.json").json() == {"metas": []}

    def test_mock_items_when_sources_empty(self, client: TestClient) -> None:
        metas = client.get("/catalog/movie/curated-action-movies.json").json()["metas"]

        assert [m["name"] for m in metas] == ["Test Movie 1", "Test Movie 2"]


class TestMetaRoutes:
    def test_meta_of_served_item(self, client: TestClient) -> None:
        client.get("/catalog/movie/indian-movies.json")

        response = client.get("/meta/movie/ottcatalog:aha:movie:0.json")

        assert response.json()["meta"]["name"] == "RRR"

    def test_unknown_meta(self, client: TestClient) -> None:
        assert client.get("/meta/movie/ottcatalog:aha:movie:42.json").json() == {"meta": None}

    def test_unhandled_error_returns_500(self, container, client: TestClient) -> None:
        failing = MagicMock(spec=MetaService)
        failing.get_meta = AsyncMock(side_effect=RuntimeError("boom"))
        container.meta_service.override(providers.Object(failing))

        response = client.get("/meta/movie/tt8178634.json")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}


class TestStreamRoutes:
    def test_streams(self, client: TestClient, stream_service) -> None:
        response = client.get("/stream/series/tt9544034:2:5.json")

        streams = response.json()["streams"]
        assert streams[0]["url"] == "https://dl.example/rrr.mkv"
        assert streams[0]["behaviorHints"]["filename"] == "RRR.2022.mkv"
        stream_service.get_streams.assert_awaited_once_with(ContentType.SERIES, "tt9544034:2:5")

    def test_unknown_type(self, client: TestClient) -> None:
        assert client.get("/stream/channel/tt1.json").json() == {"streams": []}

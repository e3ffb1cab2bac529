"""
Tests de l'index torrent de repli.
"""

import httpx
import pytest
import respx

from ottcatalog.adapters.streams.torrent_index import TorrentIndex, magnet_link
from ottcatalog.core.ports.streams import StreamQuery
from ottcatalog.core.value_objects.content_type import ContentType

MIRRORS = ["https://mirror-one.example", "https://mirror-two.example/api"]
HASH = "A" * 40


def query(text: str = "RRR 2022") -> StreamQuery:
    return StreamQuery(query=text, content_type=ContentType.MOVIE)


class TestMagnetLink:
    def test_name_is_url_encoded(self) -> None:
        assert magnet_link(HASH, "RRR 2022") == f"magnet:?xt=urn:btih:{HASH}&dn=RRR%202022"


class TestTorrentIndex:
    """Tests de TorrentIndex.search()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_builds_magnet_records(self) -> None:
        route = respx.get("https://mirror-one.example/q.php").mock(
            return_value=httpx.Response(200, json=[{"info_hash": HASH, "name": "RRR 2022 1080p"}])
        )
        index = TorrentIndex(mirrors=MIRRORS)

        streams = await index.search(query())

        assert len(streams) == 1
        stream = streams[0]
        assert stream.info_hash == HASH
        assert stream.file_idx == 0
        assert stream.url.startswith(f"magnet:?xt=urn:btih:{HASH}")
        assert stream.title == "Torrent - RRR 2022 1080p"
        assert route.calls[0].request.url.params["q"] == "RRR 2022"

    @pytest.mark.asyncio
    @respx.mock
    async def test_next_mirror_on_error(self) -> None:
        respx.get("https://mirror-one.example/q.php").mock(return_value=httpx.Response(502))
        respx.get("https://mirror-two.example/api/q.php").mock(
            return_value=httpx.Response(200, json=[{"info_hash": HASH, "name": "RRR"}])
        )

        streams = await TorrentIndex(mirrors=MIRRORS).search(query())

        assert [s.info_hash for s in streams] == [HASH]

    @pytest.mark.asyncio
    @respx.mock
    async def test_empty_result_marker_is_skipped(self) -> None:
        respx.get("https://mirror-one.example/q.php").mock(
            return_value=httpx.Response(200, json=[{"info_hash": "0" * 40, "name": "No results returned"}])
        )

        assert await TorrentIndex(mirrors=MIRRORS).search(query()) == []

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_object_entries_are_skipped(self) -> None:
        respx.get("https://mirror-one.example/q.php").mock(
            return_value=httpx.Response(200, json=["RRR", None, {"info_hash": HASH, "name": "RRR 2022 1080p"}])
        )

        streams = await TorrentIndex(mirrors=MIRRORS).search(query())

        assert [s.info_hash for s in streams] == [HASH]

    @pytest.mark.asyncio
    @respx.mock
    async def test_results_are_capped(self) -> None:
        results = [{"info_hash": f"{i + 1:040x}", "name": f"RRR {i}"} for i in range(8)]
        respx.get("https://mirror-one.example/q.php").mock(
            return_value=httpx.Response(200, json=results)
        )

        streams = await TorrentIndex(mirrors=MIRRORS, max_results=5).search(query())

        assert len(streams) == 5

    @pytest.mark.asyncio
    @respx.mock
    async def test_all_mirrors_down(self) -> None:
        respx.get("https://mirror-one.example/q.php").mock(side_effect=httpx.ConnectError("down"))
        respx.get("https://mirror-two.example/api/q.php").mock(return_value=httpx.Response(200, text="<html>"))

        assert await TorrentIndex(mirrors=MIRRORS).search(query()) == []

"""
Tests du parsing des identifiants de contenu.
"""

import pytest

from ottcatalog.core.value_objects.content_type import ContentType
from ottcatalog.core.value_objects.identity import (
    IdentityKind,
    looks_like_imdb_id,
    parse_identity,
)

NS = "ottcatalog"


class TestLooksLikeImdbId:
    @pytest.mark.parametrize("value", ["tt8178634", "tt10698680"])
    def test_valid(self, value: str) -> None:
        assert looks_like_imdb_id(value)

    @pytest.mark.parametrize("value", ["", None, "tt123", "ottcatalog:aha:movie:0", "nm1234567"])
    def test_invalid(self, value) -> None:
        assert not looks_like_imdb_id(value)


class TestParseIdentity:
    """Tests de parse_identity()."""

    def test_imdb_id(self) -> None:
        identity = parse_identity("tt8178634", NS)

        assert identity.kind is IdentityKind.IMDB
        assert identity.external_id == "tt8178634"
        assert identity.season is None

    def test_imdb_episode(self) -> None:
        identity = parse_identity("tt9544034:2:5", NS)

        assert identity.base_id == "tt9544034"
        assert (identity.season, identity.episode) == (2, 5)

    def test_tmdb_id(self) -> None:
        identity = parse_identity("ottcatalog:tmdb:series:93352:1:3", NS)

        assert identity.kind is IdentityKind.TMDB
        assert identity.external_id == "93352"
        assert identity.base_id == "ottcatalog:tmdb:series:93352"
        assert (identity.season, identity.episode) == (1, 3)

    def test_source_id(self) -> None:
        identity = parse_identity("ottcatalog:sun-nxt:movie:4", NS)

        assert identity.kind is IdentityKind.SOURCE
        assert identity.base_id == "ottcatalog:sun-nxt:movie:4"

    def test_title_year(self) -> None:
        identity = parse_identity("Kota Factory:2019:2:5", NS)

        assert identity.kind is IdentityKind.TITLE_YEAR
        assert identity.title == "Kota Factory"
        assert identity.year == 2019
        assert (identity.season, identity.episode) == (2, 5)

    @pytest.mark.parametrize(
        "value",
        ["", "garbage", "ottcatalog:broken", "ottcatalog:tmdb:movie:abc:x", "tt12:1:1"],
    )
    def test_malformed(self, value: str) -> None:
        assert parse_identity(value, NS) is None


class TestContentType:
    def test_parse_accepts_tv_alias(self) -> None:
        assert ContentType.parse("tv") is ContentType.SERIES
        assert ContentType.parse("Movie") is ContentType.MOVIE
        assert ContentType.parse("channel") is None

    def test_tmdb_path(self) -> None:
        assert ContentType.SERIES.tmdb_path == "tv"

"""
Adaptateur du jeu de donnees curate embarque.
"""

from typing import Sequence

from ottcatalog.core.entities.content import ContentItem, Link
from ottcatalog.core.ports.sources import ISourceAdapter
from ottcatalog.core.value_objects.content_type import ContentType
from ottcatalog.utils.constants import (
    CURATED_GENRE_BUCKETS,
    CURATED_MAX_RESULTS,
    DEFAULT_DESCRIPTION,
    DEFAULT_POSTER_SHAPE,
    SOURCE_CURATED,
)
from ottcatalog.utils.datasets import CURATED_TITLES
from ottcatalog.utils.helpers import default_poster


class CuratedCatalog(ISourceAdapter):
    """
    Selection curatee de titres indiens.

    Filtre par type et, pour les catalogues "bucket", par genre ; trie du
    plus recent au plus ancien et limite a max_results. L'identifiant de
    l'item est l'ID IMDb, ce qui permet un enrichissement direct.
    """

    def __init__(
        self,
        titles: Sequence[tuple] = CURATED_TITLES,
        max_results: int = CURATED_MAX_RESULTS,
    ) -> None:
        self._titles = list(titles)
        self._max_results = max_results

    @property
    def name(self) -> str:
        return SOURCE_CURATED

    async def resolve(
        self, content_type: ContentType, catalog_id: str
    ) -> list[ContentItem]:
        genre = CURATED_GENRE_BUCKETS.get(catalog_id)
        selected = [
            entry
            for entry in self._titles
            if entry[3] is content_type and (genre is None or genre in entry[4])
        ]
        selected.sort(key=lambda entry: entry[2], reverse=True)
        return [self._to_item(entry) for entry in selected[: self._max_results]]

    @staticmethod
    def _to_item(entry: tuple) -> ContentItem:
        imdb_id, title, year, content_type, genres = entry
        return ContentItem(
            id=imdb_id,
            type=content_type,
            name=title,
            poster=default_poster(content_type),
            poster_shape=DEFAULT_POSTER_SHAPE,
            description=DEFAULT_DESCRIPTION.format(title=title),
            genres=list(genres),
            release_info=str(year),
            links=[Link(url=f"https://www.imdb.com/title/{imdb_id}/", name="IMDb")],
        )

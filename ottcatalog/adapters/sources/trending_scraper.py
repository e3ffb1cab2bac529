"""
Adaptateur des classements "top 10" FlixPatrol (Netflix Inde).

Ordre d'essai :
1. Chaque URL miroir de la page HTML, dans l'ordre configure
2. L'endpoint JSON optionnel
3. La liste statique des titres tendance (jamais vide)

La premiere tentative produisant au moins un item l'emporte.
"""

from typing import Any, Optional, Sequence

from bs4 import BeautifulSoup, Tag
from loguru import logger

from ottcatalog.core.entities.content import ContentItem, Link
from ottcatalog.core.ports.http import IFetcher
from ottcatalog.core.ports.sources import ISourceAdapter
from ottcatalog.core.value_objects.content_type import ContentType
from ottcatalog.utils.constants import (
    DEFAULT_DESCRIPTION,
    DEFAULT_POSTER_SHAPE,
    FLIXPATROL_BASE_URL,
    FLIXPATROL_HEADERS,
    FLIXPATROL_SECTION_TITLES,
    FLIXPATROL_URLS,
    ID_NAMESPACE,
    SOURCE_TRENDING,
)
from ottcatalog.utils.datasets import TRENDING_FALLBACK
from ottcatalog.utils.helpers import absolute_url, clean_title, default_poster

# Cles acceptees dans la reponse de l'endpoint JSON
_JSON_KEYS = {
    ContentType.MOVIE: ("movie", "movies"),
    ContentType.SERIES: ("series", "tv", "tv_shows", "shows"),
}


def _as_year(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


class TrendingScraper(ISourceAdapter):
    """
    Scrape le classement FlixPatrol pour le type demande.
    """

    def __init__(
        self,
        fetcher: IFetcher,
        urls: Sequence[str] = FLIXPATROL_URLS,
        api_url: Optional[str] = None,
        timeout: float = 15.0,
    ) -> None:
        self._fetcher = fetcher
        self._urls = list(urls)
        self._api_url = api_url
        self._timeout = timeout

    @property
    def name(self) -> str:
        return SOURCE_TRENDING

    async def resolve(
        self, content_type: ContentType, catalog_id: str
    ) -> list[ContentItem]:
        for url in self._urls:
            html = await self._fetcher.fetch(
                url, headers=FLIXPATROL_HEADERS, timeout=self._timeout
            )
            if not html:
                continue
            items = self._safe_parse(self.parse_chart, html, content_type, url)
            if items:
                logger.info("Classement tendance recupere", url=url, count=len(items))
                return items
            logger.warning("Classement introuvable dans la page", url=url, type=content_type.value)

        if self._api_url:
            payload = await self._fetcher.fetch(
                self._api_url, response_type="json", timeout=self._timeout
            )
            items = self._safe_parse(self.parse_api_payload, payload, content_type, self._api_url)
            if items:
                logger.info("Classement tendance recupere via l'API", count=len(items))
                return items

        logger.warning("Classement tendance indisponible, liste statique servie", type=content_type.value)
        return self.fallback_items(content_type)

    @staticmethod
    def _safe_parse(parse, raw: Any, content_type: ContentType, url: str) -> list[ContentItem]:
        # Une reponse au format inattendu fait passer a la tentative suivante
        try:
            return parse(raw, content_type)
        except Exception as e:
            logger.warning("Reponse tendance illisible", url=url, error=repr(e))
            return []

    def parse_chart(self, html: str, content_type: ContentType) -> list[ContentItem]:
        """
        Extrait les lignes classees de la section correspondant au type.

        La table suit le parent du titre <h3> de la section
        ("TOP 10 Movies" ou "TOP 10 TV Shows").
        """
        soup = BeautifulSoup(html, "html.parser")
        section_title = FLIXPATROL_SECTION_TITLES[content_type]

        heading = next(
            (h3 for h3 in soup.find_all("h3") if h3.get_text(strip=True) == section_title),
            None,
        )
        if heading is None:
            return []

        table = self._table_after(heading)
        if table is None:
            return []

        items = []
        for row in table.select("tbody tr.table-group"):
            cells = row.find_all("td")
            if len(cells) < 3:
                continue
            anchor = cells[2].find("a")
            if anchor is None:
                continue
            name = clean_title(anchor.get_text(" ", strip=True))
            if not name:
                continue
            url = absolute_url(FLIXPATROL_BASE_URL, anchor.get("href"))
            items.append(self._build_item(content_type, len(items) + 1, name, url=url))
        return items

    @staticmethod
    def _table_after(heading: Tag) -> Optional[Tag]:
        container = heading.parent
        sibling = container.find_next_sibling() if container is not None else None
        if sibling is not None and sibling.name == "table" and "card-table" in (sibling.get("class") or []):
            return sibling
        return heading.find_next("table", class_="card-table")

    def parse_api_payload(self, payload: Any, content_type: ContentType) -> list[ContentItem]:
        """
        Convertit la reponse de l'endpoint JSON.

        Formats acceptes : liste d'entrees, ou objet dont une cle de type
        ("movies", "series", "tv_shows"...) porte la liste. Une entree est
        une chaine ou un objet {title|name, year?, url?}.
        """
        entries: Any = None
        if isinstance(payload, dict):
            for key in _JSON_KEYS[content_type]:
                if key in payload:
                    entries = payload[key]
                    break
        elif isinstance(payload, list):
            entries = payload
        if not isinstance(entries, list):
            return []

        items = []
        for entry in entries:
            if isinstance(entry, str):
                name, year, url = clean_title(entry), None, None
            elif isinstance(entry, dict):
                title = entry.get("title") or entry.get("name")
                name = clean_title(title) if isinstance(title, str) else ""
                year = _as_year(entry.get("year"))
                url = entry.get("url") if isinstance(entry.get("url"), str) else None
            else:
                continue
            if name:
                items.append(self._build_item(content_type, len(items) + 1, name, year=year, url=url))
        return items

    def fallback_items(self, content_type: ContentType) -> list[ContentItem]:
        """Liste statique des titres tendance pour le type demande."""
        return [
            self._build_item(content_type, rank, title, year=year)
            for rank, (title, year) in enumerate(TRENDING_FALLBACK[content_type], start=1)
        ]

    def _build_item(
        self,
        content_type: ContentType,
        rank: int,
        name: str,
        year: Optional[int] = None,
        url: Optional[str] = None,
    ) -> ContentItem:
        return ContentItem(
            id=f"{ID_NAMESPACE}:{SOURCE_TRENDING}:{content_type.value}:{rank}",
            type=content_type,
            name=name,
            poster=default_poster(content_type),
            poster_shape=DEFAULT_POSTER_SHAPE,
            description=DEFAULT_DESCRIPTION.format(title=name),
            genres=[],
            release_info=str(year) if year else "",
            links=[Link(url=url, name="FlixPatrol")] if url else [],
        )

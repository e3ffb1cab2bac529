"""
Adaptateur de scraping direct des plateformes OTT.

Pour chaque plateforme configuree, construit l'URL de listing du type
demande, la recupere via le cache HTTP et extrait un item par carte de
contenu trouvee.
"""

import asyncio
from typing import Optional, Sequence

from bs4 import BeautifulSoup, Tag
from loguru import logger

from ottcatalog.config import PlatformConfig
from ottcatalog.adapters.sources.extraction import (
    SelectorStrategy,
    StrategyChain,
    all_text,
    first_text,
    image_alt,
    image_source,
    link_href,
)
from ottcatalog.core.entities.content import ContentItem, Link
from ottcatalog.core.ports.http import IFetcher
from ottcatalog.core.ports.sources import ISourceAdapter
from ottcatalog.core.value_objects.content_type import ContentType
from ottcatalog.utils.constants import (
    DEFAULT_POSTER_SHAPE,
    ID_NAMESPACE,
    SOURCE_PLATFORMS,
    SOUTH_INDIAN_PREFIX,
)
from ottcatalog.utils.helpers import absolute_url, clean_title, parse_year

# Selecteurs de cartes, du plus specifique au plus generique
CARD_SELECTORS = (".content-item", ".tile", ".card", "article")

TITLE_SELECTOR = 'h3, .title, [itemprop="name"]'
DESCRIPTION_SELECTOR = ".description, .synopsis"
GENRE_SELECTOR = ".genre, .categories"
YEAR_SELECTOR = ".year, .release-date"


class PlatformScraper(ISourceAdapter):
    """
    Scrape les pages de listing des plateformes OTT configurees.

    Les catalogues "south-indian-*" ne scrapent que les plateformes
    marquees south_indian.
    """

    def __init__(
        self,
        fetcher: IFetcher,
        platforms: Sequence[PlatformConfig],
        card_selectors: Sequence[str] = CARD_SELECTORS,
    ) -> None:
        self._fetcher = fetcher
        self._platforms = list(platforms)
        self._chain = StrategyChain([SelectorStrategy(s) for s in card_selectors])

    @property
    def name(self) -> str:
        return SOURCE_PLATFORMS

    def platforms_for(self, catalog_id: str) -> list[PlatformConfig]:
        """Plateformes a scraper pour un catalogue."""
        if catalog_id.startswith(SOUTH_INDIAN_PREFIX):
            return [p for p in self._platforms if p.south_indian]
        return list(self._platforms)

    async def resolve(
        self, content_type: ContentType, catalog_id: str
    ) -> list[ContentItem]:
        platforms = self.platforms_for(catalog_id)
        outcomes = await asyncio.gather(
            *(self.scrape_platform(p, content_type) for p in platforms),
            return_exceptions=True,
        )

        items: list[ContentItem] = []
        for platform, outcome in zip(platforms, outcomes):
            if isinstance(outcome, BaseException):
                logger.warning(
                    "Scraping de plateforme en erreur",
                    platform=platform.id,
                    error=str(outcome),
                )
                continue
            items.extend(outcome)
        return items

    async def scrape_platform(
        self, platform: PlatformConfig, content_type: ContentType
    ) -> list[ContentItem]:
        """Scrape la page de listing d'une plateforme pour un type."""
        path = platform.movie_path if content_type is ContentType.MOVIE else platform.series_path
        url = f"{platform.base_url.rstrip('/')}{path}"
        logger.info("Scraping plateforme", platform=platform.name, url=url)

        html = await self._fetcher.fetch(url)
        if not html:
            return []
        return self.parse_listing(html, platform, content_type)

    def parse_listing(
        self, html: str, platform: PlatformConfig, content_type: ContentType
    ) -> list[ContentItem]:
        """Extrait les items d'une page de listing."""
        result = self._chain.run(BeautifulSoup(html, "html.parser"))
        if not result.ok:
            logger.warning(
                "Aucune carte de contenu reconnue",
                platform=platform.id,
                reason=result.reason,
            )
            return []

        items = []
        for index, element in enumerate(result.value):
            item = self._parse_card(element, index, platform, content_type)
            if item is not None:
                items.append(item)
        logger.debug("Items extraits", platform=platform.id, count=len(items))
        return items

    def _parse_card(
        self,
        element: Tag,
        index: int,
        platform: PlatformConfig,
        content_type: ContentType,
    ) -> Optional[ContentItem]:
        title = clean_title(first_text(element, TITLE_SELECTOR))
        poster = absolute_url(platform.base_url, image_source(element))
        if not title and not poster:
            return None

        name = title or clean_title(image_alt(element)) or f"{platform.name} #{index + 1}"
        genres = [g.strip() for g in all_text(element, GENRE_SELECTOR).split(",") if g.strip()]
        release_text = first_text(element, YEAR_SELECTOR)
        year = parse_year(release_text)
        href = absolute_url(platform.base_url, link_href(element))

        return ContentItem(
            id=f"{ID_NAMESPACE}:{platform.id}:{content_type.value}:{index}",
            type=content_type,
            name=name,
            poster=poster,
            poster_shape=DEFAULT_POSTER_SHAPE,
            description=first_text(element, DESCRIPTION_SELECTOR),
            genres=genres,
            release_info=str(year) if year else release_text,
            links=[Link(url=href, name=f"Watch on {platform.name}")] if href else [],
        )

"""
Strategies d'extraction HTML.

Une page de plateforme change souvent de structure : plutot qu'un selecteur
unique, l'adaptateur essaie une liste ordonnee de strategies. Chaque
strategie signale son succes (au moins un element trouve) ou son echec, et
la chaine s'arrete a la premiere qui reussit.

Usage:
    chain = StrategyChain([SelectorStrategy(".content-item"), SelectorStrategy(".card")])
    result = chain.run(BeautifulSoup(html, "html.parser"))
    if result.ok:
        for element in result.value:
            ...
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from bs4 import BeautifulSoup, Tag
from loguru import logger

from ottcatalog.core.value_objects.result import Result


class ExtractionStrategy(ABC):
    """Strategie retournant les elements candidats d'une page."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def extract(self, soup: BeautifulSoup) -> Result[list[Tag]]:
        """
        Extrait les elements de la page.

        Returns:
            Result en succes avec au moins un element, en echec sinon
        """
        ...


class SelectorStrategy(ExtractionStrategy):
    """Strategie basee sur un selecteur CSS."""

    def __init__(self, selector: str) -> None:
        self._selector = selector

    @property
    def name(self) -> str:
        return self._selector

    def extract(self, soup: BeautifulSoup) -> Result[list[Tag]]:
        elements = soup.select(self._selector)
        if not elements:
            return Result.failure(f"no element matches {self._selector!r}")
        return Result.success(elements)


class StrategyChain:
    """Execute les strategies dans l'ordre, s'arrete au premier succes."""

    def __init__(self, strategies: Sequence[ExtractionStrategy]) -> None:
        self._strategies = list(strategies)

    def run(self, soup: BeautifulSoup) -> Result[list[Tag]]:
        reasons = []
        for strategy in self._strategies:
            result = strategy.extract(soup)
            if result.ok:
                logger.debug(
                    "Strategie d'extraction retenue",
                    strategy=strategy.name,
                    count=len(result.value),
                )
                return result
            reasons.append(result.reason)
        return Result.failure("; ".join(reasons) or "no strategy configured")


def first_text(element: Tag, selector: str) -> str:
    """Texte nettoye du premier descendant correspondant au selecteur."""
    found = element.select_one(selector)
    if found is None:
        return ""
    return found.get_text(" ", strip=True)


def all_text(element: Tag, selector: str) -> str:
    """Texte concatene de tous les descendants correspondant au selecteur."""
    return ", ".join(
        text for text in (node.get_text(" ", strip=True) for node in element.select(selector)) if text
    )


def image_source(element: Tag) -> Optional[str]:
    """URL de la premiere image (src puis data-src pour le lazy loading)."""
    image = element.find("img")
    if image is None:
        return None
    return image.get("src") or image.get("data-src") or None


def image_alt(element: Tag) -> str:
    image = element.find("img")
    if image is None:
        return ""
    return (image.get("alt") or image.get("title") or "").strip()


def link_href(element: Tag) -> Optional[str]:
    """Cible du lien de l'element (l'element lui-meme s'il s'agit d'un <a>)."""
    if element.name == "a" and element.get("href"):
        return element["href"]
    anchor = element.find("a", href=True)
    return anchor["href"] if anchor is not None else None

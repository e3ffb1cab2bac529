"""
Agregateur des adaptateurs sources.

Lance les adaptateurs en parallele, fusionne leurs items dans l'ordre des
adaptateurs, deduplique par (type, nom), garantit un resultat non vide
(items factices) et trie par annee de sortie decroissante.
"""

import asyncio
from typing import Sequence

from loguru import logger

from ottcatalog.core.entities.content import ContentItem, Link
from ottcatalog.core.ports.sources import ISourceAdapter
from ottcatalog.core.value_objects.content_type import ContentType
from ottcatalog.utils.constants import DEFAULT_POSTER_SHAPE, ID_NAMESPACE
from ottcatalog.utils.datasets import MOCK_LINK_URL, MOCK_RELEASE_INFO, MOCK_TITLES
from ottcatalog.utils.helpers import default_poster, parse_year


def mock_items(content_type: ContentType) -> list[ContentItem]:
    """Items factices servis quand aucune source ne produit de resultat."""
    label = "Movie" if content_type is ContentType.MOVIE else "Series"
    return [
        ContentItem(
            id=f"{ID_NAMESPACE}:mock:{content_type.value}:{suffix}",
            type=content_type,
            name=name.format(label=label),
            poster=default_poster(content_type),
            poster_shape=DEFAULT_POSTER_SHAPE,
            description=description,
            genres=list(genres),
            release_info=MOCK_RELEASE_INFO,
            links=[Link(url=MOCK_LINK_URL, name="Example")],
        )
        for suffix, name, description, genres in MOCK_TITLES
    ]


def dedupe(items: Sequence[ContentItem]) -> list[ContentItem]:
    """Deduplique par type + nom exact, le premier rencontre l'emporte."""
    seen: set[str] = set()
    unique = []
    for item in items:
        if item.dedup_key in seen:
            continue
        seen.add(item.dedup_key)
        unique.append(item)
    return unique


def sort_by_year(items: Sequence[ContentItem]) -> list[ContentItem]:
    """Tri stable par annee decroissante (annee absente = 0)."""
    return sorted(items, key=lambda item: parse_year(item.release_info), reverse=True)


class Aggregator:
    """
    Fan-out concurrent vers les adaptateurs sources.

    Un adaptateur en echec n'annule jamais les autres : ses items sont
    simplement absents du resultat.
    """

    async def aggregate(
        self,
        adapters: Sequence[ISourceAdapter],
        content_type: ContentType,
        catalog_id: str,
    ) -> list[ContentItem]:
        outcomes = await asyncio.gather(
            *(adapter.resolve(content_type, catalog_id) for adapter in adapters),
            return_exceptions=True,
        )

        merged: list[ContentItem] = []
        for adapter, outcome in zip(adapters, outcomes):
            if isinstance(outcome, BaseException):
                logger.warning(
                    "Adaptateur source en erreur",
                    adapter=adapter.name,
                    catalog=catalog_id,
                    error=str(outcome),
                )
                continue
            logger.debug("Adaptateur source termine", adapter=adapter.name, count=len(outcome))
            merged.extend(outcome)

        items = dedupe(merged)
        if not items:
            logger.warning("Aucun item produit, items factices servis", catalog=catalog_id)
            items = mock_items(content_type)

        return sort_by_year(items)

"""
Adaptateurs sources de catalogue.

- PlatformScraper: scraping des pages de listing des plateformes OTT
- TrendingScraper: classement FlixPatrol avec miroirs et liste statique
- CuratedCatalog: selection curatee embarquee

Tous implementent ISourceAdapter (core/ports/sources.py).
"""

from ottcatalog.adapters.sources.curated_catalog import CuratedCatalog
from ottcatalog.adapters.sources.platform_scraper import PlatformScraper
from ottcatalog.adapters.sources.trending_scraper import TrendingScraper

__all__ = ["CuratedCatalog", "PlatformScraper", "TrendingScraper"]

"""
Recuperation HTTP sortante memoisee (pages des plateformes, FlixPatrol, API debrid).
"""

from ottcatalog.adapters.http.fetcher import CachedFetcher

__all__ = ["CachedFetcher"]

"""
Clients API externes pour l'enrichissement des metadonnees.

- TMDBClient: The Movie Database (films et series)

Infrastructure partagee:
- MemoryCache: Cache memoire borne avec TTL (une instance par preoccupation)
- RateLimitError: Exception pour les erreurs 429
- with_retry / request_with_retry: backoff exponentiel sur rate limiting

Les clients implementent IMetadataClient defini dans core/ports/api_clients.py.
"""

from ottcatalog.adapters.api.cache import MemoryCache
from ottcatalog.adapters.api.retry import RateLimitError, request_with_retry, with_retry
from ottcatalog.adapters.api.tmdb_client import TMDBClient

__all__ = [
    "MemoryCache",
    "RateLimitError",
    "TMDBClient",
    "request_with_retry",
    "with_retry",
]

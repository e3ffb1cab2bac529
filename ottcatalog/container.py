"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Chaque cache memoire est une instance unique par preoccupation (requetes
HTTP, catalogues, streams, metadonnees).
"""

from typing import Optional

from dependency_injector import containers, providers

from .adapters.api.cache import MemoryCache
from .adapters.api.tmdb_client import TMDBClient
from .adapters.http.fetcher import CachedFetcher
from .adapters.sources.curated_catalog import CuratedCatalog
from .adapters.sources.platform_scraper import PlatformScraper
from .adapters.sources.trending_scraper import TrendingScraper
from .adapters.streams.all_debrid import AllDebridProvider
from .adapters.streams.premiumize import PremiumizeProvider
from .adapters.streams.real_debrid import RealDebridProvider
from .adapters.streams.torbox import TorboxProvider
from .adapters.streams.torrent_index import TorrentIndex
from .config import Settings
from .services.aggregator import Aggregator
from .services.catalog import CatalogService
from .services.enricher import EnricherService
from .services.meta import MetaService
from .services.rate_limiter import RateLimiter
from .services.stream_resolver import StreamResolver
from .services.streams import StreamService
from .utils.constants import CATALOGS


def build_tmdb_client(settings: Settings, cache: MemoryCache) -> Optional[TMDBClient]:
    """Client TMDB, ou None si aucune cle API n'est configuree."""
    if not settings.tmdb_enabled:
        return None
    return TMDBClient(
        api_key=settings.tmdb_api_key,
        cache=cache,
        base_url=settings.tmdb_base_url,
        image_base_url=settings.tmdb_image_base_url,
        poster_size=settings.tmdb_poster_size,
        backdrop_size=settings.tmdb_backdrop_size,
        language=settings.tmdb_language,
        region=settings.tmdb_region,
        timeout=settings.request_timeout,
    )


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        catalog = container.catalog_service()
        items = await catalog.get_catalog(ContentType.MOVIE, "indian-movies")

    Les tests remplacent les providers via container.<provider>.override(...).
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Caches memoire - une instance par preoccupation
    fetch_cache = providers.Singleton(
        MemoryCache,
        ttl=config.provided.cache_ttl_seconds,
        max_size=config.provided.cache_max_size,
    )
    catalog_cache = providers.Singleton(
        MemoryCache,
        ttl=config.provided.catalog_cache_ttl_seconds,
        max_size=5000,
    )
    stream_cache = providers.Singleton(
        MemoryCache,
        ttl=config.provided.stream_cache_ttl_seconds,
        max_size=config.provided.cache_max_size,
    )
    metadata_cache = providers.Singleton(
        MemoryCache,
        ttl=config.provided.metadata_cache_ttl_seconds,
        max_size=config.provided.cache_max_size,
    )

    # Recuperation HTTP memoisee
    fetcher = providers.Singleton(
        CachedFetcher,
        cache=fetch_cache,
        timeout=config.provided.request_timeout,
        user_agent=config.provided.user_agent,
    )

    # Client TMDB - None si pas de cle API
    tmdb_client = providers.Singleton(
        build_tmdb_client,
        settings=config,
        cache=metadata_cache,
    )

    # Adaptateurs sources, dans l'ordre de fusion
    platform_scraper = providers.Singleton(
        PlatformScraper,
        fetcher=fetcher,
        platforms=config.provided.platforms,
    )
    trending_scraper = providers.Singleton(
        TrendingScraper,
        fetcher=fetcher,
        urls=config.provided.trending_urls,
        api_url=config.provided.trending_api_url,
        timeout=config.provided.trending_timeout,
    )
    curated_catalog = providers.Singleton(CuratedCatalog)
    source_adapters = providers.List(platform_scraper, trending_scraper, curated_catalog)

    # Enrichissement - limiteur partage
    rate_limiter = providers.Singleton(
        RateLimiter,
        min_interval=config.provided.enrichment_delay_seconds,
    )
    enricher_service = providers.Singleton(
        EnricherService,
        tmdb_client=tmdb_client,
        rate_limiter=rate_limiter,
    )
    aggregator = providers.Singleton(Aggregator)

    # Fournisseurs de streams, dans l'ordre d'interrogation
    real_debrid = providers.Singleton(
        RealDebridProvider,
        api_key=config.provided.real_debrid_api_key,
        enabled=config.provided.debrid_enabled.call("realDebrid"),
        timeout=config.provided.request_timeout,
    )
    torbox = providers.Singleton(
        TorboxProvider,
        api_key=config.provided.torbox_api_key,
        enabled=config.provided.debrid_enabled.call("torbox"),
        timeout=config.provided.request_timeout,
    )
    all_debrid = providers.Singleton(
        AllDebridProvider,
        api_key=config.provided.all_debrid_api_key,
        enabled=config.provided.debrid_enabled.call("allDebrid"),
        timeout=config.provided.request_timeout,
    )
    premiumize = providers.Singleton(
        PremiumizeProvider,
        api_key=config.provided.premiumize_api_key,
        enabled=config.provided.debrid_enabled.call("premiumize"),
        timeout=config.provided.request_timeout,
    )
    stream_providers = providers.List(real_debrid, torbox, all_debrid, premiumize)
    torrent_index = providers.Singleton(
        TorrentIndex,
        mirrors=config.provided.torrent_mirrors,
        timeout=config.provided.torrent_timeout,
    )
    stream_resolver = providers.Singleton(
        StreamResolver,
        providers=stream_providers,
        torrent_index=torrent_index,
        cache=stream_cache,
    )

    # Services des routes
    catalog_service = providers.Singleton(
        CatalogService,
        catalogs=providers.Object(CATALOGS),
        adapters=source_adapters,
        aggregator=aggregator,
        enricher=enricher_service,
        cache=catalog_cache,
        enrich=config.provided.enrich_catalogs,
    )
    meta_service = providers.Singleton(
        MetaService,
        catalog_service=catalog_service,
        enricher=enricher_service,
    )
    stream_service = providers.Singleton(
        StreamService,
        resolver=stream_resolver,
        meta_service=meta_service,
        enabled=config.provided.streams_enabled,
    )


async def close_clients(container: Container) -> None:
    """Ferme les clients HTTP ouverts par les singletons du container."""
    clients = [container.fetcher(), container.tmdb_client(), container.torrent_index()]
    clients.extend(container.stream_providers())
    for client in clients:
        if client is not None:
            await client.close()

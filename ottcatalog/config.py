"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe OTTCATALOG_,
et peut optionnellement être fournie via un fichier .env.

Les clés API (TMDB, services debrid) sont optionnelles - les fonctionnalités
correspondantes sont désactivées si non fournies.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ottcatalog.utils.constants import (
    DEBRID_SERVICES,
    DEFAULT_PLATFORMS,
    DEFAULT_USER_AGENT,
    FLIXPATROL_URLS,
    TORRENT_MIRRORS,
)

# Trouver le fichier .env à la racine du projet (parent de ottcatalog/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class PlatformConfig(BaseModel):
    """Plateforme OTT scrapee par l'adaptateur direct."""

    id: str
    name: str
    base_url: str
    movie_path: str
    series_path: str
    languages: list[str] = Field(default_factory=list)
    south_indian: bool = False


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe OTTCATALOG_.
    Exemple : OTTCATALOG_LOG_LEVEL=DEBUG

    Les listes (plateformes, miroirs, services) acceptent du JSON.
    """

    model_config = SettingsConfigDict(
        env_prefix="OTTCATALOG_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Cache des requetes sortantes
    cache_ttl_seconds: float = Field(default=6 * 60 * 60, gt=0)
    cache_max_size: int = Field(default=1000, ge=1)

    # HTTP sortant
    request_timeout: float = Field(default=10.0, gt=0)
    trending_timeout: float = Field(default=15.0, gt=0)
    user_agent: str = Field(default=DEFAULT_USER_AGENT)

    # Sources
    platforms: list[PlatformConfig] = Field(
        default_factory=lambda: [PlatformConfig(**p) for p in DEFAULT_PLATFORMS]
    )
    trending_urls: list[str] = Field(default_factory=lambda: list(FLIXPATROL_URLS))
    trending_api_url: Optional[str] = Field(default=None)

    # TMDB (OPTIONNEL - enrichissement désactivé si non défini)
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3")
    tmdb_image_base_url: str = Field(default="https://image.tmdb.org/t/p")
    tmdb_poster_size: str = Field(default="w500")
    tmdb_backdrop_size: str = Field(default="original")
    tmdb_language: str = Field(default="en-US")
    tmdb_region: str = Field(default="IN")

    # Enrichissement
    enrich_catalogs: bool = Field(default=True)
    enrichment_delay_seconds: float = Field(default=0.25, ge=0)

    # Caches de reponses
    catalog_cache_ttl_seconds: float = Field(default=6 * 60 * 60, gt=0)
    stream_cache_ttl_seconds: float = Field(default=30 * 60, gt=0)
    metadata_cache_ttl_seconds: float = Field(default=24 * 60 * 60, gt=0)

    # Streams (services debrid + repli torrent)
    streams_enabled: bool = Field(default=True)
    real_debrid_api_key: Optional[str] = Field(default=None)
    torbox_api_key: Optional[str] = Field(default=None)
    all_debrid_api_key: Optional[str] = Field(default=None)
    premiumize_api_key: Optional[str] = Field(default=None)
    enabled_debrid_services: list[str] = Field(default_factory=lambda: list(DEBRID_SERVICES))
    torrent_mirrors: list[str] = Field(default_factory=lambda: list(TORRENT_MIRRORS))
    torrent_timeout: float = Field(default=5.0, gt=0)

    # Serveur web
    landing_page: bool = Field(default=True)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=7000, ge=1, le=65535)

    # Logging (stderr + fichier JSON optionnel, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=Path("logs/ottcatalog.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Étend ~ vers le répertoire home ; une valeur vide désactive le fichier."""
        if v is None or str(v).strip() == "":
            return None
        return Path(v).expanduser()

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return bool(self.tmdb_api_key)

    def debrid_api_key(self, service: str) -> Optional[str]:
        """Retourne la clé API d'un service debrid (nom camelCase)."""
        return {
            "realDebrid": self.real_debrid_api_key,
            "torbox": self.torbox_api_key,
            "allDebrid": self.all_debrid_api_key,
            "premiumize": self.premiumize_api_key,
        }.get(service)

    def debrid_enabled(self, service: str) -> bool:
        """Vérifie si un service debrid est activé dans la configuration."""
        return service in self.enabled_debrid_services

    @property
    def configured_debrid_services(self) -> list[str]:
        """Services debrid à la fois activés et munis d'une clé API."""
        return [
            service
            for service in DEBRID_SERVICES
            if self.debrid_enabled(service) and self.debrid_api_key(service)
        ]

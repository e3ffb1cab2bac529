"""
Interfaces ports pour le service externe de metadonnees.

Interfaces abstraites (ports) definissant le contrat consomme par
l'enrichissement. L'implementation concrete est le client TMDB
(adapters/api/tmdb_client.py).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ottcatalog.core.value_objects.content_type import ContentType


@dataclass
class SearchResult:
    """
    Resultat de recherche depuis l'API de metadonnees.

    Attributs :
        id : ID specifique a l'API (ID TMDB)
        title : Titre localise
        original_title : Titre en langue originale
        year : Annee de sortie/premiere diffusion
        source : Identifiant de la source API ("tmdb")
    """

    id: str
    title: str
    original_title: Optional[str] = None
    year: Optional[int] = None
    source: str = ""


@dataclass
class SeasonInfo:
    """Saison telle que retournee par l'API de details."""

    season_number: int
    name: str = ""
    episode_count: Optional[int] = None
    air_date: Optional[str] = None


@dataclass
class MediaDetails:
    """
    Informations media detaillees depuis l'API.

    Attributs :
        id : ID specifique a l'API
        content_type : Film ou serie
        title : Titre localise
        original_title : Titre en langue originale
        overview : Synopsis
        release_date : Date de sortie ou de premiere diffusion (YYYY-MM-DD)
        genres : Tuple des noms de genre
        poster_path : Chemin de l'affiche sur le CDN d'images
        backdrop_path : Chemin de l'image de fond sur le CDN d'images
        vote_average : Note moyenne
        runtime : Duree en minutes (films)
        number_of_seasons : Nombre de saisons (series)
        seasons : Saisons (series)
        status : Statut de production
        original_language : Code langue originale
        origin_country : Pays d'origine
        imdb_id : Identifiant IMDb si connu
    """

    id: str
    content_type: ContentType
    title: str
    original_title: Optional[str] = None
    overview: Optional[str] = None
    release_date: Optional[str] = None
    genres: tuple[str, ...] = ()
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    vote_average: Optional[float] = None
    runtime: Optional[int] = None
    number_of_seasons: Optional[int] = None
    seasons: tuple[SeasonInfo, ...] = ()
    status: Optional[str] = None
    original_language: Optional[str] = None
    origin_country: Optional[str] = None
    imdb_id: Optional[str] = None

    @property
    def year(self) -> Optional[int]:
        """Annee extraite de release_date."""
        if self.release_date and len(self.release_date) >= 4 and self.release_date[:4].isdigit():
            return int(self.release_date[:4])
        return None


class IMetadataClient(ABC):
    """
    Interface du service de metadonnees (recherche, details, images).
    """

    @abstractmethod
    async def search(
        self,
        query: str,
        content_type: ContentType,
        year: Optional[int] = None,
    ) -> list[SearchResult]:
        """
        Recherche des medias par titre.

        Args :
            query : Titre recherche
            content_type : Film ou serie
            year : Filtre optionnel par annee

        Retourne :
            Liste des resultats, le plus pertinent en premier
        """
        ...

    @abstractmethod
    async def get_details(
        self, media_id: str, content_type: ContentType
    ) -> Optional[MediaDetails]:
        """Recupere les details complets d'un media, ou None si introuvable."""
        ...

    @abstractmethod
    async def find_by_imdb_id(
        self, imdb_id: str, content_type: Optional[ContentType] = None
    ) -> Optional[MediaDetails]:
        """Recupere les details d'un media via son identifiant IMDb."""
        ...

    @abstractmethod
    def poster_url(self, path: Optional[str]) -> Optional[str]:
        """Construit l'URL complete d'une affiche."""
        ...

    @abstractmethod
    def backdrop_url(self, path: Optional[str]) -> Optional[str]:
        """Construit l'URL complete d'une image de fond."""
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'tmdb')."""
        ...

"""
Entites de contenu echangees entre toutes les etapes du pipeline.

ContentItem est l'unite produite par les adaptateurs sources, fusionnee par
l'agregateur puis remplacee par l'enrichissement. StreamRecord est emis par
le resolveur de streams.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ottcatalog.core.value_objects.content_type import ContentType


@dataclass(frozen=True)
class Link:
    """Lien vers une source de visionnage."""

    url: str
    name: str

    def to_dict(self) -> dict[str, str]:
        return {"url": self.url, "name": self.name}


@dataclass(frozen=True)
class SeasonSummary:
    """Resume d'une saison de serie (donnees TMDB)."""

    season_number: int
    name: str = ""
    episode_count: Optional[int] = None
    air_date: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"season": self.season_number, "name": self.name}
        if self.episode_count is not None:
            data["episodeCount"] = self.episode_count
        if self.air_date:
            data["airDate"] = self.air_date
        return data


@dataclass
class ContentItem:
    """
    Element de catalogue au format meta Stremio.

    Attributes:
        id: Identifiant opaque, preserve par l'enrichissement
        type: Type de contenu (film ou serie)
        name: Titre affiche (non vide)
        poster: URL de l'affiche (optionnelle)
        background: URL de l'image de fond (optionnelle)
        poster_shape: Indication de mise en page ("poster" par defaut)
        description: Synopsis ou texte genere
        genres: Genres ordonnes (peut etre vide)
        release_info: Annee, eventuellement suivie du nombre de saisons
        links: Liens de visionnage ordonnes
        imdb_rating, runtime, language, country, status, number_of_seasons,
        seasons: Champs optionnels produits par l'enrichissement
    """

    id: str
    type: ContentType
    name: str
    poster: Optional[str] = None
    background: Optional[str] = None
    poster_shape: str = "poster"
    description: str = ""
    genres: list[str] = field(default_factory=list)
    release_info: str = ""
    links: list[Link] = field(default_factory=list)
    imdb_rating: Optional[str] = None
    runtime: Optional[str] = None
    language: Optional[str] = None
    country: Optional[str] = None
    status: Optional[str] = None
    number_of_seasons: Optional[int] = None
    seasons: list[SeasonSummary] = field(default_factory=list)

    @property
    def dedup_key(self) -> str:
        """Cle de deduplication de l'agregateur (type + nom, sensible a la casse)."""
        return f"{self.type.value}{self.name}"

    def to_dict(self) -> dict[str, Any]:
        """
        Serialise l'item au format meta Stremio (cles camelCase).

        Les champs optionnels absents sont omis.
        """
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.type.value,
            "name": self.name,
            "posterShape": self.poster_shape,
            "description": self.description,
            "genres": list(self.genres),
            "releaseInfo": self.release_info,
            "links": [link.to_dict() for link in self.links],
        }
        optional = {
            "poster": self.poster,
            "background": self.background,
            "imdbRating": self.imdb_rating,
            "runtime": self.runtime,
            "language": self.language,
            "country": self.country,
            "status": self.status,
            "numberOfSeasons": self.number_of_seasons,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        if self.seasons:
            data["seasons"] = [season.to_dict() for season in self.seasons]
        return data


@dataclass(frozen=True)
class StreamRecord:
    """
    Stream emis par le resolveur.

    Attributes:
        url: URL lisible ou lien magnet (cle de deduplication)
        title: Libelle (fournisseur + nom de fichier)
        binge_group: Groupe de lecture continue (behaviorHints)
        filename: Nom du fichier (behaviorHints)
        info_hash: Hash du torrent (entrees torrent uniquement)
        file_idx: Index du fichier dans le torrent
    """

    url: str
    title: str
    binge_group: Optional[str] = None
    filename: Optional[str] = None
    info_hash: Optional[str] = None
    file_idx: Optional[int] = None

    @property
    def is_torrent(self) -> bool:
        return self.info_hash is not None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "url": self.url,
            "title": self.title,
            "behaviorHints": {
                "bingeGroup": self.binge_group,
                "filename": self.filename,
            },
        }
        if self.info_hash is not None:
            data["infoHash"] = self.info_hash
        if self.file_idx is not None:
            data["fileIdx"] = self.file_idx
        return data

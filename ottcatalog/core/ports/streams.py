"""
Port des fournisseurs de streams (services debrid, index torrent).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ottcatalog.core.entities.content import StreamRecord
from ottcatalog.core.value_objects.content_type import ContentType


@dataclass(frozen=True)
class StreamQuery:
    """
    Requete de recherche de streams.

    Attributs :
        query : Chaine de recherche derivee de l'identite (titre + annee)
        content_type : Film ou serie
        season : Saison demandee (series)
        episode : Episode demande (series)
    """

    query: str
    content_type: ContentType
    season: Optional[int] = None
    episode: Optional[int] = None

    @property
    def cache_key(self) -> str:
        return (
            f"{self.query}-{self.content_type.value}-"
            f"{self.season or ''}-{self.episode or ''}"
        )


class IStreamProvider(ABC):
    """
    Fournisseur de streams interroge par le resolveur.

    search() ne leve jamais : toute erreur donne une liste vide.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Identifiant du fournisseur (ex: 'realDebrid')."""
        ...

    @property
    @abstractmethod
    def configured(self) -> bool:
        """True si les identifiants du fournisseur sont configures."""
        ...

    @abstractmethod
    async def search(self, query: StreamQuery) -> list[StreamRecord]:
        """Recherche les streams correspondant a la requete."""
        ...

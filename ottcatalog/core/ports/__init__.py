"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin du monde exterieur sans specifier
comment ces besoins sont satisfaits.

- IFetcher : Recuperation HTTP memoisee
- ISourceAdapter : Adaptateurs sources de contenu
- IMetadataClient, SearchResult, MediaDetails : Service de metadonnees
- IStreamProvider, StreamQuery : Fournisseurs de streams
"""

from ottcatalog.core.ports.api_clients import (
    IMetadataClient,
    MediaDetails,
    SearchResult,
    SeasonInfo,
)
from ottcatalog.core.ports.http import IFetcher
from ottcatalog.core.ports.sources import ISourceAdapter
from ottcatalog.core.ports.streams import IStreamProvider, StreamQuery

__all__ = [
    "IFetcher",
    "ISourceAdapter",
    "IMetadataClient",
    "MediaDetails",
    "SearchResult",
    "SeasonInfo",
    "IStreamProvider",
    "StreamQuery",
]

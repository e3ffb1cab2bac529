"""
Port des adaptateurs sources de contenu.
"""

from abc import ABC, abstractmethod

from ottcatalog.core.entities.content import ContentItem
from ottcatalog.core.value_objects.content_type import ContentType


class ISourceAdapter(ABC):
    """
    Strategie produisant des items de catalogue depuis une methode d'acquisition.

    Contrat :
    - resolve() ne leve jamais : les erreurs internes donnent une liste vide
    - aucun etat mutable partage avec les autres adaptateurs (hors cache HTTP)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Identifiant de l'adaptateur (reference par les definitions de catalogue)."""
        ...

    @abstractmethod
    async def resolve(
        self, content_type: ContentType, catalog_id: str
    ) -> list[ContentItem]:
        """Produit les items pour une requete (type, catalogue)."""
        ...

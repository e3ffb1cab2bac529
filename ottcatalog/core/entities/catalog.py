"""
Definition d'un catalogue expose dans le manifeste.
"""

from dataclasses import dataclass

from ottcatalog.core.value_objects.content_type import ContentType


@dataclass(frozen=True)
class CatalogDefinition:
    """
    Catalogue configure.

    Attributes:
        id: Identifiant du catalogue dans le manifeste
        type: Type de contenu servi
        name: Nom affiche dans le client
        sources: Noms des adaptateurs sources interroges pour ce catalogue
    """

    id: str
    type: ContentType
    name: str
    sources: tuple[str, ...] = ()

    def to_manifest(self) -> dict[str, str]:
        return {"type": self.type.value, "id": self.id, "name": self.name}

"""
Construction du manifeste de l'add-on.
"""

from typing import Any, Sequence

from ottcatalog.core.entities.catalog import CatalogDefinition
from ottcatalog.utils.constants import (
    ADDON_DESCRIPTION,
    ADDON_ID,
    ADDON_NAME,
    CATALOG_GENRES,
    ID_NAMESPACE,
)


def catalog_extra() -> list[dict[str, Any]]:
    """Parametres "extra" acceptes par chaque catalogue (voir CatalogService)."""
    return [
        {"name": "skip"},
        {"name": "search"},
        {"name": "genre", "options": list(CATALOG_GENRES)},
    ]


def build_manifest(
    catalogs: Sequence[CatalogDefinition],
    version: str,
    streams_enabled: bool = False,
) -> dict[str, Any]:
    """
    Manifeste Stremio.

    La ressource "stream" n'est annoncee que si les streams sont actives.
    Les identifiants "{titre}:{annee}" n'ont pas de prefixe annoncable :
    ils restent reserves aux appels directs (CLI, liens partages) et ne
    sont jamais envoyes par un client Stremio.
    """
    resources = ["catalog", "meta"]
    if streams_enabled:
        resources.append("stream")

    entries = []
    for catalog in catalogs:
        entry = catalog.to_manifest()
        entry["extra"] = catalog_extra()
        entries.append(entry)

    return {
        "id": ADDON_ID,
        "version": version,
        "name": ADDON_NAME,
        "description": ADDON_DESCRIPTION,
        "resources": resources,
        "types": ["movie", "series"],
        "catalogs": entries,
        "idPrefixes": [f"{ID_NAMESPACE}:", "tt"],
        "behaviorHints": {"configurable": False},
    }

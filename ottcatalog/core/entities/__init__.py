"""
Entites metier du catalogue.
"""

from ottcatalog.core.entities.catalog import CatalogDefinition
from ottcatalog.core.entities.content import (
    ContentItem,
    Link,
    SeasonSummary,
    StreamRecord,
)

__all__ = ["CatalogDefinition", "ContentItem", "Link", "SeasonSummary", "StreamRecord"]

"""CatalogLoader Protocol — structural interface for loading an IdiomCatalog."""

from pathlib import Path
from typing import Protocol

from idiom_catalog.catalog.domain.catalog import IdiomCatalog


class CatalogLoader(Protocol):
    """Loads an IdiomCatalog from an authored content file."""

    def load(self, path: Path) -> IdiomCatalog: ...

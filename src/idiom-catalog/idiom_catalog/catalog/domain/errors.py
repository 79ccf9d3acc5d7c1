"""Error types raised by the catalog domain."""

from idiom_catalog.core.errors import IdiomCatalogError


class NotFoundError(IdiomCatalogError):
    """Raised when a topic name is not present in a catalog."""

    def __init__(self, name: str, catalog: str) -> None:
        self.name = name
        self.catalog = catalog
        super().__init__(f"Failed to find topic '{name}' in catalog '{catalog}'")

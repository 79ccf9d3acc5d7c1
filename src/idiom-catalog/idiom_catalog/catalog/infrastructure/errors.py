"""Error types raised by catalog infrastructure."""

from pathlib import Path

from idiom_catalog.core.errors import IdiomCatalogError


class CatalogLoadError(IdiomCatalogError):
    """Raised when a catalog file cannot be opened or parsed as YAML."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to load catalog: {reason}: {path}")


class CatalogValidationError(IdiomCatalogError):
    """Raised when catalog content violates the catalog schema or invariants."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate catalog: {reason}")


class BundledCatalogNotFoundError(IdiomCatalogError):
    """Raised when a bundled catalog name is not shipped with the package."""

    def __init__(self, name: str, available: tuple[str, ...]) -> None:
        self.name = name
        super().__init__(
            f"Failed to find bundled catalog '{name}'"
            f" (available: {', '.join(available)})"
        )

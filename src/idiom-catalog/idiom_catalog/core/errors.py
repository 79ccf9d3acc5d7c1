"""Base exception class for all idiom-catalog-specific errors."""


class IdiomCatalogError(Exception):
    """Base class for all idiom-catalog errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable

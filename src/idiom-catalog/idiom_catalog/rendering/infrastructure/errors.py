"""Error types raised by rendering infrastructure."""

from idiom_catalog.core.errors import IdiomCatalogError
from idiom_catalog.rendering.domain.format import RenderFormat


class RenderFormatNotSupportedError(IdiomCatalogError):
    """Raised when a render format value is not a recognised RenderFormat."""

    def __init__(self, render_format: str) -> None:
        self.render_format = render_format
        supported = ", ".join(fmt.value for fmt in RenderFormat)
        super().__init__(
            f"Failed to render: unsupported format '{render_format}'"
            f" (supported: {supported})"
        )

"""Renderer registry — maps a RenderFormat to the matching Renderer."""

from idiom_catalog.rendering.domain.format import RenderFormat
from idiom_catalog.rendering.domain.renderer import Renderer
from idiom_catalog.rendering.infrastructure.errors import RenderFormatNotSupportedError
from idiom_catalog.rendering.infrastructure.markdown import MarkdownRenderer
from idiom_catalog.rendering.infrastructure.plain_text import PlainTextRenderer


def create_renderer(render_format: RenderFormat | str) -> Renderer:
    """Return the Renderer for render_format.

    Accepts either a RenderFormat or its string value.

    Raises:
        RenderFormatNotSupportedError: if render_format is not a known format.
    """
    try:
        resolved = RenderFormat(render_format)
    except ValueError as exc:
        raise RenderFormatNotSupportedError(render_format=str(render_format)) from exc

    if resolved is RenderFormat.PLAIN_TEXT:
        return PlainTextRenderer()
    return MarkdownRenderer()

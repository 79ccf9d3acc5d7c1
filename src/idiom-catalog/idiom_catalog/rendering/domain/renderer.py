"""Renderer Protocol — turns catalog content into a text document."""

from typing import Protocol

from idiom_catalog.catalog.domain.catalog import IdiomCatalog
from idiom_catalog.catalog.domain.topic import TopicEntry


class Renderer(Protocol):
    """Produces a human-readable document from catalog content.

    Implementations are pure: the same input always yields the same text.
    """

    def render_catalog(self, catalog: IdiomCatalog) -> str: ...

    def render_topic(self, entry: TopicEntry) -> str: ...

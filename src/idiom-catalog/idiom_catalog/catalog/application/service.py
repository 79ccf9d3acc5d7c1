"""IdiomCatalogService — read-only access to one catalog plus rendering."""

from idiom_catalog.catalog.domain.catalog import IdiomCatalog
from idiom_catalog.catalog.domain.errors import NotFoundError
from idiom_catalog.catalog.domain.observer import CatalogObserver
from idiom_catalog.catalog.domain.topic import TopicEntry
from idiom_catalog.rendering.domain.format import RenderFormat
from idiom_catalog.rendering.infrastructure.registry import create_renderer


class IdiomCatalogService:
    """Exposes list, lookup and render operations over a single IdiomCatalog.

    The catalog is immutable, so one service instance can be shared by any
    number of readers.
    """

    def __init__(self, catalog: IdiomCatalog, observer: CatalogObserver) -> None:
        self._catalog = catalog
        self._observer = observer

    @property
    def catalog(self) -> IdiomCatalog:
        return self._catalog

    def list_topics(self) -> list[str]:
        """Return topic names in catalog order."""
        return self._catalog.list_topics()

    def get_topic(self, name: str) -> TopicEntry:
        """
        Return the topic called name.

        Raises:
            NotFoundError: if the catalog has no topic with that name.
        """
        try:
            return self._catalog.get_topic(name)
        except NotFoundError:
            self._observer.catalog_topic_not_found(
                catalog=self._catalog.name, name=name
            )
            raise

    def render_all(self, render_format: RenderFormat | str) -> str:
        """
        Render every topic, in catalog order, in the requested format.

        Raises:
            RenderFormatNotSupportedError: if render_format is not recognised.
        """
        renderer = create_renderer(render_format=render_format)
        document = renderer.render_catalog(catalog=self._catalog)
        self._observer.catalog_rendered(
            catalog=self._catalog.name,
            render_format=str(RenderFormat(render_format)),
            total_topics=len(self._catalog),
        )
        return document

    def render_topic(self, name: str, render_format: RenderFormat | str) -> str:
        """
        Render the single topic called name.

        Raises:
            NotFoundError: if the catalog has no topic with that name.
            RenderFormatNotSupportedError: if render_format is not recognised.
        """
        renderer = create_renderer(render_format=render_format)
        return renderer.render_topic(entry=self.get_topic(name))

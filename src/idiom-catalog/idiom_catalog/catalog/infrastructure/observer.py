"""Structlog implementation of the CatalogObserver port."""

import structlog


class StructlogCatalogObserver:
    """Delegates catalog domain events to structlog.

    Satisfies the CatalogObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def catalog_loading_started(self, path: str) -> None:
        self._log.debug("catalog.loading_started", path=path)

    def catalog_loaded(self, path: str, name: str, total_topics: int) -> None:
        self._log.info(
            "catalog.loaded",
            path=path,
            name=name,
            total_topics=total_topics,
        )

    def catalog_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("catalog.loading_failed", path=path, reason=reason)

    def catalog_topic_not_found(self, catalog: str, name: str) -> None:
        self._log.warning("catalog.topic_not_found", catalog=catalog, name=name)

    def catalog_rendered(
        self, catalog: str, render_format: str, total_topics: int
    ) -> None:
        self._log.info(
            "catalog.rendered",
            catalog=catalog,
            render_format=render_format,
            total_topics=total_topics,
        )

"""Observer port for the catalog domain — defines events in domain language."""

from typing import Protocol


class CatalogObserver(Protocol):
    def catalog_loading_started(self, path: str) -> None: ...

    def catalog_loaded(self, path: str, name: str, total_topics: int) -> None: ...

    def catalog_loading_failed(self, path: str, reason: str) -> None: ...

    def catalog_topic_not_found(self, catalog: str, name: str) -> None: ...

    def catalog_rendered(
        self, catalog: str, render_format: str, total_topics: int
    ) -> None: ...

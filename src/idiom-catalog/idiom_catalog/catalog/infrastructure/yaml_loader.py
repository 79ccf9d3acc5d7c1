"""YAML catalog loader — parses, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from idiom_catalog.catalog.domain.catalog import IdiomCatalog
from idiom_catalog.catalog.domain.observer import CatalogObserver
from idiom_catalog.catalog.infrastructure.errors import (
    CatalogLoadError,
    CatalogValidationError,
)


class YamlCatalogLoader:
    """Loads and validates an IdiomCatalog from a YAML file."""

    def __init__(self, observer: CatalogObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> IdiomCatalog:
        """
        Load, validate, and return an IdiomCatalog from a YAML file.

        Raises:
            CatalogLoadError: if the file is missing, unreadable, not UTF-8,
                not valid YAML, or its top level is not a mapping.
            CatalogValidationError: if the content violates the catalog schema,
                including empty snippets and duplicate topic names.
        """
        path_str = str(path)
        self._observer.catalog_loading_started(path=path_str)

        try:
            raw = _parse_yaml(path=path)
            catalog = _build_catalog(raw=raw)
        except (CatalogLoadError, CatalogValidationError) as exc:
            self._observer.catalog_loading_failed(path=path_str, reason=str(exc))
            raise

        self._observer.catalog_loaded(
            path=path_str,
            name=catalog.name,
            total_topics=len(catalog),
        )
        return catalog


def _parse_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise CatalogLoadError(path=path, reason="file not found") from exc
    except OSError as exc:
        raise CatalogLoadError(
            path=path, reason=f"file not readable ({exc.strerror or exc})"
        ) from exc
    except UnicodeDecodeError as exc:
        raise CatalogLoadError(path=path, reason="file is not valid UTF-8") from exc
    except yaml.YAMLError as exc:
        raise CatalogLoadError(path=path, reason=f"invalid YAML ({exc})") from exc

    if not isinstance(raw, dict):
        raise CatalogLoadError(path=path, reason="top level is not a mapping")
    return raw


def _build_catalog(raw: dict[str, Any]) -> IdiomCatalog:
    try:
        return IdiomCatalog.model_validate(raw)
    except ValidationError as exc:
        raise CatalogValidationError(str(exc)) from exc

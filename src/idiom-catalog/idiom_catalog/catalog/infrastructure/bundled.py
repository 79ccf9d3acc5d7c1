"""Lookup of the catalogs shipped as package data."""

import importlib.resources
from pathlib import Path

from idiom_catalog.catalog.infrastructure.errors import BundledCatalogNotFoundError

BUNDLED_CATALOGS: tuple[str, ...] = ("walkthrough", "cheatsheet")
DEFAULT_CATALOG = "walkthrough"


def bundled_catalog_path(name: str) -> Path:
    """Return the filesystem path of the bundled catalog called *name*.

    The two bundled catalogs are independent documents; neither is derived
    from the other.

    Raises:
        BundledCatalogNotFoundError: if *name* is not a bundled catalog.
    """
    if name not in BUNDLED_CATALOGS:
        raise BundledCatalogNotFoundError(name=name, available=BUNDLED_CATALOGS)
    pkg_files = importlib.resources.files("idiom_catalog.catalog.content")
    return Path(str(pkg_files.joinpath(f"{name}.yaml")))

"""Catalog package: the read-only set of cards offers are made against."""

from .catalog import Catalog, DEFAULT_ENTRIES, default_catalog, entry_from_dict, load_catalog
from .provider import CatalogProvider, catalog_provider

__all__ = [
    "Catalog",
    "CatalogProvider",
    "DEFAULT_ENTRIES",
    "catalog_provider",
    "default_catalog",
    "entry_from_dict",
    "load_catalog",
]

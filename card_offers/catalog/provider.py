"""Process-wide catalog holder."""

import threading
from pathlib import Path
from typing import Optional, Union

from ..utils.config import settings
from ..utils.log import LoggerMixin
from .catalog import Catalog, default_catalog, load_catalog


class CatalogProvider(LoggerMixin):
    """Holds the shared catalog reference.

    Readers take ``current`` once per batch and keep using that object, so a
    refresh swaps the whole reference and never mutates a catalog that an
    in-flight batch is matching against.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self._path = path
        self._catalog: Optional[Catalog] = None
        self._lock = threading.Lock()

    @property
    def current(self) -> Catalog:
        catalog = self._catalog
        if catalog is None:
            with self._lock:
                if self._catalog is None:
                    self._catalog = self._load()
                catalog = self._catalog
        return catalog

    def refresh(self, catalog: Optional[Catalog] = None) -> Catalog:
        """Replace the shared catalog, reloading from the configured source when none is given."""
        new_catalog = catalog if catalog is not None else self._load()
        with self._lock:
            previous = self._catalog
            self._catalog = new_catalog
        self.logger.info(
            "Catalog swapped",
            previous_entries=len(previous) if previous is not None else 0,
            entries=len(new_catalog),
        )
        return new_catalog

    def _load(self) -> Catalog:
        if self._path:
            return load_catalog(self._path)
        self.logger.debug("No catalog path configured, using built-in catalog")
        return default_catalog()


# Global instance
catalog_provider = CatalogProvider(settings.CATALOG_PATH)

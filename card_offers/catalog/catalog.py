"""Immutable card catalog and its JSON loader."""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple, Union

from ..core.types import ALL_CONDITIONS, CatalogEntry, Condition
from ..utils.error_handler import CatalogError, ErrorContext, validate_required_fields
from ..utils.log import get_logger
from ..utils.validation import validate_enum_value, validate_file_path, validate_numeric_range

logger = get_logger(__name__)

REQUIRED_FIELDS = ["id", "name", "set", "number", "marketPrice"]


class Catalog:
    """Ordered, read-only collection of catalog entries.

    Iteration order is the load order and is significant: the matcher breaks
    score ties in favour of the earlier entry.
    """

    __slots__ = ("_entries", "_by_id")

    def __init__(self, entries: Iterable[CatalogEntry]):
        ordered = tuple(entries)
        by_id: Dict[int, CatalogEntry] = {}
        for entry in ordered:
            if entry.id in by_id:
                raise CatalogError(f"Duplicate catalog id: {entry.id}", details={"id": entry.id})
            by_id[entry.id] = entry
        self._entries: Tuple[CatalogEntry, ...] = ordered
        self._by_id = by_id

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Catalog({len(self._entries)} entries)"

    @property
    def entries(self) -> Tuple[CatalogEntry, ...]:
        return self._entries

    @property
    def set_names(self) -> Tuple[str, ...]:
        """Distinct set names in catalog order."""
        return tuple(dict.fromkeys(entry.set_name for entry in self._entries))

    def get(self, entry_id: int) -> Optional[CatalogEntry]:
        return self._by_id.get(entry_id)


def entry_from_dict(data: Dict[str, Any]) -> CatalogEntry:
    """Build a CatalogEntry from a JSON record (``set``/``marketPrice`` keys)."""
    context = ErrorContext(operation="load_catalog_entry", module=__name__, function="entry_from_dict")
    validate_required_fields(data, REQUIRED_FIELDS, context)

    market_price = validate_numeric_range(data["marketPrice"], min_value=0, field_name="marketPrice")

    supported = data.get("supportedConditions")
    if supported is None:
        conditions = ALL_CONDITIONS
    else:
        labels = [condition.value for condition in Condition]
        conditions = frozenset(
            Condition(validate_enum_value(label, labels, field_name="supportedConditions"))
            for label in supported
        )

    return CatalogEntry(
        id=int(data["id"]),
        name=str(data["name"]).strip(),
        set_name=str(data["set"]).strip(),
        number=str(data["number"]).strip(),
        market_price=float(market_price),
        supported_conditions=conditions,
    )


def load_catalog(path: Union[str, Path]) -> Catalog:
    """Load a catalog from a JSON file holding a list of entry records."""
    catalog_path = validate_file_path(path, must_exist=True)

    try:
        with open(catalog_path, "r", encoding="utf-8") as f:
            records = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogError(
            f"Catalog file is not valid JSON: {catalog_path}",
            details={"path": str(catalog_path), "error": str(e)}
        )

    if not isinstance(records, list):
        raise CatalogError(
            "Catalog file must contain a list of entries",
            details={"path": str(catalog_path), "type": type(records).__name__}
        )

    catalog = Catalog(entry_from_dict(record) for record in records)
    logger.info("Catalog loaded", path=str(catalog_path), entries=len(catalog))
    return catalog


DEFAULT_ENTRIES = (
    CatalogEntry(1, "Charizard", "Base Set", "4/102", 450.00),
    CatalogEntry(2, "Pikachu VMAX", "Vivid Voltage", "044/185", 85.00),
    CatalogEntry(3, "Blastoise", "Base Set", "2/102", 180.00),
    CatalogEntry(4, "Venusaur", "Base Set", "15/102", 120.00),
    CatalogEntry(5, "Pikachu", "Base Set", "58/102", 35.00),
    CatalogEntry(6, "Alakazam", "Base Set", "1/102", 90.00),
)


def default_catalog() -> Catalog:
    """Built-in catalog used when no catalog file is configured."""
    return Catalog(DEFAULT_ENTRIES)

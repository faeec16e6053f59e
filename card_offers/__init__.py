"""Card Offers - identify trading cards from typed lines or OCR text and quote buy-back offers."""

__version__ = "1.0.0"
__author__ = "Card Offers Team"
__description__ = "Catalog matching, condition grading and offer pricing for trading-card listings"

from .catalog import Catalog, catalog_provider, default_catalog, load_catalog
from .core.types import (
    CatalogEntry,
    Condition,
    IdentifiedCard,
    InputFragment,
    ProcessingResult,
)
from .match import CatalogMatcher, estimate_confidence, normalize_condition
from .ocr import OCRAnnotation, OCRTextExtractor, fragment_from_annotations
from .pricing import offer_pricer
from .process import FragmentProcessor, split_lines
from .utils.config import settings
from .utils.log import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__description__",
    # Data model
    "CatalogEntry",
    "Condition",
    "IdentifiedCard",
    "InputFragment",
    "ProcessingResult",
    # Core components
    "configure_logging",
    "get_logger",
    "settings",
    "Catalog",
    "catalog_provider",
    "default_catalog",
    "load_catalog",
    "CatalogMatcher",
    "estimate_confidence",
    "normalize_condition",
    "OCRAnnotation",
    "OCRTextExtractor",
    "fragment_from_annotations",
    "offer_pricer",
    "FragmentProcessor",
    "split_lines",
]

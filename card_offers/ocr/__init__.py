"""OCR package: card signals from already-extracted OCR text."""

from .extract import (
    BoundingBox,
    OCRAnnotation,
    OCRTextExtractor,
    annotations_from_vision_response,
    fragment_from_annotations,
)
from .regexes import (
    CARD_NUMBER_PATTERN,
    extract_card_number,
    extract_condition_keyword,
)

__all__ = [
    "BoundingBox",
    "OCRAnnotation",
    "OCRTextExtractor",
    "annotations_from_vision_response",
    "fragment_from_annotations",
    "CARD_NUMBER_PATTERN",
    "extract_card_number",
    "extract_condition_keyword",
]

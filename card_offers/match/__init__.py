"""
Match module: condition normalization, catalog scoring and confidence.
"""

from .condition import CONDITION_KEYWORDS, find_condition_keyword, normalize_condition
from .matcher import CatalogMatcher, score_entry
from .score import confidence_from_score, estimate_confidence, is_known_card_name

__all__ = [
    "CONDITION_KEYWORDS",
    "find_condition_keyword",
    "normalize_condition",
    "CatalogMatcher",
    "score_entry",
    "confidence_from_score",
    "estimate_confidence",
    "is_known_card_name",
]

"""Condition keyword normalization."""

from typing import List, Optional, Tuple

from ..core.types import Condition

# Checked in order, first hit wins. Full phrases come before "mint" and the
# two-letter abbreviations so "near mint" never resolves to Mint.
CONDITION_KEYWORDS: List[Tuple[str, Condition]] = [
    ("near mint", Condition.NEAR_MINT),
    ("lightly played", Condition.LIGHTLY_PLAYED),
    ("moderately played", Condition.MODERATELY_PLAYED),
    ("heavily played", Condition.HEAVILY_PLAYED),
    ("damaged", Condition.HEAVILY_PLAYED),
    ("poor", Condition.HEAVILY_PLAYED),
    ("mint", Condition.MINT),
    ("nm", Condition.NEAR_MINT),
    ("lp", Condition.LIGHTLY_PLAYED),
    ("mp", Condition.MODERATELY_PLAYED),
    ("hp", Condition.HEAVILY_PLAYED),
]


def find_condition_keyword(text: Optional[str]) -> Optional[str]:
    """First keyword from CONDITION_KEYWORDS contained in ``text``."""
    if not text:
        return None

    lowered = text.lower()
    for keyword, _condition in CONDITION_KEYWORDS:
        if keyword in lowered:
            return keyword
    return None


def normalize_condition(text: Optional[str], default: Optional[Condition] = None) -> Optional[Condition]:
    """
    Map the first condition keyword found in ``text`` to a Condition.

    Matching is a case-insensitive substring test. ``default`` is returned
    when no keyword is present; the text-line path passes NEAR_MINT, the OCR
    path passes nothing so missing evidence stays visible as None.
    """
    keyword = find_condition_keyword(text)
    if keyword is None:
        return default
    return dict(CONDITION_KEYWORDS)[keyword]

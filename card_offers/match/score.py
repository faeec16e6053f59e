"""
Confidence scores for identified cards.

These are heuristic trust signals shown to the caller, not calibrated
probabilities: they only say how much supporting evidence was found.
"""

import re
from typing import Optional

from ..core.constants import (
    CONFIDENCE_BASE,
    CONFIDENCE_FRACTION_NUMBER,
    CONFIDENCE_KNOWN_NAME,
    CONFIDENCE_MAX,
    CONFIDENCE_NAME,
    CONFIDENCE_NUMBER,
    CONFIDENCE_SET,
    KNOWN_CARD_NAMES,
    SCORE_FULL_CONFIDENCE,
)

_KNOWN_NAME = re.compile(r"\b(?:" + "|".join(KNOWN_CARD_NAMES) + r")\b", re.IGNORECASE)


def is_known_card_name(card_name: Optional[str]) -> bool:
    """True when the name contains an allow-listed card name as a whole word."""
    return bool(card_name) and _KNOWN_NAME.search(card_name) is not None


def estimate_confidence(
    card_name: Optional[str] = None,
    set_name: Optional[str] = None,
    card_number: Optional[str] = None,
) -> float:
    """Confidence for an OCR detection from which signals were found.

    Args:
        card_name: Extracted card name, if any
        set_name: Extracted set name, if any
        card_number: Extracted card number, if any ("74/73" or "4")

    Returns:
        Score between 0.1 and 1.0
    """
    confidence = CONFIDENCE_BASE

    if card_name:
        confidence += CONFIDENCE_NAME
        # Noisy OCR can produce arbitrary words; allow-listed names earn more
        if is_known_card_name(card_name):
            confidence += CONFIDENCE_KNOWN_NAME

    if set_name:
        confidence += CONFIDENCE_SET

    if card_number:
        confidence += CONFIDENCE_NUMBER
        if "/" in card_number:
            confidence += CONFIDENCE_FRACTION_NUMBER

    return round(min(confidence, CONFIDENCE_MAX), 2)


def confidence_from_score(score: int) -> float:
    """Confidence for a typed-line match: the catalog score out of 5, capped at 1.0."""
    return round(min(max(score, 0) / SCORE_FULL_CONFIDENCE, CONFIDENCE_MAX), 2)

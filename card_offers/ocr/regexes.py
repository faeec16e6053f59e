"""Regex patterns for card text extraction."""

import re
from typing import Optional

from ..core.constants import KNOWN_CARD_NAMES, NAME_SUFFIXES, RARITIES

# Fraction form ("74/73") or hash form ("#4")
CARD_NUMBER_PATTERN = re.compile(r'(\d+/\d+|#\d+)')

KNOWN_NAME_PATTERN = re.compile(
    r'\b(' + '|'.join(KNOWN_CARD_NAMES) + r')\b', re.IGNORECASE
)

# "<word> VMAX", "<word> GX", ...
SUFFIXED_NAME_PATTERN = re.compile(
    r'\b\w+\s+(?:' + '|'.join(NAME_SUFFIXES) + r')\b', re.IGNORECASE
)

# Longer phrases first so "near mint" is not read as "mint"; "120 HP" and "HP 120" are stats, not grades
CONDITION_KEYWORD_PATTERN = re.compile(
    r'\b(near mint|lightly played|moderately played|heavily played|damaged|poor|mint|nm|lp|mp|(?<!\d\s)hp(?!\s*\d))\b',
    re.IGNORECASE,
)

RARITY_PATTERN = re.compile(
    r'\b(' + '|'.join(sorted(RARITIES, key=len, reverse=True)) + r')\b', re.IGNORECASE
)

# "120 HP" on older cards, "HP 120" on newer ones
HP_PATTERN = re.compile(r'\b(?:(\d{1,3})\s*hp|hp\s*(\d{1,3}))\b', re.IGNORECASE)


def extract_card_number(text: str) -> Optional[str]:
    """
    Return the first card number in ``text`` with any leading '#' removed.

    Examples:
        >>> extract_card_number("Charizard 4/102")
        '4/102'
        >>> extract_card_number("Pikachu #58")
        '58'
        >>> extract_card_number("Blastoise") is None
        True
    """
    match = CARD_NUMBER_PATTERN.search(text)
    if match:
        return match.group(1).replace('#', '')
    return None


def extract_condition_keyword(text: str) -> Optional[str]:
    """First whole-word condition keyword in ``text``, lowercased."""
    match = CONDITION_KEYWORD_PATTERN.search(text)
    return match.group(1).lower() if match else None

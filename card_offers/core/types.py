from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Tuple

from .constants import CONDITION_MULTIPLIERS


class Condition(str, Enum):
    MINT = "Mint"
    NEAR_MINT = "Near Mint"
    LIGHTLY_PLAYED = "Lightly Played"
    MODERATELY_PLAYED = "Moderately Played"
    HEAVILY_PLAYED = "Heavily Played"

    @property
    def multiplier(self) -> float:
        return CONDITION_MULTIPLIERS[self.value]


ALL_CONDITIONS: FrozenSet[Condition] = frozenset(Condition)


class FragmentSource(str, Enum):
    TEXT = "text"
    OCR = "ocr"


@dataclass(frozen=True)
class CatalogEntry:
    id: int
    name: str
    set_name: str
    number: str
    market_price: float
    supported_conditions: FrozenSet[Condition] = ALL_CONDITIONS


@dataclass(frozen=True)
class InputFragment:
    text: str
    card_number: Optional[str] = None
    condition_keyword: Optional[str] = None
    source: FragmentSource = FragmentSource.TEXT

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass(frozen=True)
class MatchCandidate:
    entry: CatalogEntry
    score: int


@dataclass(frozen=True)
class OfferQuote:
    market_price: float
    offer_price: float


@dataclass(frozen=True)
class CardDetection:
    """Signals pulled out of one image's OCR text."""

    card_name: Optional[str] = None
    set_name: Optional[str] = None
    card_number: Optional[str] = None
    condition: Optional[Condition] = None
    rarity: Optional[str] = None
    hp: Optional[int] = None


@dataclass(frozen=True)
class IdentifiedCard:
    id: int
    entry: CatalogEntry
    condition: Optional[Condition]
    market_price: Optional[float]
    offer_price: Optional[float]
    confidence: float
    source_text: str
    detection: Optional[CardDetection] = None

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def set_name(self) -> str:
        return self.entry.set_name

    @property
    def number(self) -> str:
        return self.entry.number


@dataclass(frozen=True)
class ProcessingResult:
    matched: Tuple[IdentifiedCard, ...] = field(default_factory=tuple)
    unmatched: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def matched_count(self) -> int:
        return len(self.matched)

    @property
    def unmatched_count(self) -> int:
        return len(self.unmatched)

    @property
    def total(self) -> int:
        return self.matched_count + self.unmatched_count

"""Core data model and fixed tables."""

from .types import (
    ALL_CONDITIONS,
    CardDetection,
    CatalogEntry,
    Condition,
    FragmentSource,
    IdentifiedCard,
    InputFragment,
    MatchCandidate,
    OfferQuote,
    ProcessingResult,
)

__all__ = [
    "ALL_CONDITIONS",
    "CardDetection",
    "CatalogEntry",
    "Condition",
    "FragmentSource",
    "IdentifiedCard",
    "InputFragment",
    "MatchCandidate",
    "OfferQuote",
    "ProcessingResult",
]

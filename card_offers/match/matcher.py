"""Scores a text fragment against every catalog entry and picks the best one."""

from typing import Iterable, List, Optional

from ..core.constants import SCORE_NAME, SCORE_NAME_WORD, SCORE_NUMBER, SCORE_SET
from ..core.types import CatalogEntry, InputFragment, MatchCandidate
from ..utils.config import settings
from ..utils.error_handler import ConfigurationError
from ..utils.log import LoggerMixin


def score_entry(fragment: InputFragment, entry: CatalogEntry) -> int:
    """Integer match score of ``fragment`` against one catalog entry.

    The per-word points overlap with the whole-name points on purpose: a
    line naming "Pikachu VMAX" scores 3 + 1 + 1 against that entry, and 3 + 1
    against plain "Pikachu".
    """
    text = fragment.text.lower()
    name = entry.name.lower()
    score = 0

    if name in text:
        score += SCORE_NAME

    if entry.set_name.lower() in text:
        score += SCORE_SET

    if fragment.card_number and fragment.card_number in entry.number:
        score += SCORE_NUMBER

    for word in name.split():
        if word in text:
            score += SCORE_NAME_WORD

    return score


class CatalogMatcher(LoggerMixin):
    """Best-match selection with a tunable acceptance threshold."""

    def __init__(self, min_score: Optional[int] = None):
        self.min_score = settings.MATCH_MIN_SCORE if min_score is None else min_score
        if self.min_score < 1:
            raise ConfigurationError(
                "Minimum match score must be at least 1",
                details={"min_score": self.min_score}
            )

    def score_catalog(self, fragment: InputFragment, catalog: Iterable[CatalogEntry]) -> List[MatchCandidate]:
        """One candidate per entry, in catalog order."""
        return [MatchCandidate(entry=entry, score=score_entry(fragment, entry)) for entry in catalog]

    def match(self, fragment: InputFragment, catalog: Iterable[CatalogEntry]) -> Optional[MatchCandidate]:
        """
        Highest-scoring entry, or None when it scores below ``min_score``.

        Only a strictly higher score replaces the current best, so ties go to
        the entry that comes first in the catalog.
        """
        best: Optional[MatchCandidate] = None
        for candidate in self.score_catalog(fragment, catalog):
            if best is None or candidate.score > best.score:
                best = candidate

        if best is None or best.score < self.min_score:
            self.logger.debug(
                "No catalog match",
                text=fragment.text,
                best_score=best.score if best else None,
                min_score=self.min_score,
            )
            return None

        self.logger.debug(
            "Catalog match",
            text=fragment.text,
            entry_id=best.entry.id,
            score=best.score,
        )
        return best

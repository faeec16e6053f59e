"""Batch orchestration: fragments in, matched cards and unmatched text out."""

import asyncio
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence

from ..catalog import Catalog, catalog_provider
from ..core.types import (
    CardDetection,
    Condition,
    FragmentSource,
    IdentifiedCard,
    InputFragment,
    MatchCandidate,
    ProcessingResult,
)
from ..match.condition import find_condition_keyword, normalize_condition
from ..match.matcher import CatalogMatcher
from ..match.score import confidence_from_score, estimate_confidence
from ..ocr.extract import OCRAnnotation, OCRTextExtractor, fragment_from_annotations
from ..ocr.regexes import extract_card_number, extract_condition_keyword
from ..pricing.offer import OfferPricer, offer_pricer
from ..utils.config import settings
from ..utils.error_handler import ErrorContext, InputEmptyError, safe_execute
from ..utils.log import LoggerMixin


def fragment_from_line(line: str) -> InputFragment:
    """Text-path fragment for one typed line, with number and condition hints filled in."""
    text = line.strip()
    return InputFragment(
        text=text,
        card_number=extract_card_number(text),
        condition_keyword=find_condition_keyword(text),
        source=FragmentSource.TEXT,
    )


def split_lines(text: str) -> List[InputFragment]:
    """One fragment per non-blank line."""
    return [fragment_from_line(line) for line in text.splitlines() if line.strip()]


@dataclass(frozen=True)
class _Identification:
    """A matched fragment before it is given its batch id."""

    candidate: MatchCandidate
    condition: Optional[Condition]
    market_price: Optional[float]
    offer_price: Optional[float]
    confidence: float
    detection: Optional[CardDetection] = None


class FragmentProcessor(LoggerMixin):
    """Classifies each fragment of a batch against the catalog.

    Fragments are independent of one another: the outcome for a fragment
    never depends on the others, only the reported order does, and that
    always follows input order.
    """

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        matcher: Optional[CatalogMatcher] = None,
        pricer: Optional[OfferPricer] = None,
        max_workers: Optional[int] = None,
    ):
        # None means "whatever the provider holds when the batch starts"
        self._catalog = catalog
        self.matcher = matcher or CatalogMatcher()
        self.pricer = pricer or offer_pricer
        self.max_workers = max_workers or settings.MAX_WORKERS

    @property
    def catalog(self) -> Catalog:
        return self._catalog if self._catalog is not None else catalog_provider.current

    def process(self, fragments: Sequence[InputFragment]) -> ProcessingResult:
        """
        Classify every fragment and collect matched cards and unmatched text.

        Every fragment is reported exactly once; a blank fragment in an
        otherwise usable batch is reported as unmatched empty text.

        Raises:
            InputEmptyError: If there are no fragments, or all are blank
        """
        blank = sum(1 for f in fragments if f.is_blank)
        if blank == len(fragments):
            raise InputEmptyError(
                "No valid card entries found",
                details={"fragments": len(fragments)}
            )

        # One catalog snapshot for the whole batch
        catalog = self.catalog
        extractor = OCRTextExtractor(catalog.set_names)
        context = self.log_start(
            "Batch processing",
            fragments=len(fragments),
            blank=blank,
            workers=self.max_workers,
        )

        slots = self._classify_all(list(fragments), catalog, extractor)

        matched: List[IdentifiedCard] = []
        unmatched: List[str] = []
        for fragment, outcome in zip(fragments, slots):
            if outcome is None:
                unmatched.append(fragment.text.strip())
                continue
            matched.append(IdentifiedCard(
                id=len(matched) + 1,
                entry=outcome.candidate.entry,
                condition=outcome.condition,
                market_price=outcome.market_price,
                offer_price=outcome.offer_price,
                confidence=outcome.confidence,
                source_text=fragment.text.strip(),
                detection=outcome.detection,
            ))

        result = ProcessingResult(matched=tuple(matched), unmatched=tuple(unmatched))
        self.log_success(context, matched=result.matched_count, unmatched=result.unmatched_count)
        return result

    async def aprocess(self, fragments: Sequence[InputFragment]) -> ProcessingResult:
        """Run ``process`` in a worker thread so the event loop is never blocked."""
        return await asyncio.to_thread(self.process, fragments)

    def process_text(self, text: str) -> ProcessingResult:
        """Classify a block of typed text, one card per line."""
        return self.process(split_lines(text))

    def process_ocr(self, images: Iterable[Iterable[OCRAnnotation]]) -> ProcessingResult:
        """Classify OCR output, one fragment per image."""
        return self.process([fragment_from_annotations(annotations) for annotations in images])

    def _classify_all(
        self,
        fragments: List[InputFragment],
        catalog: Catalog,
        extractor: OCRTextExtractor,
    ) -> List[Optional[_Identification]]:
        slots: List[Optional[_Identification]] = [None] * len(fragments)

        if self.max_workers <= 1 or len(fragments) == 1:
            for position, fragment in enumerate(fragments):
                slots[position] = self._classify_safely(fragment, position, catalog, extractor)
            return slots

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures = {
                pool.submit(self._classify_safely, fragment, position, catalog, extractor): position
                for position, fragment in enumerate(fragments)
            }
            for future in as_completed(futures):
                slots[futures[future]] = future.result()
        return slots

    def _classify_safely(
        self,
        fragment: InputFragment,
        position: int,
        catalog: Catalog,
        extractor: OCRTextExtractor,
    ) -> Optional[_Identification]:
        # A fragment that fails to classify is reported as unmatched
        return safe_execute(
            self._classify,
            fragment,
            catalog,
            extractor,
            context=ErrorContext(
                operation="classify_fragment",
                module=__name__,
                function="_classify",
                input_data={"position": position, "text": fragment.text, "source": fragment.source.value},
            ),
            logger=self.logger,
            default_return=None,
        )

    def _classify(
        self,
        fragment: InputFragment,
        catalog: Catalog,
        extractor: OCRTextExtractor,
    ) -> Optional[_Identification]:
        # Blank fragments are reported as unmatched, never scored
        if fragment.is_blank:
            return None

        fragment = _with_hints(fragment)
        candidate = self.matcher.match(fragment, catalog)
        if candidate is None:
            return None

        if fragment.source is FragmentSource.OCR:
            return self._identify_ocr(fragment, candidate, extractor)
        return self._identify_text(fragment, candidate)

    def _identify_text(self, fragment: InputFragment, candidate: MatchCandidate) -> _Identification:
        # Typed lines with no condition keyword are assumed to be Near Mint
        condition = normalize_condition(fragment.condition_keyword, default=Condition.NEAR_MINT)
        quote = self.pricer.price(candidate.entry, condition)
        return _Identification(
            candidate=candidate,
            condition=condition,
            market_price=quote.market_price,
            offer_price=quote.offer_price,
            confidence=confidence_from_score(candidate.score),
        )

    def _identify_ocr(
        self,
        fragment: InputFragment,
        candidate: MatchCandidate,
        extractor: OCRTextExtractor,
    ) -> _Identification:
        detection = extractor.extract(fragment.text)
        condition = normalize_condition(fragment.condition_keyword)

        market_price = offer_price = None
        if condition is not None:
            quote = self.pricer.price(candidate.entry, condition)
            market_price, offer_price = quote.market_price, quote.offer_price
        else:
            self.logger.info(
                "No condition evidence in OCR text, offer left unpriced",
                entry_id=candidate.entry.id,
            )

        return _Identification(
            candidate=candidate,
            condition=condition,
            market_price=market_price,
            offer_price=offer_price,
            confidence=estimate_confidence(
                detection.card_name, detection.set_name, detection.card_number
            ),
            detection=detection,
        )


def _with_hints(fragment: InputFragment) -> InputFragment:
    """Fill in number/condition hints a caller-built fragment may lack."""
    if fragment.card_number is not None and fragment.condition_keyword is not None:
        return fragment
    return replace(
        fragment,
        card_number=fragment.card_number or extract_card_number(fragment.text),
        condition_keyword=fragment.condition_keyword or _condition_keyword(fragment),
    )


def _condition_keyword(fragment: InputFragment) -> Optional[str]:
    if fragment.source is FragmentSource.OCR:
        return extract_condition_keyword(fragment.text)
    return find_condition_keyword(fragment.text)

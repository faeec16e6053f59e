"""Turn OCR provider annotations into card signals and input fragments."""

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..core.constants import KNOWN_SET_NAMES
from ..core.types import CardDetection, FragmentSource, InputFragment
from ..match.condition import normalize_condition
from ..utils.error_handler import OCRError
from ..utils.log import LoggerMixin
from .regexes import (
    HP_PATTERN,
    KNOWN_NAME_PATTERN,
    RARITY_PATTERN,
    SUFFIXED_NAME_PATTERN,
    extract_card_number,
    extract_condition_keyword,
)


@dataclass(frozen=True)
class BoundingBox:
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def from_vertices(cls, vertices: Optional[Sequence[Dict[str, Any]]]) -> "BoundingBox":
        """Axis-aligned box around a polygon; fewer than four vertices gives an empty box."""
        if not vertices or len(vertices) < 4:
            return cls()

        xs = [v.get("x") or 0 for v in vertices]
        ys = [v.get("y") or 0 for v in vertices]
        return cls(
            x=min(xs),
            y=min(ys),
            width=max(xs) - min(xs),
            height=max(ys) - min(ys),
        )


@dataclass(frozen=True)
class OCRAnnotation:
    """One text annotation returned by the OCR provider."""

    text: str
    confidence: float = 0.9
    bounding_box: BoundingBox = BoundingBox()

    @classmethod
    def from_vision(cls, annotation: Dict[str, Any]) -> "OCRAnnotation":
        """
        Build from a Vision-style ``textAnnotations`` record.

        The provider reports no per-annotation confidence for text detection,
        so the fixed default is kept.
        """
        if "description" not in annotation:
            raise OCRError(
                "OCR annotation has no description",
                details={"keys": sorted(annotation.keys())}
            )
        poly = annotation.get("boundingPoly") or {}
        return cls(
            text=str(annotation["description"]),
            bounding_box=BoundingBox.from_vertices(poly.get("vertices")),
        )


def fragment_from_annotations(annotations: Iterable[OCRAnnotation]) -> InputFragment:
    """Join one image's annotation texts into a single OCR fragment."""
    text = " ".join(a.text.strip() for a in annotations if a.text and a.text.strip())
    return InputFragment(
        text=text,
        card_number=extract_card_number(text),
        condition_keyword=extract_condition_keyword(text),
        source=FragmentSource.OCR,
    )


class OCRTextExtractor(LoggerMixin):
    """Pulls card name, set, number, condition, rarity and HP out of OCR text."""

    def __init__(self, set_names: Iterable[str] = ()):
        # Catalog set names map to their catalog spelling; the fixed
        # vocabulary keeps whatever spelling the OCR text used
        vocabulary: Dict[str, Optional[str]] = {name.lower(): None for name in KNOWN_SET_NAMES}
        vocabulary.update({name.lower(): name for name in set_names})
        phrases = sorted(vocabulary, key=len, reverse=True)
        self._set_names = vocabulary
        self._set_pattern = re.compile(
            r"\b(" + "|".join(re.escape(p) for p in phrases) + r")\b", re.IGNORECASE
        )

    def extract(self, text: str) -> CardDetection:
        if not text or not text.strip():
            return CardDetection()

        keyword = extract_condition_keyword(text)
        detection = CardDetection(
            card_name=self.extract_card_name(text),
            set_name=self.extract_set_name(text),
            card_number=extract_card_number(text),
            condition=normalize_condition(keyword),
            rarity=self.extract_rarity(text),
            hp=self.extract_hp(text),
        )

        self.logger.debug(
            "OCR signals extracted",
            card_name=detection.card_name,
            set_name=detection.set_name,
            card_number=detection.card_number,
            condition=detection.condition.value if detection.condition else None,
        )
        return detection

    def extract_card_name(self, text: str) -> Optional[str]:
        """
        Prefer a suffixed name ("Charizard VMAX") built on a known card name,
        then a bare known name, then any suffixed name.
        """
        suffixed = [m.group(0) for m in SUFFIXED_NAME_PATTERN.finditer(text)]
        known = KNOWN_NAME_PATTERN.search(text)

        for name in suffixed:
            if KNOWN_NAME_PATTERN.search(name):
                return name
        if known:
            return known.group(1)
        return suffixed[0] if suffixed else None

    def extract_set_name(self, text: str) -> Optional[str]:
        match = self._set_pattern.search(text)
        if not match:
            return None
        return self._set_names.get(match.group(1).lower()) or match.group(1)

    def extract_rarity(self, text: str) -> Optional[str]:
        match = RARITY_PATTERN.search(text)
        return match.group(1).lower() if match else None

    def extract_hp(self, text: str) -> Optional[int]:
        match = HP_PATTERN.search(text)
        return int(match.group(1) or match.group(2)) if match else None


def annotations_from_vision_response(response: Dict[str, Any]) -> List[OCRAnnotation]:
    """
    Read the annotations out of one Vision ``responses[]`` item.

    Raises:
        OCRError: If the provider reported an error for the image
    """
    if response.get("error"):
        error = response["error"]
        raise OCRError(
            f"OCR provider error: {error.get('message', 'unknown error')}",
            details={"code": error.get("code")}
        )
    return [OCRAnnotation.from_vision(a) for a in response.get("textAnnotations") or []]

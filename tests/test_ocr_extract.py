"""
Tests for OCR annotation handling and card signal extraction.
"""

import pytest

from card_offers.core.types import CardDetection, Condition, FragmentSource
from card_offers.ocr.extract import (
    BoundingBox,
    OCRAnnotation,
    OCRTextExtractor,
    annotations_from_vision_response,
    fragment_from_annotations,
)
from card_offers.utils.error_handler import OCRError


class TestBoundingBox:
    """Test polygon to box conversion."""

    def test_from_vertices(self):
        box = BoundingBox.from_vertices([{"x": 50, "y": 30}, {"x": 250, "y": 30}, {"x": 250, "y": 70}, {"x": 50, "y": 70}])
        assert box == BoundingBox(x=50, y=30, width=200, height=40)

    def test_missing_coordinates_are_zero(self):
        box = BoundingBox.from_vertices([{}, {"x": 10}, {"x": 10, "y": 5}, {"y": 5}])
        assert box == BoundingBox(x=0, y=0, width=10, height=5)

    @pytest.mark.parametrize("vertices", [None, [], [{"x": 1, "y": 1}, {"x": 2, "y": 2}]])
    def test_too_few_vertices(self, vertices):
        assert BoundingBox.from_vertices(vertices) == BoundingBox()


class TestOCRAnnotation:
    """Test Vision record parsing."""

    def test_from_vision(self, sample_ocr_annotations):
        annotation = OCRAnnotation.from_vision(sample_ocr_annotations[0])

        assert annotation.text == "Charizard VMAX"
        assert annotation.confidence == 0.9
        assert annotation.bounding_box.width == 200

    def test_from_vision_without_polygon(self):
        annotation = OCRAnnotation.from_vision({"description": "Pikachu"})
        assert annotation.bounding_box == BoundingBox()

    def test_from_vision_requires_description(self):
        with pytest.raises(OCRError):
            OCRAnnotation.from_vision({"boundingPoly": {}})


class TestFragmentFromAnnotations:
    """Test joining one image's annotations into a fragment."""

    def test_joins_text_and_fills_hints(self, sample_ocr_annotations):
        annotations = [OCRAnnotation.from_vision(a) for a in sample_ocr_annotations]
        fragment = fragment_from_annotations(annotations)

        assert fragment.text == "Charizard VMAX Champion's Path 74/73 Near Mint"
        assert fragment.card_number == "74/73"
        assert fragment.condition_keyword == "near mint"
        assert fragment.source == FragmentSource.OCR

    def test_blank_annotations_skipped(self):
        fragment = fragment_from_annotations([OCRAnnotation(" "), OCRAnnotation("Pikachu "), OCRAnnotation("")])
        assert fragment.text == "Pikachu"

    def test_no_annotations_gives_blank_fragment(self):
        fragment = fragment_from_annotations([])
        assert fragment.is_blank
        assert fragment.card_number is None


class TestOCRTextExtractor:
    """Test card signal extraction from OCR text."""

    @pytest.fixture
    def extractor(self, catalog):
        return OCRTextExtractor(catalog.set_names)

    def test_extract_full_card(self, extractor):
        detection = extractor.extract("Charizard VMAX Champion's Path 74/73 Near Mint")

        assert detection.card_name == "Charizard VMAX"
        assert detection.set_name == "Champion's Path"
        assert detection.card_number == "74/73"
        assert detection.condition == Condition.NEAR_MINT
        assert detection.rarity is None
        assert detection.hp is None

    def test_extract_blank(self, extractor):
        assert extractor.extract("   ") == CardDetection()

    def test_hp_stat_not_read_as_condition(self, extractor):
        detection = extractor.extract("Charizard 120 HP Base Set")

        assert detection.hp == 120
        assert detection.condition is None

    def test_hp_label_before_value(self, extractor):
        detection = extractor.extract("Charizard VMAX HP 330 Champion's Path")

        assert detection.hp == 330
        assert detection.condition is None

    @pytest.mark.parametrize("text,expected", [
        ("Charizard VMAX 74/73", "Charizard VMAX"),
        ("Pikachu 60 HP", "Pikachu"),
        ("Lugia V 186/195", "Lugia V"),
        ("Pikachu and Lugia V", "Pikachu"),
        ("Trainer card text", None),
    ])
    def test_extract_card_name(self, extractor, text, expected):
        assert extractor.extract_card_name(text) == expected

    def test_catalog_set_uses_catalog_spelling(self, extractor):
        assert extractor.extract_set_name("charizard BASE SET 4/102") == "Base Set"
        assert extractor.extract_set_name("pikachu vivid voltage") == "Vivid Voltage"

    def test_fixed_vocabulary_keeps_ocr_spelling(self):
        extractor = OCRTextExtractor()
        assert extractor.extract_set_name("Pikachu VIVID Voltage") == "VIVID"
        assert extractor.extract_set_name("Charizard") is None

    def test_extract_rarity(self, extractor):
        assert extractor.extract_rarity("Charizard Secret Rare") == "secret rare"
        assert extractor.extract_rarity("Charizard") is None


class TestVisionResponse:
    """Test reading one Vision response item."""

    def test_annotations(self, sample_ocr_annotations):
        annotations = annotations_from_vision_response({"textAnnotations": sample_ocr_annotations})
        assert [a.text for a in annotations] == ["Charizard VMAX", "Champion's Path", "74/73", "Near Mint"]

    def test_no_text_found(self):
        assert annotations_from_vision_response({}) == []

    def test_provider_error(self):
        with pytest.raises(OCRError) as exc_info:
            annotations_from_vision_response({"error": {"code": 8, "message": "quota exceeded"}})

        assert "quota exceeded" in str(exc_info.value)
        assert exc_info.value.details["code"] == 8

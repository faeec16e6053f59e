"""Unit tests for OCR regex patterns."""

import pytest

from card_offers.ocr.regexes import (
    CARD_NUMBER_PATTERN,
    HP_PATTERN,
    RARITY_PATTERN,
    extract_card_number,
    extract_condition_keyword,
)


class TestCardNumber:
    """Test card number extraction."""

    @pytest.mark.parametrize("text,expected", [
        ("Charizard 4/102", "4/102"),
        ("Pikachu VMAX 044/185 Mint", "044/185"),
        ("Pikachu #58", "58"),
        ("#4", "4"),
        ("Charizard VMAX 74/73 and 12/34", "74/73"),
        ("Blastoise Base Set", None),
        ("", None),
    ])
    def test_extract_card_number(self, text, expected):
        assert extract_card_number(text) == expected

    def test_pattern_ignores_plain_digits(self):
        assert CARD_NUMBER_PATTERN.search("120 HP") is None


class TestConditionKeyword:
    """Test whole-word condition keyword extraction."""

    @pytest.mark.parametrize("text,expected", [
        ("Charizard VMAX Near Mint", "near mint"),
        ("NEAR MINT", "near mint"),
        ("Charizard Mint", "mint"),
        ("graded NM", "nm"),
        ("Lightly Played copy", "lightly played"),
        ("Blastoise LP", "lp"),
        ("Damaged corner", "damaged"),
        ("Alakazam HP", "hp"),
    ])
    def test_keywords(self, text, expected):
        assert extract_condition_keyword(text) == expected

    def test_keywords_inside_words_ignored(self):
        """"mp" inside "Champion's" and "Machamp" is not a keyword."""
        assert extract_condition_keyword("Champion's Path Machamp") is None

    def test_hp_stat_is_not_a_condition(self):
        assert extract_condition_keyword("Charizard 120 HP Fire") is None
        assert extract_condition_keyword("Charizard 120 HP Lightly Played") == "lightly played"
        assert extract_condition_keyword("Charizard VMAX HP 330") is None
        assert extract_condition_keyword("Charizard HP330 Fire") is None

    def test_no_keyword(self):
        assert extract_condition_keyword("Charizard Base Set") is None


class TestStatPatterns:
    """Test HP and rarity patterns."""

    def test_hp_pattern(self):
        assert HP_PATTERN.search("Charizard 120 HP").group(1) == "120"
        assert HP_PATTERN.search("Pikachu 60hp").group(1) == "60"
        assert HP_PATTERN.search("Charizard VMAX HP 330").group(2) == "330"
        assert HP_PATTERN.search("Pikachu") is None

    def test_rarity_prefers_longest(self):
        assert RARITY_PATTERN.search("Secret Rare foil").group(1) == "Secret Rare"
        assert RARITY_PATTERN.search("uncommon").group(1) == "uncommon"

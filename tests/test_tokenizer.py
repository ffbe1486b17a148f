"""Tests for the quantity/unit tokenizer and unit vocabulary."""

import pytest

from recipesniper.normalize import (
    UNIT_VOCABULARY,
    extract_unit,
    is_unit,
    normalize_unit,
    parse_ingredient,
    parse_quantity,
)


class TestParseQuantity:
    """Tests for parse_quantity function."""

    def test_parse_integer(self):
        """Test parsing a leading integer."""
        assert parse_quantity("2 eggs") == ("2", "eggs")
        assert parse_quantity("10 cherry tomatoes") == ("10", "cherry tomatoes")

    def test_parse_decimal(self):
        """Test parsing a leading decimal."""
        assert parse_quantity("0.5 kg potatoes") == ("0.5", "kg potatoes")

    def test_parse_fraction(self):
        """Test parsing a leading fraction."""
        assert parse_quantity("1/2 tsp salt") == ("1/2", "tsp salt")

    def test_parse_mixed_number(self):
        """Test that a mixed number wins over a plain integer."""
        assert parse_quantity("1 1/2 cups milk") == ("1 1/2", "cups milk")

    def test_quantity_without_space(self):
        """Test a unit glued to the quantity."""
        assert parse_quantity("500g flour") == ("500", "g flour")

    def test_input_is_trimmed(self):
        """Test surrounding whitespace is ignored."""
        assert parse_quantity("   3 apples  ") == ("3", "apples")

    def test_no_quantity(self):
        """Test text without a leading number."""
        assert parse_quantity("  Salt to taste ") == (None, "Salt to taste")

    def test_number_not_at_start(self):
        """Test that only a leading number counts."""
        assert parse_quantity("eggs, 2 large") == (None, "eggs, 2 large")

    def test_bare_quantity(self):
        """Test a quantity with nothing after it."""
        assert parse_quantity("4") == ("4", "")


class TestExtractUnit:
    """Tests for extract_unit function."""

    def test_known_unit(self):
        """Test a vocabulary unit followed by a name."""
        assert extract_unit("cups all-purpose flour") == ("cups", "all-purpose flour")

    def test_unit_is_lowercased(self):
        """Test unit tokens are matched and returned lowercase."""
        assert extract_unit("Tbsp olive oil") == ("tbsp", "olive oil")

    def test_unknown_first_token(self):
        """Test a non-unit first token stays part of the name."""
        assert extract_unit("large eggs") == (None, "large eggs")

    def test_unit_without_name(self):
        """Test a lone unit token is treated as the name."""
        assert extract_unit("cups") == (None, "cups")

    def test_empty_remainder(self):
        """Test an empty remainder."""
        assert extract_unit("") == (None, "")

    def test_custom_vocabulary(self):
        """Test a caller-supplied vocabulary."""
        assert extract_unit("handful spinach", frozenset({"handful"})) == ("handful", "spinach")
        assert extract_unit("cups flour", frozenset({"handful"})) == (None, "cups flour")


class TestParseIngredient:
    """Tests for parse_ingredient function."""

    def test_bread_lines(self, bread_ingredients):
        """Test the canonical quantity/unit/name tuples."""
        parsed = [parse_ingredient(line) for line in bread_ingredients]

        assert [(p.quantity, p.unit, p.name) for p in parsed] == [
            ("2", "cups", "all-purpose flour"),
            ("1", "cup", "sugar"),
            ("3", None, "large eggs"),
        ]

    @pytest.mark.parametrize("unit", ["cup", "tbsp", "g", "kg", "ml", "cloves", "pinch"])
    def test_vocabulary_units(self, unit):
        """Test '<q> <u> <rest>' yields q, u and rest."""
        parsed = parse_ingredient(f"2 {unit} something tasty")

        assert parsed.quantity == "2"
        assert parsed.unit == unit
        assert parsed.name == "something tasty"

    def test_no_quantity_means_no_unit(self):
        """Test a unit-looking first word without a quantity is part of the name."""
        parsed = parse_ingredient(" cup of tea ")

        assert parsed.quantity is None
        assert parsed.unit is None
        assert parsed.name == "cup of tea"

    def test_raw_text_preserved(self):
        """Test the original line is kept untouched."""
        parsed = parse_ingredient("  1 1/2 Cups milk ")

        assert parsed.raw_text == "  1 1/2 Cups milk "
        assert parsed.quantity == "1 1/2"
        assert parsed.unit == "cups"
        assert parsed.name == "milk"

    def test_bare_quantity_has_empty_name(self):
        """Test a bare number yields an empty name."""
        parsed = parse_ingredient("3")

        assert parsed.quantity == "3"
        assert parsed.unit is None
        assert parsed.name == ""


class TestUnitVocabulary:
    """Tests for the unit vocabulary helpers."""

    def test_vocabulary_contents(self):
        """Test volume, weight and count units are all present."""
        for unit in ("cup", "cups", "tbsp", "tsp", "g", "kg", "oz", "lbs", "clove", "cloves"):
            assert unit in UNIT_VOCABULARY
        assert "large" not in UNIT_VOCABULARY
        assert len(UNIT_VOCABULARY) == 49

    def test_is_unit(self):
        """Test unit detection ignores case and whitespace."""
        assert is_unit("Cups")
        assert is_unit(" ML ")
        assert not is_unit("large")
        assert not is_unit(None)

    def test_normalize_unit(self):
        """Test unit normalization."""
        assert normalize_unit(" TBSP ") == "tbsp"
        assert normalize_unit("  ") is None
        assert normalize_unit(None) is None

"""Tests for the ingredient tokenizer."""

import pytest

from recipe_normalizer.models import UNKNOWN_INGREDIENT, RecipeInputError
from recipe_normalizer.parsing.ingredients import parse_ingredient_block, parse_ingredient_line


class TestQuantityAndUnit:
    """Leading quantity and unit always come out as separate fields."""

    def test_plain_number_with_unit(self):
        ing = parse_ingredient_line("2 cups flour")
        assert ing.quantity == 2
        assert ing.unit == "cups"
        assert ing.name == "flour"
        assert ing.notes is None

    def test_range_stays_a_string(self):
        ing = parse_ingredient_line("1-2 lbs chicken")
        assert ing.quantity == "1-2"
        assert ing.unit == "lbs"
        assert ing.name == "chicken"

    def test_range_with_spaces(self):
        ing = parse_ingredient_line("2 - 3 cloves garlic")
        assert ing.quantity == "2-3"
        assert ing.unit == "cloves"
        assert ing.name == "garlic"

    def test_simple_fraction(self):
        ing = parse_ingredient_line("1/2 tsp. vanilla")
        assert ing.quantity == "1/2"
        assert ing.unit == "tsp"
        assert ing.name == "vanilla"

    def test_mixed_fraction(self):
        ing = parse_ingredient_line("1 1/2 cups sugar")
        assert ing.quantity == "1 1/2"
        assert ing.unit == "cups"
        assert ing.name == "sugar"

    def test_decimal(self):
        ing = parse_ingredient_line("1.5 kg potatoes")
        assert ing.quantity == 1.5
        assert ing.unit == "kg"
        assert ing.name == "potatoes"

    def test_unit_is_case_insensitive(self):
        ing = parse_ingredient_line("2 Tbsp. butter or margarine")
        assert ing.quantity == 2
        assert ing.unit == "tbsp"
        assert ing.name == "butter or margarine"

    def test_single_letter_t_resolves_to_tablespoon(self):
        # "T" sits ahead of "t" and matching ignores case
        ing = parse_ingredient_line("1 t salt")
        assert ing.unit == "T"
        assert ing.name == "salt"

    def test_abbreviation_period_is_consumed(self):
        ing = parse_ingredient_line("1 c. firmly packed brown sugar")
        assert ing.unit == "c"
        assert ing.name == "firmly packed brown sugar"

    def test_unit_prefix_inside_word_is_not_a_unit(self):
        # "g" must not match the start of "garlic", nor "l" of "large"
        assert parse_ingredient_line("1 garlic bulb").unit is None
        assert parse_ingredient_line("2 large eggs").unit is None
        assert parse_ingredient_line("2 large eggs").name == "large eggs"

    def test_container_unit(self):
        ing = parse_ingredient_line("1 can (14 oz) diced tomatoes")
        assert ing.quantity == 1
        assert ing.unit == "can"
        assert ing.name == "diced tomatoes"
        assert ing.notes == "14 oz"

    def test_number_never_left_in_name(self):
        for line in ["2 cups flour", "3 tbsp olive oil", "12 oz pasta", "4 slices bread"]:
            ing = parse_ingredient_line(line)
            assert not ing.name[0].isdigit()
            assert ing.unit is not None
            assert ing.unit not in ing.name.split()


class TestNotesAndName:
    """Tests for notes extraction and name fallback."""

    def test_parenthesized_notes_removed_from_name(self):
        ing = parse_ingredient_line("2 eggs (room temperature)")
        assert ing.quantity == 2
        assert ing.unit is None
        assert ing.name == "eggs"
        assert ing.notes == "room temperature"

    def test_only_first_parenthesized_group_is_notes(self):
        ing = parse_ingredient_line("1 cup milk (whole) (cold)")
        assert ing.notes == "whole"
        assert ing.name == "milk (cold)"

    def test_no_quantity(self):
        ing = parse_ingredient_line("salt and pepper to taste")
        assert ing.quantity is None
        assert ing.unit is None
        assert ing.name == "salt and pepper to taste"

    def test_empty_name_gets_placeholder(self):
        ing = parse_ingredient_line("2 (optional)")
        assert ing.quantity == 2
        assert ing.notes == "optional"
        assert ing.name == UNKNOWN_INGREDIENT

    def test_blank_line_gets_placeholder(self):
        assert parse_ingredient_line("   ").name == UNKNOWN_INGREDIENT

    def test_bullet_is_stripped(self):
        ing = parse_ingredient_line("- 2 cups flour")
        assert ing.quantity == 2
        assert ing.name == "flour"

    def test_non_string_rejected(self):
        with pytest.raises(RecipeInputError):
            parse_ingredient_line(None)
        with pytest.raises(TypeError):
            parse_ingredient_line(42)


class TestParseIngredientBlock:
    """Tests for bucket-level parsing."""

    def test_skips_blank_and_tiny_lines(self):
        parsed = parse_ingredient_block(["", "   ", "ab", "2 cups flour"])
        assert len(parsed) == 1
        assert parsed[0].name == "flour"

    def test_preserves_order(self):
        parsed = parse_ingredient_block(["1 cup rice", "2 cups water", "1 tsp salt"])
        assert [p.name for p in parsed] == ["rice", "water", "salt"]

    def test_deterministic(self):
        lines = ["1-2 lbs chicken (boneless)", "1 1/2 cups broth"]
        assert parse_ingredient_block(lines) == parse_ingredient_block(lines)

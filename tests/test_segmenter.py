"""Tests for the text segmenter."""

import pytest

from recipe_normalizer.models import RecipeInputError
from recipe_normalizer.parsing.segmenter import (
    INGREDIENTS,
    INSTRUCTIONS,
    classify_line,
    header_section,
    segment_text,
)


class TestHeaderSection:
    """Tests for header detection."""

    @pytest.mark.parametrize(
        "line",
        ["Ingredients:", "**Ingredients**", "## What you need", "You'll need:", "Materials", "- Items -"],
    )
    def test_ingredient_headers(self, line):
        assert header_section(line) == INGREDIENTS

    @pytest.mark.parametrize(
        "line",
        ["Instructions:", "**Directions:**", "### Method", "How to make it", "Preparation", "Procedure:"],
    )
    def test_instruction_headers(self, line):
        assert header_section(line) == INSTRUCTIONS

    def test_header_must_start_the_line(self):
        assert header_section("The ingredients are simple") is None
        assert header_section("Follow these directions") is None


class TestSegmentText:
    """Tests for bucket assignment."""

    def test_explicit_sections(self, reddit_comment):
        seg = segment_text(reddit_comment)
        assert not seg.used_fallback
        assert [ln for ln in seg.ingredients if ln.strip()] == [
            "- 2 cups flour",
            "- 1 1/2 cups sugar",
            "- 2 eggs (beaten)",
            "- 1 tsp. vanilla",
        ]
        assert seg.instructions[0] == "1. Preheat the oven to 350F."
        assert seg.instructions[-1] == "Done."
        assert seg.general[0].startswith("My grandmother")

    def test_header_lines_are_discarded(self, reddit_comment):
        seg = segment_text(reddit_comment)
        all_lines = seg.ingredients + seg.instructions + seg.general
        assert "**Ingredients:**" not in all_lines
        assert "**Directions:**" not in all_lines

    def test_fallback_when_no_headers(self, headerless_comment):
        seg = segment_text(headerless_comment)
        assert seg.used_fallback
        assert seg.ingredients == ("2 cups rice", "1 tbsp butter")
        assert seg.instructions == (
            "Boil the rice in salted water for 15 minutes.",
            "Stir in the butter and serve hot.",
        )

    def test_fallback_drops_unclassified_lines(self, headerless_comment):
        seg = segment_text(headerless_comment)
        assert "Enjoy!" not in seg.ingredients + seg.instructions

    def test_no_fallback_when_ingredient_header_present(self):
        # Non-measurement lines under a header must not trigger the heuristic pass.
        seg = segment_text("Ingredients:\nsalt\npepper")
        assert not seg.used_fallback
        assert seg.ingredients == ("salt", "pepper")
        assert seg.instructions == ()

    def test_section_switches_back_and_forth(self):
        text = "Ingredients\n1 cup rice\nDirections\nCook the rice well\nIngredients\n1 tsp salt"
        seg = segment_text(text)
        assert seg.ingredients == ("1 cup rice", "1 tsp salt")
        assert seg.instructions == ("Cook the rice well",)

    def test_non_string_rejected(self):
        with pytest.raises(RecipeInputError):
            segment_text(None)


class TestClassifyLine:
    def test_measurement_line(self):
        assert classify_line("3 oz dark chocolate") == INGREDIENTS
        assert classify_line("1/2 c. milk") == INGREDIENTS

    def test_verb_line(self):
        assert classify_line("Pour into the pan") == INSTRUCTIONS

    def test_other_line(self):
        assert classify_line("Thanks for reading") is None

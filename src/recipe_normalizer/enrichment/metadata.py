# src/recipe_normalizer/enrichment/metadata.py
from __future__ import annotations

"""
metadata.py

Purpose:
    Deterministic metadata inference over the full recipe text.

    Every field is a cascade (ordered rule table, first hit wins) optionally
    followed by a dish-cue fallback that only runs when no rule fired:
      * servings        explicit yields -> pan size / piece count / dish type
      * prep time       labelled durations -> technique complexity estimate
      * cook time       labelled durations
      * total time      labelled durations
      * difficulty      labels -> bare words -> intensifiers -> lexical cues,
                        then the technique override (see infer_difficulty)
      * cuisine/course  first keyword from a fixed vocabulary
      * meal type       meal keyword -> dish-type groups
      * dietary tags    every dietary keyword present

Design rules:
  - A field with no textual evidence stays None.
  - Text is lowercased here, so callers may pass it as-is.
"""

import re
from typing import Optional, Tuple

from recipe_normalizer.enrichment.rules import (
    CueRule,
    PatternRule,
    all_keywords,
    compile_rule,
    constant,
    contains_any,
    first_cue,
    first_keyword,
    first_match,
)
from recipe_normalizer.enrichment.vocabularies import (
    COMPLEX_TECHNIQUE_CUES,
    COURSE_KEYWORDS,
    CUISINE_KEYWORDS,
    DIETARY_KEYWORDS,
    DIFFICULTY_ALIASES,
    EASY_CUES,
    HARD_CUES,
    MEAL_KEYWORDS,
    MEAL_TYPE_DISH_CUES,
    PREP_TIME_COMPLEXITY_CUES,
)
from recipe_normalizer.logging_utils import get_logger
from recipe_normalizer.models import RecipeMetadata, Servings

logger = get_logger("metadata")


# ---------------------------------------------------------------------
# Servings
# ---------------------------------------------------------------------
_COUNT = r"(\d+(?:\s*-\s*\d+)?)"


def _servings_value(m: re.Match) -> Servings:
    raw = m.group(1)
    if "-" in raw:
        return re.sub(r"\s+", "", raw)
    return int(raw)


SERVINGS_RULES: Tuple[PatternRule[Servings], ...] = (
    compile_rule("labelled_yield", r"(?:serves?|servings?|yields?|makes?)[:\s]+" + _COUNT, _servings_value),
    compile_rule("servings_label", r"servings?[:\s]+" + _COUNT, _servings_value),
    compile_rule("makes_n_servings", r"makes?\s+(\d+)\s*(?:servings?|people|portions?)", _servings_value),
    compile_rule("for_n_people", r"(?:for|feeds?)\s+(\d+)\s*(?:people|servings?)", _servings_value),
    compile_rule("bare_n_servings", r"(\d+)\s*(?:servings?|people|portions?)", _servings_value),
)

_PIECE_COUNT = re.compile(r"(\d+)\s*(?:clusters?|cookies?|balls?|pieces?)", re.IGNORECASE)


def _piece_count(text: str) -> Optional[int]:
    m = _PIECE_COUNT.search(text)
    return int(m.group(1)) if m else None


SERVINGS_DISH_CUES: Tuple[CueRule[int], ...] = (
    CueRule("large_pan", ("9x13", "13x9"), constant(12)),
    CueRule("square_pan", ("8x8", "square pan"), constant(8)),
    CueRule("loaf", ("loaf pan", "bread"), constant(10)),
    CueRule("piece_count", ("clusters", "cookies", "balls"), _piece_count),
    CueRule("pizza_or_pie", ("pizza", "pie"), constant(8)),
    CueRule("soup_or_stew", ("soup", "stew"), constant(6)),
)


def infer_servings(text: str) -> Optional[Servings]:
    text_l = (text or "").lower()
    found = first_match(SERVINGS_RULES, text_l)
    if found is not None:
        return found
    return first_cue(SERVINGS_DISH_CUES, text_l)


# ---------------------------------------------------------------------
# Prep / cook / total time
# ---------------------------------------------------------------------
_DURATION = r"(\d+(?:\s*-\s*\d+)?\s*(?:minute|min|hour|hr)s?)"
# Total time only accepts a single number, never a range.
_SINGLE_DURATION = r"(\d+\s*(?:minute|min|hour|hr)s?)"

PREP_TIME_RULES: Tuple[PatternRule[str], ...] = (
    compile_rule("prep_label", r"prep(?:\s+time)?[:\s]+" + _DURATION),
    compile_rule("prep_time_label", r"prep\s+time[:\s]+" + _DURATION),
    compile_rule("preparation_label", r"preparation(?:\s+time)?[:\s]+" + _DURATION),
    compile_rule("takes_n_to_prep", r"(?:takes?\s+)?" + _DURATION + r"\s*(?:to\s+)?prep"),
)

PREP_TIME_CUES: Tuple[CueRule[str], ...] = tuple(
    CueRule(f"prep_estimate_{estimate}", keywords, constant(estimate))
    for keywords, estimate in PREP_TIME_COMPLEXITY_CUES
)

COOK_TIME_RULES: Tuple[PatternRule[str], ...] = (
    compile_rule("cook_label", r"cook(?:\s+time)?[:\s]+" + _DURATION),
    compile_rule("cook_time_label", r"cook\s+time[:\s]+" + _DURATION),
    compile_rule("cooking_or_bake_label", r"(?:cooking|bake)(?:\s+time)?[:\s]+" + _DURATION),
    compile_rule("bake_or_cook_for", r"(?:bake|cook)\s+for\s+" + _DURATION),
)

TOTAL_TIME_RULES: Tuple[PatternRule[str], ...] = (
    compile_rule("total_label", r"total(?:\s+time)?[:\s]+" + _SINGLE_DURATION),
    compile_rule("total_cooking_time_label", r"total\s+(?:cooking\s+)?time[:\s]+" + _SINGLE_DURATION),
    compile_rule("all_together", r"all\s+together[:\s]+" + _SINGLE_DURATION),
)


def infer_prep_time(text: str) -> Optional[str]:
    text_l = (text or "").lower()
    found = first_match(PREP_TIME_RULES, text_l)
    if found is not None:
        return found
    # No stated prep time: estimate from how involved the technique is.
    return first_cue(PREP_TIME_CUES, text_l)


def infer_cook_time(text: str) -> Optional[str]:
    return first_match(COOK_TIME_RULES, (text or "").lower())


def infer_total_time(text: str) -> Optional[str]:
    return first_match(TOTAL_TIME_RULES, (text or "").lower())


# ---------------------------------------------------------------------
# Difficulty
# ---------------------------------------------------------------------
_LEVEL = r"(easy|medium|hard|beginner|intermediate|advanced)"


def _difficulty_value(m: re.Match) -> str:
    word = m.group(1).lower()
    return DIFFICULTY_ALIASES.get(word, word)


DIFFICULTY_RULES: Tuple[PatternRule[str], ...] = (
    compile_rule("difficulty_label", r"difficulty[:\s]+" + _LEVEL, _difficulty_value),
    compile_rule("level_or_skill_label", r"(?:level|skill)[:\s]+" + _LEVEL, _difficulty_value),
    compile_rule("bare_word", r"\b" + _LEVEL + r"\b", _difficulty_value),
    compile_rule("intensified", r"(?:super|very|really)\s+(easy|hard)", _difficulty_value),
)

DIFFICULTY_CUES: Tuple[CueRule[str], ...] = (
    CueRule("easy_words", EASY_CUES, constant("easy")),
    CueRule("hard_words", HARD_CUES, constant("hard")),
)


def infer_difficulty(text: str) -> Optional[str]:
    """
    Infer easy / medium / hard.

    Special case: layering or technique cues (tiramisu, fold, temper, ...)
    force "medium" after the cascade, even over an explicit "difficulty: easy".
    Titles like "Easy Tiramisu" undersell the work involved, so the inferred
    signal deliberately wins over the stated label.
    """
    text_l = (text or "").lower()
    difficulty = first_match(DIFFICULTY_RULES, text_l)
    if difficulty is None:
        difficulty = first_cue(DIFFICULTY_CUES, text_l)

    if contains_any(text_l, COMPLEX_TECHNIQUE_CUES):
        if difficulty != "medium":
            logger.debug(
                "Difficulty %r overridden to 'medium' by technique cue",
                difficulty,
                extra={
                    "invoking_func": "infer_difficulty",
                    "invoking_purpose": "Classify recipe difficulty",
                    "next_step": "Return 'medium'",
                    "resolution": "",
                },
            )
        difficulty = "medium"
    return difficulty


# ---------------------------------------------------------------------
# Cuisine / course / meal type
# ---------------------------------------------------------------------
def infer_cuisine(text: str) -> Optional[str]:
    return first_keyword(CUISINE_KEYWORDS, (text or "").lower())


def infer_course(text: str) -> Optional[str]:
    return first_keyword(COURSE_KEYWORDS, (text or "").lower())


MEAL_TYPE_CUES: Tuple[CueRule[str], ...] = tuple(
    CueRule(f"dish_{meal_type}", keywords, constant(meal_type))
    for keywords, meal_type in MEAL_TYPE_DISH_CUES
)


def infer_meal_type(text: str) -> Optional[str]:
    text_l = (text or "").lower()
    meal_type = first_keyword(MEAL_KEYWORDS, text_l)
    if meal_type is not None:
        return meal_type
    return first_cue(MEAL_TYPE_CUES, text_l)


# ---------------------------------------------------------------------
# Dietary tags
# ---------------------------------------------------------------------
def infer_dietary_tags(text: str) -> Optional[Tuple[str, ...]]:
    """All dietary keywords present, in vocabulary order; None when empty."""
    tags = all_keywords(DIETARY_KEYWORDS, (text or "").lower())
    return tuple(tags) if tags else None


# ---------------------------------------------------------------------
# Entry point used by the assembler
# ---------------------------------------------------------------------
def infer_metadata(text: str) -> RecipeMetadata:
    text_l = (text or "").lower()
    metadata = RecipeMetadata(
        servings=infer_servings(text_l),
        prep_time=infer_prep_time(text_l),
        cook_time=infer_cook_time(text_l),
        total_time=infer_total_time(text_l),
        difficulty=infer_difficulty(text_l),
        cuisine=infer_cuisine(text_l),
        course=infer_course(text_l),
        meal_type=infer_meal_type(text_l),
        dietary_tags=infer_dietary_tags(text_l),
    )
    logger.debug(
        "Inferred metadata: %s",
        metadata,
        extra={
            "invoking_func": "infer_metadata",
            "invoking_purpose": "Derive RecipeMetadata from the full recipe text",
            "next_step": "Return metadata to the assembler",
            "resolution": "",
        },
    )
    return metadata

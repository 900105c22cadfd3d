# src/recipe_normalizer/parsing/ingredients.py
from __future__ import annotations

"""
ingredients.py

Purpose:
    Turn one free-text ingredient line into a ParsedIngredient.

Order of operations (each step removes what it matched):
  1. notes     first "(...)" group anywhere in the line
  2. quantity  range "1-2", then fraction "1/2" / "1 1/2", then decimal "2.5"
  3. unit      first UNIT_VOCABULARY token at the start of what is left
  4. name      the remainder, or UNKNOWN_INGREDIENT when nothing is left

Examples:
    "2 cups flour"              -> quantity=2.0,   unit="cups", name="flour"
    "1-2 lbs chicken"           -> quantity="1-2", unit="lbs",  name="chicken"
    "2 eggs (room temperature)" -> quantity=2.0,   name="eggs", notes="room temperature"
"""

import re
from typing import Iterable, List, Optional, Tuple

from recipe_normalizer.enrichment.vocabularies import UNIT_VOCABULARY
from recipe_normalizer.logging_utils import get_logger
from recipe_normalizer.models import (
    UNKNOWN_INGREDIENT,
    ParsedIngredient,
    Quantity,
    RecipeInputError,
)

logger = get_logger("ingredients")

_NOTES = re.compile(r"\(([^)]+)\)")
_BULLET = re.compile(r"^[*\-•◦→]+\s*")
_RANGE = re.compile(r"^(\d+\.?\d*)\s*-\s*(\d+\.?\d*)")
_FRACTION = re.compile(r"^(\d+/\d+|\d+\s+\d+/\d+)")
_DECIMAL = re.compile(r"^(\d+\.?\d*)")
# Plural "s" or abbreviation period left behind by a unit, plus spacing.
_UNIT_TAIL = re.compile(r"^[s.]?\s*")

# Pre-compiled once; same order as UNIT_VOCABULARY.
_UNIT_PATTERNS: Tuple[Tuple[str, re.Pattern], ...] = tuple(
    (unit, re.compile(r"^" + re.escape(unit) + r"\b", re.IGNORECASE))
    for unit in UNIT_VOCABULARY
)

# Bucket lines shorter than this are treated as noise.
MIN_LINE_LENGTH = 3


def _extract_notes(text: str) -> Tuple[Optional[str], str]:
    m = _NOTES.search(text)
    if not m:
        return None, text
    remaining = text[: m.start()] + text[m.end():]
    return m.group(1).strip(), remaining.strip()


def _extract_quantity(text: str) -> Tuple[Optional[Quantity], str]:
    m = _RANGE.match(text)
    if m:
        return f"{m.group(1)}-{m.group(2)}", text[m.end():].strip()

    m = _FRACTION.match(text)
    if m:
        return m.group(1), text[m.end():].strip()

    m = _DECIMAL.match(text)
    if m:
        return float(m.group(1)), text[m.end():].strip()

    return None, text


def _extract_unit(text: str) -> Tuple[Optional[str], str]:
    for unit, pattern in _UNIT_PATTERNS:
        if pattern.match(text):
            remaining = text[len(unit):]
            remaining = _UNIT_TAIL.sub("", remaining, count=1)
            return unit, remaining
    return None, text


def parse_ingredient_line(line: str) -> ParsedIngredient:
    """Tokenize a single ingredient line. Never raises for string input."""
    if not isinstance(line, str):
        raise RecipeInputError(f"ingredient line must be str, got {type(line).__name__}")

    text = _BULLET.sub("", line.strip(), count=1)
    notes, text = _extract_notes(text)
    quantity, text = _extract_quantity(text)
    unit, text = _extract_unit(text)

    name = re.sub(r"\s+", " ", text).strip()
    if not name:
        logger.debug(
            "No ingredient name left in %r; using placeholder",
            line,
            extra={
                "invoking_func": "parse_ingredient_line",
                "invoking_purpose": "Tokenize one ingredient line",
                "next_step": f"Substitute '{UNKNOWN_INGREDIENT}'",
                "resolution": "",
            },
        )
        name = UNKNOWN_INGREDIENT

    return ParsedIngredient(name=name, quantity=quantity, unit=unit, notes=notes or None)


def parse_ingredient_block(lines: Iterable[str]) -> List[ParsedIngredient]:
    """Tokenize every meaningful line of an ingredient bucket."""
    parsed: List[ParsedIngredient] = []
    for line in lines:
        trimmed = line.strip()
        if len(trimmed) < MIN_LINE_LENGTH:
            continue
        parsed.append(parse_ingredient_line(trimmed))
    return parsed

# src/recipe_normalizer/parsing/instructions.py
from __future__ import annotations

"""
instructions.py

Purpose:
    Clean instruction lines: drop noise and measurement lines, strip step
    numbering, bullet glyphs and markdown emphasis.
"""

import re
from typing import Iterable, List, Optional

from recipe_normalizer.enrichment.vocabularies import MEASUREMENT_UNITS
from recipe_normalizer.models import RecipeInputError

# Steps at or under this many characters (after cleaning) are dropped.
MIN_STEP_LENGTH = 10

_MEASUREMENT_LINE = re.compile(
    r"^\d+\.?\d*\s*(" + "|".join(MEASUREMENT_UNITS) + r")", re.IGNORECASE
)
_ORDINAL = re.compile(r"^(step\s+)?\d+[.):]?\s*", re.IGNORECASE)
_BULLET = re.compile(r"^[*\-•◦→]+\s*")
_BOLD = re.compile(r"\*\*(.*?)\*\*")
_ITALIC = re.compile(r"\*(.*?)\*")
_STRIKE = re.compile(r"~~(.*?)~~")
_EDGE_ASTERISKS = re.compile(r"^\*+|\*+$")


def clean_instruction_line(line: str) -> Optional[str]:
    """Return the cleaned step, or None when the line should be filtered."""
    if not isinstance(line, str):
        raise RecipeInputError(f"instruction line must be str, got {type(line).__name__}")

    trimmed = line.strip()
    if len(trimmed) < MIN_STEP_LENGTH:
        return None
    # Ingredient measurements that leaked into the instruction bucket.
    if _MEASUREMENT_LINE.match(trimmed):
        return None

    cleaned = _ORDINAL.sub("", trimmed, count=1)
    cleaned = _BULLET.sub("", cleaned, count=1)
    cleaned = _BOLD.sub(r"\1", cleaned)
    cleaned = _ITALIC.sub(r"\1", cleaned)
    cleaned = _STRIKE.sub(r"\1", cleaned)
    cleaned = _EDGE_ASTERISKS.sub("", cleaned)
    cleaned = cleaned.strip()

    if len(cleaned) > MIN_STEP_LENGTH:
        return cleaned
    return None


def clean_instruction_block(lines: Iterable[str]) -> List[str]:
    steps: List[str] = []
    for line in lines:
        cleaned = clean_instruction_line(line)
        if cleaned:
            steps.append(cleaned)
    return steps

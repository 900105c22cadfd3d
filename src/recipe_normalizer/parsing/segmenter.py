# src/recipe_normalizer/parsing/segmenter.py
from __future__ import annotations

"""
segmenter.py

Purpose:
    Split a free-form recipe comment into three line buckets:
    ingredients, instructions and general (everything before the first
    section header, e.g. the story above the recipe).

How it works:
  1. Header pass: walk the lines keeping a current section (starts as
     general). Header lines ("Ingredients:", "## Directions", ...) switch the
     section and are dropped; every other line lands in the current bucket.
  2. Fallback pass: only when the header pass produced neither ingredients
     nor instructions. Each line is classified on its own: measurement lines
     become ingredients, lines opening with a cooking verb become
     instructions, the rest is dropped.
"""

import re
from dataclasses import dataclass
from typing import List, Tuple

from recipe_normalizer.enrichment.vocabularies import COOKING_VERBS, MEASUREMENT_UNITS
from recipe_normalizer.logging_utils import get_logger
from recipe_normalizer.models import RecipeInputError

logger = get_logger("segmenter")

GENERAL = "general"
INGREDIENTS = "ingredients"
INSTRUCTIONS = "instructions"

# Markdown emphasis and punctuation removed before header matching.
_HEADER_NOISE = re.compile(r"[*#\-_:]")

_INGREDIENT_HEADER = re.compile(r"^(ingredient|what you need|you('ll)? need|materials|items)")
_INSTRUCTION_HEADER = re.compile(
    r"^(instruction|direction|step|method|how to|preparation|prep|procedure)"
)

_MEASUREMENT = re.compile(
    r"\d+\.?\d*\s*(" + "|".join(MEASUREMENT_UNITS) + r"|c\.|tsp\.|tbsp\.)", re.IGNORECASE
)
_COOKING_VERB = re.compile(r"^(" + "|".join(COOKING_VERBS) + r")", re.IGNORECASE)


@dataclass(frozen=True)
class SegmentedText:
    ingredients: Tuple[str, ...] = ()
    instructions: Tuple[str, ...] = ()
    general: Tuple[str, ...] = ()
    used_fallback: bool = False


def header_section(line: str) -> str | None:
    """Return the section a header line opens, or None for ordinary lines."""
    cleaned = _HEADER_NOISE.sub("", line.lower().strip()).strip()
    if _INGREDIENT_HEADER.match(cleaned):
        return INGREDIENTS
    if _INSTRUCTION_HEADER.match(cleaned):
        return INSTRUCTIONS
    return None


def classify_line(line: str) -> str | None:
    """Content heuristic used by the fallback pass."""
    trimmed = line.strip()
    if _MEASUREMENT.search(trimmed):
        return INGREDIENTS
    if _COOKING_VERB.match(trimmed):
        return INSTRUCTIONS
    return None


def segment_text(text: str) -> SegmentedText:
    if not isinstance(text, str):
        raise RecipeInputError(f"recipe text must be str, got {type(text).__name__}")

    lines = text.split("\n")
    buckets: dict[str, List[str]] = {GENERAL: [], INGREDIENTS: [], INSTRUCTIONS: []}
    current = GENERAL

    for line in lines:
        section = header_section(line)
        if section is not None:
            current = section
            continue
        buckets[current].append(line)

    used_fallback = False
    if not buckets[INGREDIENTS] and not buckets[INSTRUCTIONS]:
        used_fallback = True
        for line in lines:
            section = classify_line(line)
            if section is not None:
                buckets[section].append(line)

        logger.debug(
            "No section headers found; content heuristics gave %d ingredient / %d instruction lines",
            len(buckets[INGREDIENTS]),
            len(buckets[INSTRUCTIONS]),
            extra={
                "invoking_func": "segment_text",
                "invoking_purpose": "Split recipe text into line buckets",
                "next_step": "Return heuristic buckets to the assembler",
                "resolution": "",
            },
        )

    return SegmentedText(
        ingredients=tuple(buckets[INGREDIENTS]),
        instructions=tuple(buckets[INSTRUCTIONS]),
        general=tuple(buckets[GENERAL]),
        used_fallback=used_fallback,
    )

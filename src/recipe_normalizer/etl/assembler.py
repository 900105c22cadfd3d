from __future__ import annotations
"""
Recipe assembler: one engine for both source formats.

1. Comment variant (free text):
   a. segment the comment into ingredient / instruction / general buckets
   b. tokenize every ingredient-bucket line, clean every instruction-bucket line
   c. infer metadata over the *entire original* comment
   d. derive a description from the first substantial prose line
2. Arrays variant (pre-segmented ingredient + direction arrays):
   a. tokenize / clean each array item directly
   b. infer metadata over both arrays joined together
   c. description is always None

The engine is pure: no I/O, no shared state, so records can be assembled
from as many threads or processes as the caller likes.

Logging in loops:
a. Per-record logging is DEBUG.
b. assemble_batch logs INFO once every `progress_every` records.
"""

import re
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Union

from recipe_normalizer.config import get_settings
from recipe_normalizer.datasets.base import ArraySource, CommentSource
from recipe_normalizer.enrichment.metadata import infer_metadata
from recipe_normalizer.logging_utils import get_logger
from recipe_normalizer.models import RecipeData, RecipeInputError
from recipe_normalizer.parsing.ingredients import parse_ingredient_block, parse_ingredient_line
from recipe_normalizer.parsing.instructions import clean_instruction_block, clean_instruction_line
from recipe_normalizer.parsing.segmenter import SegmentedText, segment_text

logger = get_logger("assembler")

MODULE_PURPOSE = "Compose segmenter, tokenizer, cleaner and inferencer into RecipeData"


class SourceVariant(str, Enum):
    """Shape of the incoming record."""

    COMMENT = "comment"
    ARRAYS = "arrays"


# Words that mark a line as a section header rather than prose.
_DESCRIPTION_SKIP_WORDS = ("ingredients", "directions", "instructions", "method")
# Numbered steps ("1." / "1)") and markdown or unicode bullets.
_LIST_MARKER = re.compile(r"^(\d+[.)]|[*\-+•◦→])")
MIN_DESCRIPTION_LINE = 30
GENERAL_DESCRIPTION_LINES = 3


def _require_text(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise RecipeInputError(f"{field_name} must be str, got {type(value).__name__}")
    return value


def _require_lines(values: Any, field_name: str) -> List[str]:
    if isinstance(values, str) or not isinstance(values, (list, tuple)):
        raise RecipeInputError(f"{field_name} must be a list of str, got {type(values).__name__}")
    for v in values:
        _require_text(v, f"{field_name} item")
    return list(values)


def extract_description(
    comment: str,
    segmented: SegmentedText,
    max_chars: Optional[int] = None,
) -> Optional[str]:
    """
    First non-empty line longer than 30 chars that is not a header, a
    numbered step or a markdown bullet / bold line. Falls back to the first
    three general-bucket lines, truncated.
    """
    for line in (ln.strip() for ln in comment.split("\n")):
        if len(line) <= MIN_DESCRIPTION_LINE:
            continue
        lower = line.lower()
        if any(word in lower for word in _DESCRIPTION_SKIP_WORDS):
            continue
        if _LIST_MARKER.match(line):
            continue
        return line

    if max_chars is None:
        max_chars = get_settings().description_max_chars
    general = " ".join(segmented.general[:GENERAL_DESCRIPTION_LINES]).strip()
    return general[:max_chars] or None


def assemble_from_comment(comment: str, title: str) -> RecipeData:
    """Build a RecipeData from a free-text comment (e.g. Reddit)."""
    comment = _require_text(comment, "comment")
    title = _require_text(title, "title")

    segmented = segment_text(comment)
    ingredients = parse_ingredient_block(segmented.ingredients)
    instructions = clean_instruction_block(segmented.instructions)
    metadata = infer_metadata(comment)
    description = extract_description(comment, segmented)

    logger.debug(
        "Assembled comment recipe %r: %d ingredients, %d steps (fallback=%s)",
        title,
        len(ingredients),
        len(instructions),
        segmented.used_fallback,
        extra={
            "invoking_func": "assemble_from_comment",
            "invoking_purpose": MODULE_PURPOSE,
            "next_step": "Return RecipeData to caller",
            "resolution": "",
        },
    )
    return RecipeData(
        title=title,
        description=description,
        ingredients=tuple(ingredients),
        instructions=tuple(instructions),
        metadata=metadata,
    )


def assemble_from_arrays(
    ingredients: Sequence[str],
    directions: Sequence[str],
    title: str,
) -> RecipeData:
    """Build a RecipeData from pre-segmented ingredient / direction arrays."""
    ingredient_lines = _require_lines(ingredients, "ingredients")
    direction_lines = _require_lines(directions, "directions")
    title = _require_text(title, "title")

    parsed = [parse_ingredient_line(line) for line in ingredient_lines if line.strip()]
    steps = [s for s in (clean_instruction_line(d) for d in direction_lines) if s]
    metadata = infer_metadata(" ".join(ingredient_lines + direction_lines))

    logger.debug(
        "Assembled array recipe %r: %d ingredients, %d steps",
        title,
        len(parsed),
        len(steps),
        extra={
            "invoking_func": "assemble_from_arrays",
            "invoking_purpose": MODULE_PURPOSE,
            "next_step": "Return RecipeData to caller",
            "resolution": "",
        },
    )
    return RecipeData(
        title=title,
        description=None,
        ingredients=tuple(parsed),
        instructions=tuple(steps),
        metadata=metadata,
    )


def source_variant(source: Union[CommentSource, ArraySource]) -> SourceVariant:
    if isinstance(source, CommentSource):
        return SourceVariant.COMMENT
    if isinstance(source, ArraySource):
        return SourceVariant.ARRAYS
    raise RecipeInputError(f"Unsupported recipe source: {type(source).__name__}")


def assemble_recipe(source: Union[CommentSource, ArraySource]) -> RecipeData:
    """Dispatch on the source shape."""
    if source_variant(source) is SourceVariant.COMMENT:
        return assemble_from_comment(source.comment, source.title)
    return assemble_from_arrays(source.ingredients, source.directions, source.title)


def assemble_batch(
    sources: Iterable[Union[CommentSource, ArraySource]],
    progress_every: Optional[int] = None,
) -> Iterator[RecipeData]:
    """
    Assemble many records lazily, in input order.

    Input-validation errors propagate; nothing inside the engine itself fails
    a record.
    """
    if progress_every is None:
        progress_every = get_settings().progress_every

    count = 0
    for source in sources:
        yield assemble_recipe(source)
        count += 1
        if count % progress_every == 0:
            logger.info(
                "Assembled %d recipes so far",
                count,
                extra={
                    "invoking_func": "assemble_batch",
                    "invoking_purpose": "Run the engine over a stream of sources",
                    "next_step": "Continue with next source",
                    "resolution": "",
                },
            )

    logger.info(
        "Finished batch: %d recipes assembled",
        count,
        extra={
            "invoking_func": "assemble_batch",
            "invoking_purpose": "Run the engine over a stream of sources",
            "next_step": "Hand records to persistence",
            "resolution": "",
        },
    )


def build_stage_document(
    recipe: RecipeData,
    entry_number: Optional[int] = None,
    source_metadata: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Staged JSON document for the persistence layer:
        {"entryNumber": ..., "metadata": {...}, "recipeData": {...}}
    """
    return {
        "entryNumber": entry_number,
        "metadata": dict(source_metadata or {}),
        "recipeData": recipe.to_dict(),
    }

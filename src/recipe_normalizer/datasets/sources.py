# datasets/sources.py

"""
What this does:
1. Turns dataset rows (dicts or pandas rows) into CommentSource / ArraySource objects.
2. Handles different column names by using synonym sets (e.g. comment, body, text are all treated as "comment").
3. Decodes JSON-string array columns ("["2 cups flour", ...]"). A cell that is not a valid
   JSON array is wrapped as a single-element list instead of failing the whole row.

Reading the CSV itself is the caller's job; this module only adapts rows already in memory.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

import pandas as pd

from recipe_normalizer.datasets.base import ArraySource, CommentSource
from recipe_normalizer.logging_utils import get_logger

logger = get_logger("sources")

Source = Union[CommentSource, ArraySource]

COMMENT_VARIANT = "comment"
ARRAYS_VARIANT = "arrays"


def _normalize_col_name(col: str) -> str:
    """
    Normalize column names so we can match them across dataset exports.
    Examples:
      "Recipe Name" -> "recipe_name"
      "num-comments" -> "num_comments"
    """
    c = str(col).strip().lower()
    for ch in [" ", "-", ".", "(", ")", "[", "]"]:
        c = c.replace(ch, "_")
    while "__" in c:
        c = c.replace("__", "_")
    return c.strip("_")


# Canonical field synonym sets (normalized), checked in order
TITLE_COLS = ("title", "name", "recipe_name", "post_title")
COMMENT_COLS = ("comment", "body", "text", "comment_text")
INGREDIENTS_COLS = ("ingredients", "ingredient_list", "recipe_ingredients")
DIRECTIONS_COLS = ("directions", "instructions", "steps", "method")


def _find_key(norm_to_orig: Mapping[str, str], candidates) -> Optional[str]:
    """
    Given a mapping of normalized -> original keys, return the original
    name for the first candidate that exists.
    """
    for cand in candidates:
        if cand in norm_to_orig:
            return norm_to_orig[cand]
    return None


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # list-like cells make pd.isna return an array
        return False


def _text(value: Any) -> str:
    return "" if _is_missing(value) else str(value)


def coerce_json_array(value: Any, field_name: str = "value") -> List[str]:
    """
    Decode a JSON-string array cell into a list of strings.

    - list / tuple            -> items as strings
    - JSON string of a list   -> decoded items as strings
    - anything else non-empty -> [raw string]  (malformed JSON degrades, never raises)
    - None / NaN / ""         -> []
    """
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if not _is_missing(v)]
    if _is_missing(value):
        return []

    raw = str(value)
    if not raw.strip():
        return []

    try:
        decoded = json.loads(raw)
    except ValueError as exc:   # json.JSONDecodeError is a ValueError
        logger.warning(
            "Failed to parse %s array, using raw string: %s",
            field_name,
            exc,
            extra={
                "invoking_func": "coerce_json_array",
                "invoking_purpose": "Decode JSON-string array columns",
                "next_step": "Wrap raw string as a single-element list",
                "resolution": "Check the dataset export quoting for this column",
            },
        )
        return [raw]

    if not isinstance(decoded, list):
        logger.warning(
            "%s JSON is %s, not an array; using raw string",
            field_name,
            type(decoded).__name__,
            extra={
                "invoking_func": "coerce_json_array",
                "invoking_purpose": "Decode JSON-string array columns",
                "next_step": "Wrap raw string as a single-element list",
                "resolution": "",
            },
        )
        return [raw]

    return [str(v) for v in decoded if v is not None]


def _key_map(row: Mapping[str, Any]) -> Dict[str, str]:
    return {_normalize_col_name(k): k for k in row.keys()}


def _meta(row: Mapping[str, Any], used: set) -> Dict[str, Any]:
    """Every column not consumed by the parser travels along as metadata."""
    return {k: (None if _is_missing(v) else v) for k, v in row.items() if k not in used}


def comment_source_from_row(row: Mapping[str, Any], default_title: str = "Untitled Recipe") -> CommentSource:
    """Reddit-style row: title + free-text comment (+ user, date, num_comments, n_char)."""
    keys = _key_map(row)
    title_col = _find_key(keys, TITLE_COLS)
    comment_col = _find_key(keys, COMMENT_COLS)

    title = _text(row[title_col]).strip() if title_col else ""
    comment = _text(row[comment_col]) if comment_col else ""
    used = {c for c in (title_col, comment_col) if c}

    return CommentSource(title=title or default_title, comment=comment, meta=_meta(row, used))


def array_source_from_row(row: Mapping[str, Any], default_title: str = "Untitled Recipe") -> ArraySource:
    """Stromberg-style row: title + JSON-string ingredients/directions (+ link, source, NER)."""
    keys = _key_map(row)
    title_col = _find_key(keys, TITLE_COLS)
    ingredients_col = _find_key(keys, INGREDIENTS_COLS)
    directions_col = _find_key(keys, DIRECTIONS_COLS)

    title = _text(row[title_col]).strip() if title_col else ""
    ingredients = coerce_json_array(row[ingredients_col], "ingredients") if ingredients_col else []
    directions = coerce_json_array(row[directions_col], "directions") if directions_col else []
    used = {c for c in (title_col, ingredients_col, directions_col) if c}

    return ArraySource(
        title=title or default_title,
        ingredients=ingredients,
        directions=directions,
        meta=_meta(row, used),
    )


def sources_from_frame(df: pd.DataFrame, variant: str = COMMENT_VARIANT) -> Iterator[Source]:
    """
    Yield one source per DataFrame row.

    `variant` picks the row shape: "comment" (free text) or "arrays"
    (pre-segmented ingredient / direction arrays).
    """
    if variant == COMMENT_VARIANT:
        build = comment_source_from_row
    elif variant == ARRAYS_VARIANT:
        build = array_source_from_row
    else:
        raise ValueError(f"Unknown source variant: {variant!r}")

    for idx, row in df.iterrows():
        source = build(row.to_dict(), default_title=f"Recipe {idx}")
        source.meta.setdefault("row_index", idx)
        yield source

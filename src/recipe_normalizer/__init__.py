"""Local, rule-based recipe extraction and normalization engine."""

from .models import ParsedIngredient, RecipeData, RecipeInputError, RecipeMetadata
from .datasets.base import ArraySource, CommentSource
from .datasets.sources import coerce_json_array, sources_from_frame
from .enrichment.metadata import infer_metadata
from .parsing.ingredients import parse_ingredient_line
from .parsing.instructions import clean_instruction_line
from .parsing.segmenter import segment_text
from .etl.assembler import (
    SourceVariant,
    assemble_batch,
    assemble_from_arrays,
    assemble_from_comment,
    assemble_recipe,
    build_stage_document,
)

__all__ = [
    "ParsedIngredient",
    "RecipeData",
    "RecipeInputError",
    "RecipeMetadata",
    "ArraySource",
    "CommentSource",
    "coerce_json_array",
    "sources_from_frame",
    "infer_metadata",
    "parse_ingredient_line",
    "clean_instruction_line",
    "segment_text",
    "SourceVariant",
    "assemble_batch",
    "assemble_from_arrays",
    "assemble_from_comment",
    "assemble_recipe",
    "build_stage_document",
]

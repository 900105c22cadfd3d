# models.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

# A quantity is a plain number, or a fraction / range kept verbatim ("1 1/2", "1-2").
Quantity = Union[float, str]
Servings = Union[int, str]

UNKNOWN_INGREDIENT = "Unknown ingredient"

DIFFICULTY_LEVELS: Tuple[str, ...] = ("easy", "medium", "hard")


class RecipeInputError(TypeError):
    """Raised when a caller hands the engine a non-string where text is required."""


@dataclass(frozen=True)
class ParsedIngredient:
    name: str
    quantity: Optional[Quantity] = None
    unit: Optional[str] = None
    notes: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class RecipeMetadata:
    servings: Optional[Servings] = None
    prep_time: Optional[str] = None
    cook_time: Optional[str] = None
    total_time: Optional[str] = None
    difficulty: Optional[str] = None     # one of DIFFICULTY_LEVELS
    cuisine: Optional[str] = None
    course: Optional[str] = None
    meal_type: Optional[str] = None
    dietary_tags: Optional[Tuple[str, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "prepTime": self.prep_time,
            "cookTime": self.cook_time,
            "totalTime": self.total_time,
            "servings": self.servings,
            "difficulty": self.difficulty,
            "cuisine": self.cuisine,
            "course": self.course,
            "mealType": self.meal_type,
            "dietaryTags": list(self.dietary_tags) if self.dietary_tags else None,
        }


@dataclass(frozen=True)
class RecipeData:
    """
    Normalized recipe record produced by the assembler.

    Immutable once built; to_dict() gives the flat JSON document handed to
    the persistence layer.
    """

    title: str
    description: Optional[str]
    ingredients: Tuple[ParsedIngredient, ...] = ()
    instructions: Tuple[str, ...] = ()
    metadata: RecipeMetadata = field(default_factory=RecipeMetadata)

    # Shortcuts so callers can read metadata fields off the record directly.
    @property
    def servings(self) -> Optional[Servings]:
        return self.metadata.servings

    @property
    def prep_time(self) -> Optional[str]:
        return self.metadata.prep_time

    @property
    def cook_time(self) -> Optional[str]:
        return self.metadata.cook_time

    @property
    def total_time(self) -> Optional[str]:
        return self.metadata.total_time

    @property
    def difficulty(self) -> Optional[str]:
        return self.metadata.difficulty

    @property
    def cuisine(self) -> Optional[str]:
        return self.metadata.cuisine

    @property
    def course(self) -> Optional[str]:
        return self.metadata.course

    @property
    def meal_type(self) -> Optional[str]:
        return self.metadata.meal_type

    @property
    def dietary_tags(self) -> Optional[List[str]]:
        tags = self.metadata.dietary_tags
        return list(tags) if tags else None

    def to_dict(self) -> Dict[str, Any]:
        doc: Dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": list(self.instructions),
        }
        doc.update(self.metadata.to_dict())
        return doc

# src/recipe_normalizer/enrichment/vocabularies.py
from __future__ import annotations

"""
vocabularies.py

Purpose:
    Fixed, ordered keyword tables shared by the tokenizer, the segmenter and
    the metadata inferencer.

Design rules:
  - Tables are tuples built once at import time and never mutated.
  - Order matters: every lookup walks the table front to back and the first
    hit wins (dietary tags are the one field that collects every hit).
"""

from typing import Tuple


# ---------------------------------------------------------------------
# Measurement units, checked against the start of the remaining
# ingredient text. "cup" must come before "cups" etc. only because the
# word-boundary check rejects the singular inside the plural.
# Matching ignores case, so "T" (tablespoon) also catches a lowercase
# "t" and the teaspoon "t" below is never reached. Keep this order.
# ---------------------------------------------------------------------
UNIT_VOCABULARY: Tuple[str, ...] = (
    # volume
    "cup", "cups", "c", "c.",
    "tablespoon", "tablespoons", "tbsp", "tbsp.", "tbs", "tbs.", "T",
    "teaspoon", "teaspoons", "tsp", "tsp.", "t",
    # weight
    "pound", "pounds", "lb", "lbs", "lb.", "lbs.",
    "ounce", "ounces", "oz", "oz.",
    "gram", "grams", "g", "g.",
    "kilogram", "kilograms", "kg", "kg.",
    # metric / imperial volume
    "milliliter", "milliliters", "ml", "ml.",
    "liter", "liters", "l", "l.",
    "quart", "quarts", "qt", "qt.",
    "pint", "pints", "pt", "pt.",
    "gallon", "gallons", "gal", "gal.",
    # pinches and containers
    "pinch", "dash", "handful",
    "can", "cans", "jar", "jars", "package", "packages", "pkg", "box", "boxes",
    # count
    "clove", "cloves", "piece", "pieces", "slice", "slices",
    "stick", "sticks", "head", "heads", "bunch", "bunches",
)

# Short unit list used to spot measurement lines (segmenter fallback,
# instruction filter).
MEASUREMENT_UNITS: Tuple[str, ...] = ("cup", "tbsp", "tsp", "oz", "lb", "gram", "ml")

COOKING_VERBS: Tuple[str, ...] = (
    "mix", "stir", "add", "pour", "bake", "cook", "heat", "boil",
    "fry", "blend", "combine", "place", "put", "remove", "serve",
)


# ---------------------------------------------------------------------
# Cuisine / course / meal type
# ---------------------------------------------------------------------
CUISINE_KEYWORDS: Tuple[str, ...] = (
    "italian", "mexican", "chinese", "japanese", "thai", "indian", "french", "mediterranean",
    "american", "greek", "korean", "vietnamese", "spanish", "german", "british", "caribbean",
    "turkish", "moroccan", "lebanese", "ethiopian", "brazilian", "argentinian", "peruvian",
    "filipino", "indonesian", "malaysian", "singaporean", "australian", "canadian",
    "south african", "middle eastern", "persian", "african", "chilean", "scandinavian",
)

COURSE_KEYWORDS: Tuple[str, ...] = (
    "appetizer", "starter", "soup", "salad", "main dish", "main course", "side dish", "dessert",
    "beverage", "drink", "snack", "breakfast", "lunch", "dinner", "brunch", "sauce", "dip",
    "spread", "condiment", "marinade", "dressing", "topping", "garnish", "bread", "roll",
    "muffin", "cake", "cookie", "pie", "tart", "pastry", "candy", "ice cream", "pudding",
    "entree", "cocktail",
)

MEAL_KEYWORDS: Tuple[str, ...] = (
    "breakfast", "brunch", "lunch", "dinner", "supper", "snack", "appetizer",
    "dessert", "midnight snack", "late night", "morning", "afternoon", "evening",
    "main course", "starter", "afternoon tea",
)

# Dish-type groups used when no meal keyword is present. (keywords, meal type)
MEAL_TYPE_DISH_CUES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (
        (
            "cake", "cookie", "pie", "tiramisu", "ice cream", "pudding", "cheesecake",
            "mousse", "tart", "rolls", "muffin", "brownie", "donut", "cupcake",
        ),
        "dessert",
    ),
    (("soup", "stew", "broth"), "soup"),
    (("pancake", "waffle", "toast", "cereal", "oatmeal"), "breakfast"),
    (
        (
            "pizza", "burger", "sandwich", "pasta", "rice", "noodle",
            "chicken", "beef", "pork", "fish", "shrimp",
        ),
        "main",
    ),
    (("dip", "sauce", "spread", "cracker", "chip", "bite"), "snack"),
)


# ---------------------------------------------------------------------
# Diet
# ---------------------------------------------------------------------
DIETARY_KEYWORDS: Tuple[str, ...] = (
    "vegan", "vegetarian", "gluten-free", "dairy-free", "nut-free", "soy-free",
    "keto", "paleo", "low-carb", "high-protein", "raw", "organic", "halal", "kosher",
    "sugar-free", "low-sodium", "fat-free", "lactose-free", "egg-free", "shellfish-free",
    "low-fat", "whole30", "atkins", "south beach",
)


# ---------------------------------------------------------------------
# Difficulty / complexity cues
# ---------------------------------------------------------------------
DIFFICULTY_ALIASES = {
    "beginner": "easy",
    "intermediate": "medium",
    "advanced": "hard",
}

EASY_CUES: Tuple[str, ...] = ("simple", "quick", "basic")
HARD_CUES: Tuple[str, ...] = ("complex", "advanced", "challenging")

# Technique cues that force difficulty to "medium" whatever else was found.
COMPLEX_TECHNIQUE_CUES: Tuple[str, ...] = (
    "tiramisu", "layered", "multiple steps", "whip", "fold", "temper",
)

# Prep-time estimates when the text states none. (keywords, minutes range)
PREP_TIME_COMPLEXITY_CUES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("tiramisu", "layered", "multiple steps"), "60-90"),
    (("whisk", "whip", "fold"), "30-45"),
    (("chop", "dice", "slice"), "20-30"),
)

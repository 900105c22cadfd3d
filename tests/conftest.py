"""
Pytest configuration and fixtures for recipe normalizer tests.
"""

import pytest


@pytest.fixture
def reddit_comment():
    """Reddit-style comment with a story, explicit headers and metadata."""
    return "\n".join(
        [
            "My grandmother made these every Sunday and the whole street could smell them.",
            "Serves 12. Prep time: 15 minutes. Bake for 25 minutes.",
            "",
            "**Ingredients:**",
            "- 2 cups flour",
            "- 1 1/2 cups sugar",
            "- 2 eggs (beaten)",
            "- 1 tsp. vanilla",
            "",
            "**Directions:**",
            "1. Preheat the oven to 350F.",
            "2. **Mix** the flour and sugar in a large bowl.",
            "3) Add eggs and vanilla, then stir until smooth.",
            "Done.",
        ]
    )


@pytest.fixture
def headerless_comment():
    """Comment with no section headers at all."""
    return "\n".join(
        [
            "Quick one for you all",
            "2 cups rice",
            "1 tbsp butter",
            "Boil the rice in salted water for 15 minutes.",
            "Stir in the butter and serve hot.",
            "Enjoy!",
        ]
    )


@pytest.fixture
def stromberg_row():
    """Row in the pre-segmented dataset format (JSON-string arrays)."""
    return {
        "title": "No-Bake Nut Cookies",
        "ingredients": '["1 c. firmly packed brown sugar", "1/2 c. evaporated milk", '
        '"1/2 tsp. vanilla", "2 Tbsp. butter or margarine"]',
        "directions": '["In a heavy 2-quart saucepan, mix brown sugar, nuts, evaporated milk and butter.", '
        '"Stir over medium heat until mixture bubbles all over top.", '
        '"Boil and stir 5 minutes more. Take off heat."]',
        "link": "www.cookbooks.com/Recipe-Details.aspx?id=44874",
        "source": "Gathered",
    }

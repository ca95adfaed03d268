"""Pytest configuration and shared fixtures."""

import pytest

from recipescale.config import get_settings
from recipescale.schemas import IngredientAmount, Recipe


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate each test from the caller's environment and the settings cache."""
    for name in (
        "ENVIRONMENT",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "FRACTION_DENOMINATORS",
        "FRACTION_MAX_ERROR",
        "DECIMAL_PLACES",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Recipe Fixtures
# =============================================================================


@pytest.fixture
def pancake_recipe_json():
    """Recipe JSON in the shape emitted by the recipe generator."""
    return {
        "recipeName": "Buttermilk Pancakes",
        "description": "Fluffy weekend pancakes",
        "ingredients": [
            "2 cups flour",
            "1 1/2 cups buttermilk",
            "3/4 tsp baking soda",
            "2 eggs",
            "salt to taste",
        ],
        "instructions": [
            "Whisk the dry ingredients.",
            "Fold in the wet ingredients.",
            "Cook on a hot griddle.",
        ],
        "servings": "4 servings",
        "prepTime": "10 minutes",
        "cookTime": "15 minutes",
    }


@pytest.fixture
def pancake_recipe(pancake_recipe_json):
    """Parsed pancake recipe."""
    return Recipe.model_validate(pancake_recipe_json)


@pytest.fixture
def structured_recipe():
    """Recipe mixing text, structured and dict ingredients."""
    return Recipe(
        recipe_name="Garlic Butter",
        ingredients=[
            IngredientAmount(name="butter", amount=100, unit="g"),
            {"quantity": 2, "unit": "cloves", "label": "garlic"},
            "1/4 tsp salt",
        ],
        servings="2",
    )

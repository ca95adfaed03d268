"""Parse, scale and re-render recipe ingredient quantities."""

from recipescale.quantity import (
    DEFAULT_FORMAT,
    ParseResult,
    QuantityFormat,
    format_quantity,
    parse_quantity_string,
    scale_ingredient,
    scale_quantity_text,
)
from recipescale.recipes import scale_recipe, scale_recipe_to_servings, servings_multiplier
from recipescale.schemas import IngredientAmount, Recipe

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_FORMAT",
    "IngredientAmount",
    "ParseResult",
    "QuantityFormat",
    "Recipe",
    "format_quantity",
    "parse_quantity_string",
    "scale_ingredient",
    "scale_quantity_text",
    "scale_recipe",
    "scale_recipe_to_servings",
    "servings_multiplier",
]

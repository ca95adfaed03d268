"""Scaling whole recipes by a factor or to a target number of servings."""

import math

from recipescale.config import get_settings
from recipescale.logging_config import LoggingContext, get_logger
from recipescale.quantity.formatter import QuantityFormat, format_quantity
from recipescale.quantity.parser import parse_quantity_string
from recipescale.quantity.scaler import scale_ingredient
from recipescale.schemas import Recipe

logger = get_logger(__name__)


def _resolve_format(fmt: QuantityFormat | None) -> QuantityFormat:
    if fmt is not None:
        return fmt
    return QuantityFormat.from_settings(get_settings())


def _check_multiplier(multiplier: float) -> None:
    if not math.isfinite(multiplier) or multiplier <= 0:
        raise ValueError(f"Multiplier must be a positive finite number, got {multiplier}")


def servings_multiplier(current: str | float, target: float) -> float:
    """
    Compute the factor that takes a recipe from ``current`` to ``target`` servings.

    ``current`` may be the recipe's servings text ("4", "4 servings", "2 1/2").

    Raises:
        ValueError: If the target is not positive or the current servings
            cannot be parsed to a positive number.
    """
    if not math.isfinite(target) or target <= 0:
        raise ValueError(f"Target servings must be positive, got {target}")

    if isinstance(current, str):
        current_value = parse_quantity_string(current).value
        if current_value is None:
            raise ValueError(f"Cannot parse servings from {current!r}")
    else:
        current_value = float(current)

    if current_value <= 0:
        raise ValueError(f"Current servings must be positive, got {current_value}")

    return target / current_value


def scale_recipe(
    recipe: Recipe,
    multiplier: float,
    fmt: QuantityFormat | None = None,
) -> Recipe:
    """
    Return a copy of the recipe with every ingredient and the servings scaled.

    Ingredients without a recognisable quantity ("salt to taste") are kept
    verbatim. The input recipe is not modified.
    """
    _check_multiplier(multiplier)
    fmt = _resolve_format(fmt)

    with LoggingContext(recipe_id=recipe.recipe_name):
        ingredients = [scale_ingredient(ing, multiplier, fmt) for ing in recipe.ingredients]
        unchanged = sum(1 for old, new in zip(recipe.ingredients, ingredients) if old == new)
        if unchanged and multiplier != 1:
            logger.debug(f"{unchanged} ingredient(s) had no scalable quantity")

        servings = scale_ingredient(recipe.servings, multiplier, fmt)
        logger.info(
            f"Scaled recipe by {multiplier:g}: {len(ingredients)} ingredients, "
            f"servings {recipe.servings!r} -> {servings!r}"
        )

    return recipe.model_copy(update={"ingredients": ingredients, "servings": servings})


def scale_recipe_to_servings(
    recipe: Recipe,
    target_servings: float,
    fmt: QuantityFormat | None = None,
) -> Recipe:
    """
    Scale a recipe so that it serves ``target_servings``.

    The servings text keeps its wording with the count replaced by the
    target ("4 servings" -> "6 servings").

    Raises:
        ValueError: If the recipe has no parseable, positive servings count
            or the target is not positive.
    """
    if recipe.servings is None:
        raise ValueError(f"Recipe {recipe.recipe_name!r} has no servings to scale from")

    fmt = _resolve_format(fmt)
    multiplier = servings_multiplier(recipe.servings, target_servings)
    scaled = scale_recipe(recipe, multiplier, fmt)

    # Render the target directly so it is not subject to multiplication error
    raw = parse_quantity_string(recipe.servings).raw
    servings = recipe.servings.replace(raw, format_quantity(target_servings, fmt), 1)
    return scaled.model_copy(update={"servings": servings})

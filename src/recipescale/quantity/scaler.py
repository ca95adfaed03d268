"""Scaling of single ingredients by a multiplier."""

import numbers
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, TypeVar

from pydantic import BaseModel

from recipescale.logging_config import get_logger
from recipescale.quantity.formatter import DEFAULT_FORMAT, QuantityFormat, format_quantity
from recipescale.quantity.parser import parse_quantity_string

logger = get_logger(__name__)

# Numeric fields of a structured ingredient that carry its quantity
QUANTITY_FIELDS: tuple[str, ...] = ("amount", "quantity", "value")

IngredientT = TypeVar("IngredientT")


def _is_number(value: Any) -> bool:
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def _multiply(value: Any, multiplier: float) -> Any:
    # Decimal refuses to mix with float
    if isinstance(value, Decimal) and not isinstance(multiplier, Decimal):
        multiplier = Decimal(str(float(multiplier)))
    return value * multiplier


def scale_quantity_text(
    text: str,
    multiplier: float,
    fmt: QuantityFormat = DEFAULT_FORMAT,
) -> str:
    """
    Scale the quantity at the start of a string, keeping the rest verbatim.

    "2 1/2 cups flour" x 2 -> "5 cups flour". Text without a leading
    quantity is returned unchanged.
    """
    parsed = parse_quantity_string(text)
    if not parsed.found:
        logger.debug(f"No quantity found in {text!r}, leaving unchanged")
        return text

    scaled = format_quantity(parsed.value * multiplier, fmt)
    return text.replace(parsed.raw, scaled, 1)


def scale_fields(record: Mapping[str, Any], multiplier: float) -> dict[str, Any]:
    """Return a shallow copy with the numeric quantity fields multiplied."""
    copy = dict(record)
    for name in QUANTITY_FIELDS:
        if _is_number(copy.get(name)):
            copy[name] = _multiply(copy[name], multiplier)
    return copy


def _scale_model(model: BaseModel, multiplier: float) -> BaseModel:
    update = {
        name: _multiply(getattr(model, name), multiplier)
        for name in QUANTITY_FIELDS
        if _is_number(getattr(model, name, None))
    }
    return model.model_copy(update=update)


def scale_ingredient(
    ingredient: IngredientT,
    multiplier: float,
    fmt: QuantityFormat = DEFAULT_FORMAT,
) -> IngredientT:
    """
    Scale an ingredient by a multiplier, returning a value of the same shape.

    - None is returned as-is.
    - Strings have their leading quantity scaled and re-rendered.
    - Mappings and pydantic models are shallow-copied with their
      ``amount``, ``quantity`` and ``value`` fields multiplied when numeric.
    - Anything else is returned unchanged.

    The input is never mutated.
    """
    if ingredient is None:
        return ingredient
    if isinstance(ingredient, str):
        return scale_quantity_text(ingredient, multiplier, fmt)
    if isinstance(ingredient, Mapping):
        return scale_fields(ingredient, multiplier)
    if isinstance(ingredient, BaseModel):
        return _scale_model(ingredient, multiplier)
    return ingredient

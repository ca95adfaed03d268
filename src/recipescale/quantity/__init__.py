"""Parse, format and scale recipe quantities."""

from recipescale.quantity.formatter import (
    DEFAULT_FORMAT,
    QuantityFormat,
    format_quantity,
)
from recipescale.quantity.parser import ParseResult, parse_quantity_string
from recipescale.quantity.scaler import scale_ingredient, scale_quantity_text

__all__ = [
    "DEFAULT_FORMAT",
    "ParseResult",
    "QuantityFormat",
    "format_quantity",
    "parse_quantity_string",
    "scale_ingredient",
    "scale_quantity_text",
]

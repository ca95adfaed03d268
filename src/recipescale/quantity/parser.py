"""Parsing of leading quantities in recipe text."""

import re
from dataclasses import dataclass

# Patterns are tried in this order; the first one that yields a value wins.
# A quantity ends at a word boundary in the ASCII sense, while the gap in a
# mixed number may be any whitespace, including a no-break space.
_WORD_END = r"(?![0-9A-Za-z_])"
MIXED_NUMBER_RE = re.compile(r"^([0-9]+)\s+([0-9]+)/([0-9]+)" + _WORD_END)
FRACTION_RE = re.compile(r"^([0-9]+)/([0-9]+)" + _WORD_END)
DECIMAL_RE = re.compile(r"^([0-9]*\.?[0-9]+)" + _WORD_END)


@dataclass(frozen=True)
class ParseResult:
    """A quantity found at the start of a string.

    ``raw`` is the exact text that was consumed, so callers can substitute a
    new quantity into the original string without disturbing the unit text.
    Both fields are None when nothing was recognised.
    """

    value: float | None = None
    raw: str | None = None

    @property
    def found(self) -> bool:
        return self.value is not None


NO_QUANTITY = ParseResult()


def parse_quantity_string(text: str) -> ParseResult:
    """
    Parse the quantity at the start of a string.

    Handles formats like:
    - "1 1/2 cups" (mixed number)
    - "3/4 tsp" (fraction)
    - "2.5 kg", "10 eggs", ".5 cup" (decimal or integer)

    Numerals too long for a float parse as inf rather than raising.
    Ranges, negative numbers and unicode fractions are not recognised.
    Never raises; unparseable text yields ``ParseResult(None, None)``.
    """
    text = text.strip()

    mixed_match = MIXED_NUMBER_RE.match(text)
    if mixed_match:
        whole = float(mixed_match.group(1))
        num = float(mixed_match.group(2))
        denom = float(mixed_match.group(3))
        if denom != 0:
            return ParseResult(value=whole + num / denom, raw=mixed_match.group(0))

    frac_match = FRACTION_RE.match(text)
    if frac_match:
        num = float(frac_match.group(1))
        denom = float(frac_match.group(2))
        if denom != 0:
            return ParseResult(value=num / denom, raw=frac_match.group(0))

    num_match = DECIMAL_RE.match(text)
    if num_match:
        return ParseResult(value=float(num_match.group(1)), raw=num_match.group(0))

    return NO_QUANTITY

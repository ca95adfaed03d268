"""Rendering of numeric quantities as kitchen-friendly fractions."""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recipescale.config import Settings

# Policy constants. Changing either changes the rendered strings.
FRACTION_DENOMINATORS: tuple[int, ...] = (2, 3, 4, 8, 16)
FRACTION_MAX_ERROR = 0.035
DECIMAL_PLACES = 2


@dataclass(frozen=True)
class QuantityFormat:
    """Formatting policy: which fractions are "nice" and how close they must be."""

    denominators: tuple[int, ...] = FRACTION_DENOMINATORS
    max_error: float = FRACTION_MAX_ERROR
    decimal_places: int = DECIMAL_PLACES

    @classmethod
    def from_settings(cls, settings: "Settings") -> "QuantityFormat":
        return cls(
            denominators=tuple(settings.fraction_denominators),
            max_error=settings.fraction_max_error,
            decimal_places=settings.decimal_places,
        )


DEFAULT_FORMAT = QuantityFormat()


@dataclass(frozen=True)
class FractionCandidate:
    den: int
    num: int
    err: float


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm; gcd(x, 0) == x."""
    while b:
        a, b = b, a % b
    return a


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def best_fraction(frac: float, denominators: tuple[int, ...]) -> FractionCandidate:
    """
    Find the closest fraction to ``frac`` over the given denominators.

    Denominators are tried in the order given and a candidate only replaces the
    current best on a strictly smaller error, so ties go to the earlier one.
    """
    best = FractionCandidate(den=1, num=0, err=1.0)
    for den in denominators:
        num = _round_half_up(frac * den)
        err = abs(frac - num / den)
        if err < best.err:
            best = FractionCandidate(den=den, num=num, err=err)
    return best


def format_decimal(value: float, places: int = DECIMAL_PLACES) -> str:
    """Round to ``places`` decimals (half-up) and drop trailing zeros."""
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    text = f"{rounded:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_quantity(value: float, fmt: QuantityFormat = DEFAULT_FORMAT) -> str:
    """
    Format a number for display, preferring small fractions.

    Examples:
        1.5 -> "1 1/2"
        0.75 -> "3/4"
        2 -> "2"
        0.01 -> "0.01"
        1.99 -> "2"
        -0.001 -> "0"

    A remainder that rounds up to a whole unit is carried into the integer
    part, so 1.99 renders as "2" rather than the unreduced "1 1/1". A negative
    value that rounds to zero in the decimal fallback renders without a sign.
    """
    if not math.isfinite(value):
        return str(float(value))

    abs_value = abs(value)
    sign = "-" if value < 0 else ""

    if float(abs_value).is_integer():
        return sign + str(round(abs_value))

    whole = math.floor(abs_value)
    frac = abs_value - whole
    best = best_fraction(frac, fmt.denominators)

    if best.num == 0 or best.err > fmt.max_error:
        text = format_decimal(abs_value, fmt.decimal_places)
        # Zero is unsigned, as in the integer branch
        if Decimal(text) == 0:
            return text
        return sign + text

    # A remainder just under 1 rounds up to den/den; carry it into the whole part
    if best.num == best.den:
        return sign + str(whole + 1)

    g = gcd(best.num, best.den)
    num = best.num // g
    den = best.den // g

    if whole == 0:
        return f"{sign}{num}/{den}"
    return f"{sign}{whole} {num}/{den}"

"""Unit tests for quantity parsing."""

import math

import pytest

from recipescale.quantity.parser import ParseResult, parse_quantity_string


class TestParseQuantityString:
    """Tests for parse_quantity_string function."""

    def test_parse_integer(self):
        """Test parsing simple integers."""
        assert parse_quantity_string("2") == ParseResult(2.0, "2")
        assert parse_quantity_string("10 apples") == ParseResult(10.0, "10")

    def test_parse_decimal(self):
        """Test parsing decimal numbers."""
        assert parse_quantity_string("2.5 kg") == ParseResult(2.5, "2.5")
        assert parse_quantity_string("0.25") == ParseResult(0.25, "0.25")

    def test_parse_leading_decimal_point(self):
        """Test decimals without an integer part."""
        assert parse_quantity_string(".5 cup") == ParseResult(0.5, ".5")

    def test_parse_fraction(self):
        """Test parsing simple fractions."""
        assert parse_quantity_string("3/4 tsp") == ParseResult(0.75, "3/4")
        assert parse_quantity_string("1/2") == ParseResult(0.5, "1/2")

    def test_parse_mixed_fraction(self):
        """Test parsing mixed fractions like '1 1/2'."""
        assert parse_quantity_string("1 1/2 cups") == ParseResult(1.5, "1 1/2")
        assert parse_quantity_string("2 1/4") == ParseResult(2.25, "2 1/4")

    @pytest.mark.parametrize(
        "whole,num,den",
        [(1, 1, 2), (2, 3, 4), (3, 1, 3), (10, 7, 8), (0, 5, 16), (4, 9, 2)],
    )
    def test_mixed_number_value_and_raw(self, whole, num, den):
        """Mixed numbers yield whole + num/den and the exact prefix."""
        result = parse_quantity_string(f"{whole} {num}/{den} cups")
        assert result.value == pytest.approx(whole + num / den)
        assert result.raw == f"{whole} {num}/{den}"

    def test_multi_digit_fraction_is_not_split(self):
        """A longer fraction token is consumed whole."""
        assert parse_quantity_string("12/3 cups") == ParseResult(4.0, "12/3")

    def test_mixed_number_wins_over_integer(self):
        """The mixed number pattern takes precedence over a bare integer."""
        result = parse_quantity_string("1 1/2")
        assert result.raw == "1 1/2"

    def test_leading_whitespace_excluded_from_raw(self):
        """Leading whitespace is skipped and not part of raw."""
        text = "   1 1/2 cups"
        result = parse_quantity_string(text)
        assert result == ParseResult(1.5, "1 1/2")
        assert result.raw in text

    def test_zero_denominator_falls_through(self):
        """A zero denominator is not a match for the fraction patterns."""
        assert parse_quantity_string("1/0 cup") == ParseResult(1.0, "1")
        assert parse_quantity_string("2 1/0 cups") == ParseResult(2.0, "2")

    def test_no_quantity(self):
        """Text without a leading number yields an empty result."""
        assert parse_quantity_string("abc") == ParseResult(None, None)
        assert parse_quantity_string("salt to taste") == ParseResult(None, None)
        assert parse_quantity_string("") == ParseResult(None, None)
        assert parse_quantity_string("   ") == ParseResult(None, None)

    def test_quantity_not_at_start_is_ignored(self):
        """Only a leading quantity is recognised."""
        assert parse_quantity_string("flour, 2 cups").value is None

    def test_negative_numbers_not_recognised(self):
        """A minus sign is not part of a quantity."""
        assert parse_quantity_string("-2 cups") == ParseResult(None, None)

    def test_non_ascii_digits_not_recognised(self):
        """Only ASCII numerals count as quantities."""
        assert parse_quantity_string("٣ cups").value is None

    def test_value_and_raw_are_both_set_or_both_none(self):
        """value is None exactly when raw is None."""
        for text in ("2 cups", "1/2", "x", "", "1 1/2", ".75"):
            result = parse_quantity_string(text)
            assert (result.value is None) == (result.raw is None)
            assert result.found == (result.value is not None)

    @pytest.mark.parametrize(
        "text,raw",
        [
            ("1\u00a01/2 cups", "1\u00a01/2"),
            ("1\t1/2 cups", "1\t1/2"),
            ("1   1/2 cups", "1   1/2"),
        ],
    )
    def test_mixed_number_with_any_whitespace_gap(self, text, raw):
        """Tabs, runs of spaces and no-break spaces separate a mixed number."""
        assert parse_quantity_string(text) == ParseResult(1.5, raw)

    def test_no_break_space_before_unit(self):
        """Non-ASCII text after the quantity still ends it."""
        assert parse_quantity_string("3/4\u00a0tsp") == ParseResult(0.75, "3/4")
        assert parse_quantity_string("2\u00e9") == ParseResult(2.0, "2")


class TestParseQuantityStringNeverRaises:
    """Adversarial input yields a result instead of an exception."""

    def test_huge_fraction_numerator(self):
        """A numerator beyond float range parses as infinity."""
        text = "1" * 400 + "/3 cups"
        result = parse_quantity_string(text)
        assert result.value == math.inf
        assert result.raw == "1" * 400 + "/3"

    def test_numeral_beyond_int_string_limit(self):
        """Digit strings longer than the int conversion limit still parse."""
        result = parse_quantity_string("1" * 5000 + "/3 cups")
        assert result.value == math.inf

    def test_huge_mixed_number(self):
        """Huge whole parts in mixed numbers parse as infinity."""
        result = parse_quantity_string("9" * 5000 + " 1/2 cups")
        assert result.value == math.inf
        assert result.raw.endswith(" 1/2")

    def test_huge_denominator(self):
        """A denominator beyond float range gives zero, not an error."""
        assert parse_quantity_string("1/" + "9" * 400).value == 0.0

    @pytest.mark.parametrize(
        "text",
        [
            "1" * 400 + "/" + "1" * 400,
            "9" * 5000,
            "." + "0" * 5000 + "1",
            "0/0",
            "0 0/0",
            "/",
            "1 /2",
        ],
    )
    def test_adversarial_inputs(self, text):
        """Odd or oversized numerals never raise."""
        result = parse_quantity_string(text)
        assert (result.value is None) == (result.raw is None)

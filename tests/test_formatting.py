"""Tests for money and quantity formatting."""

import math
import re

import pytest

from billconf.formatting import (
    FormattingInvariantError,
    format_money,
    format_quantity,
    nice_float_str,
)


MONEY_SHAPE = re.compile(r"^-?[0-9,]+\.[0-9]{2}$")


class TestNiceFloatStr:
    """Tests for the two-decimal grouped money formatter."""
    
    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.0, "0.00"),
            (1234.5, "1,234.50"),
            (999.995, "1,000.00"),
            (-42.1, "-42.10"),
            (1234567.891, "1,234,567.89"),
            (1000000, "1,000,000.00"),
            (0.005, "0.01"),
            (2.675, "2.68"),
            (-1234.565, "-1,234.57"),
        ],
    )
    def test_known_values(self, value, expected):
        """Boundary and rounding cases."""
        assert nice_float_str(value) == expected
    
    def test_integer_boundaries_show_cents(self):
        """Whole numbers still get two decimals."""
        assert nice_float_str(7.0) == "7.00"
        assert nice_float_str(100) == "100.00"
    
    def test_many_fractional_digits_are_rounded(self):
        """Extra precision is rounded, not cut off."""
        assert nice_float_str(19.999) == "20.00"
        assert nice_float_str(3.14159265) == "3.14"
    
    def test_tiny_negative_is_not_negative_zero(self):
        """Values that round to zero have no sign."""
        assert nice_float_str(-0.004) == "0.00"
        assert nice_float_str(-0.0) == "0.00"
    
    @pytest.mark.parametrize(
        "value",
        [0.01, 0.1, 12.345, 99999.999, 123456789.123, 1e15, 1e30, -5e-7],
    )
    def test_output_shape(self, value):
        """Output always has grouped digits and two decimals."""
        assert MONEY_SHAPE.match(nice_float_str(value))
    
    def test_largest_float(self):
        """Even the largest finite float is formatted."""
        assert MONEY_SHAPE.match(nice_float_str(1.7976931348623157e308))
    
    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_values_fail_loudly(self, value):
        """Values with no two-decimal form raise instead of degrading."""
        with pytest.raises(FormattingInvariantError):
            nice_float_str(value)
    
    def test_invariant_error_is_an_assertion(self):
        """The invariant failure is unchecked, not a recoverable error."""
        with pytest.raises(AssertionError):
            nice_float_str(math.nan)


class TestFormatQuantity:
    """Tests for the plain quantity formatter."""
    
    def test_two_decimals_no_grouping(self):
        """Quantities are never grouped."""
        assert format_quantity(3) == "3.00"
        assert format_quantity(12345.678) == "12345.68"
    
    def test_negative(self):
        """Negative quantities keep their sign."""
        assert format_quantity(-1.5) == "-1.50"


class TestFormatMoney:
    """Tests for currency-prefixed amounts."""
    
    def test_prefixes_currency_code(self):
        """Currency code and amount are separated by a space."""
        assert format_money("USD", 1234.5) == "USD 1,234.50"
    
    def test_empty_currency(self):
        """An empty code still leaves the separating space."""
        assert format_money("", 1.0) == " 1.00"

"""Tests for display text parsing and number rendering."""

import math

import pytest

from memcalc.model.numbers import format_number, parse_leading_float


class TestParseLeadingFloat:
    """parse_leading_float reads a numeric prefix and defaults to zero."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("25", 25.0),
            ("-4", -4.0),
            ("  7.5", 7.5),
            (".5", 0.5),
            ("5.", 5.0),
            ("-.25", -0.25),
            ("3+4", 3.0),
            ("12abc", 12.0),
            ("1e3", 1000.0),
            ("2e", 2.0),
        ],
    )
    def test_numeric_prefix(self, text, expected):
        assert parse_leading_float(text) == expected

    @pytest.mark.parametrize("text", ["", "Error", "+", "-", ".", "(2)", "   "])
    def test_no_prefix_is_zero(self, text):
        assert parse_leading_float(text) == 0.0

    def test_negative_zero_is_plain_zero(self):
        value = parse_leading_float("-0")
        assert value == 0.0
        assert math.copysign(1.0, value) == 1.0


class TestFormatNumber:
    """format_number renders results the way the display shows them."""

    def test_integral_float_has_no_fraction(self):
        assert format_number(25.0) == "25"
        assert format_number(-3.0) == "-3"

    def test_fractions(self):
        assert format_number(0.5) == "0.5"
        assert format_number(-2.5) == "-2.5"
        assert format_number(0.1 + 0.2) == "0.30000000000000004"

    def test_small_values_stay_positional_down_to_one_millionth(self):
        assert format_number(1e-6) == "0.000001"

    def test_scientific_outside_positional_range(self):
        assert format_number(1e-7) == "1e-7"
        assert format_number(1e21) == "1e+21"
        assert format_number(1.5e-8) == "1.5e-8"

    def test_large_values_below_threshold_are_positional(self):
        assert format_number(1e20) == "100000000000000000000"

    def test_zero_and_negative_zero(self):
        assert format_number(0.0) == "0"
        assert format_number(-0.0) == "0"

    def test_non_finite(self):
        assert format_number(float("nan")) == "NaN"
        assert format_number(float("inf")) == "Infinity"
        assert format_number(float("-inf")) == "-Infinity"

    def test_accepts_int(self):
        assert format_number(42) == "42"

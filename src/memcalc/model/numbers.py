"""
Number Parsing & Rendering
==========================
Conversions between the display text and floats.

The display is free text: it may hold a partial expression ("3+4"), the
error marker, or nothing at all. Operations that need a single number read
the longest numeric prefix and fall back to zero, and every result is written
back in the shortest form that round-trips.
"""
from __future__ import annotations

import math
import re

import numpy as np

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent
_LEADING_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Positional rendering range; outside it numbers are shown in scientific form
POSITIONAL_MIN: float = 1e-6
POSITIONAL_MAX: float = 1e21


def parse_leading_float(text: str) -> float:
    """
    Parse the numeric prefix of `text`, treating anything unusable as zero.

    Leading whitespace is skipped and parsing stops at the first character
    that cannot continue a decimal literal, so "3+4" reads as 3.0 and
    "12abc" as 12.0.

    Args:
        text: Current display text.

    Returns:
        The parsed value, or 0.0 when there is no numeric prefix or the
        prefix evaluates to zero or NaN.
    """
    match = _LEADING_FLOAT.match(text.lstrip())
    if match is None:
        return 0.0

    value = float(match.group(0))
    if value == 0.0 or math.isnan(value):
        return 0.0
    return value


def format_number(value: float) -> str:
    """
    Render a number the way the display shows results.

    Examples:
        >>> format_number(25.0)
        '25'
        >>> format_number(0.5)
        '0.5'
        >>> format_number(1e21)
        '1e+21'
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0.0:
        # also folds -0.0
        return "0"

    if POSITIONAL_MIN <= abs(value) < POSITIONAL_MAX:
        return np.format_float_positional(value, trim="-")
    return np.format_float_scientific(value, trim="-", exp_digits=1)

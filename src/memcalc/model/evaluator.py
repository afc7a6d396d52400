"""
Expression Evaluation
=====================
The calculator never parses arithmetic itself. It hands the display text to
an evaluator and only looks at the float that comes back.

Classes:
    ExpressionEvaluator: The interface the controller depends on.
    EvaluationError: Raised for any expression that cannot be computed.
    NumexprEvaluator: Default implementation backed by numexpr.
"""
from __future__ import annotations

import logging
import re
from typing import Protocol

import numexpr as ne
import numpy as np

logger = logging.getLogger(__name__)

# Digits, the four operators, parentheses, decimal point and whitespace
_CALCULATOR_ALPHABET = re.compile(r"^[0-9+\-*/().\s]+$")

# Integer literal: a digit run not touching a decimal point or another digit
_INTEGER_LITERAL = re.compile(r"(?<![\d.])(\d+)(?![\d.])")


class EvaluationError(ValueError):
    """The expression is malformed or cannot be evaluated."""

    def __init__(self, expression: str, reason: str) -> None:
        super().__init__(f"Cannot evaluate {expression!r}: {reason}")
        self.expression = expression
        self.reason = reason


class ExpressionEvaluator(Protocol):
    """Anything that turns an arithmetic string into a number."""

    def evaluate(self, expression: str) -> float:
        """Return the numeric value of `expression` or raise on invalid input."""
        ...


class NumexprEvaluator:
    """
    Evaluates calculator expressions with numexpr.

    Only the calculator alphabet is accepted, so names, attribute access and
    function calls never reach numexpr. Division is always true division and
    division by zero produces inf/nan rather than an exception; callers decide
    what a non-finite result means. All literals are evaluated as doubles.
    """

    def evaluate(self, expression: str) -> float:
        text = expression.strip()
        if not text:
            raise EvaluationError(expression, "empty expression")
        if not _CALCULATOR_ALPHABET.match(text):
            raise EvaluationError(expression, "unsupported characters")

        # Integer constants would be folded into C longs and overflow past 2**63
        text = _INTEGER_LITERAL.sub(r"\1.0", text)

        try:
            with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
                result = ne.evaluate(text, local_dict={}, global_dict={}, truediv=True)
            value = float(result)
        except Exception as exc:
            # numexpr surfaces SyntaxError, TypeError, KeyError, ... depending on the input
            raise EvaluationError(expression, f"{type(exc).__name__}: {exc}") from exc

        logger.debug("Evaluated %r -> %r", expression, value)
        return value

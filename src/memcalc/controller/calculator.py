"""
Calculator Controller
=====================
Applies button and keyboard commands to the calculator state and announces
the result through Qt signals.

Why is this file needed?
------------------------
1. Ownership: It is the only place that writes the display text or the memory
   register.
2. Rendering: Views connect to `display_changed` / `memory_changed` and never
   poll the state.
3. Error policy: Every failure ends in a display state; nothing is raised to
   the event loop.
"""
from __future__ import annotations

import logging
import math
from typing import Optional

from PySide6.QtCore import QObject, Signal

from memcalc.config import ERROR_TEXT
from memcalc.model.evaluator import ExpressionEvaluator, NumexprEvaluator
from memcalc.model.numbers import format_number, parse_leading_float
from memcalc.model.state import CalculatorState, MemoryIndicator

logger = logging.getLogger(__name__)


class CalculatorController(QObject):
    """Owns a CalculatorState and exposes one method per calculator command."""
    display_changed = Signal(str)
    memory_changed = Signal(object)

    def __init__(
        self,
        evaluator: Optional[ExpressionEvaluator] = None,
        state: Optional[CalculatorState] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.evaluator: ExpressionEvaluator = evaluator if evaluator is not None else NumexprEvaluator()
        self.state: CalculatorState = state if state is not None else CalculatorState()

    # --- PROPERTIES ---

    @property
    def display(self) -> str:
        return self.state.display

    @property
    def memory(self) -> float:
        return self.state.memory

    @property
    def memory_indicator(self) -> MemoryIndicator:
        return MemoryIndicator.from_memory(self.state.memory)

    def refresh(self) -> None:
        """Re-emit both surfaces, e.g. right after a view has connected."""
        self.display_changed.emit(self.state.display)
        self.memory_changed.emit(self.memory_indicator)

    # --- DISPLAY EDITING ---

    def append_to_display(self, token: str) -> None:
        self._set_display(self.state.display + token)

    def clear_display(self) -> None:
        self._set_display("")

    def delete_last_char(self) -> None:
        self._set_display(self.state.display[:-1])

    # --- CALCULATION ---

    def evaluate(self) -> None:
        """
        Replace the display with the value of the expression it holds.

        Any failure of the evaluator, and any result that is not a finite
        number, leaves ERROR_TEXT on the display.
        """
        expression = self.state.display
        try:
            result = float(self.evaluator.evaluate(expression))
        except Exception as exc:
            logger.info("Evaluation of %r failed: %s", expression, exc)
            self._set_display(ERROR_TEXT)
            return

        if not math.isfinite(result):
            logger.info("Evaluation of %r gave non-finite result %r", expression, result)
            self._set_display(ERROR_TEXT)
            return

        self._set_display(format_number(result))

    def square_root(self) -> None:
        value = parse_leading_float(self.state.display)
        if value < 0:
            logger.info("Square root of negative value %r", value)
            self._set_display(ERROR_TEXT)
            return
        self._set_display(format_number(math.sqrt(value)))

    def percentage(self) -> None:
        # An unparsable display silently becomes 0 here, unlike evaluate()
        value = parse_leading_float(self.state.display)
        self._set_display(format_number(value / 100))

    def square(self) -> None:
        # Multiplication overflows to inf where float ** 2 would raise
        value = parse_leading_float(self.state.display)
        self._set_display(format_number(value * value))

    # --- MEMORY ---

    def memory_clear(self) -> None:
        self.state.memory = 0.0
        self.memory_changed.emit(self.memory_indicator)

    def memory_recall(self) -> None:
        self._set_display(format_number(self.state.memory))

    def memory_add(self) -> None:
        self._accumulate(parse_leading_float(self.state.display))

    def memory_subtract(self) -> None:
        self._accumulate(-parse_leading_float(self.state.display))

    # --- HELPERS ---

    def _set_display(self, text: str) -> None:
        self.state.display = text
        logger.debug("Display: %r", text)
        self.display_changed.emit(text)

    def _accumulate(self, delta: float) -> None:
        """Add `delta` to memory. A non-finite outcome is dropped without notice."""
        updated = self.state.memory + delta
        if not math.isfinite(updated):
            logger.debug("Memory update by %r dropped (result %r)", delta, updated)
            return
        self.state.memory = updated
        logger.debug("Memory: %r", updated)
        self.memory_changed.emit(self.memory_indicator)

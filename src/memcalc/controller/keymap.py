"""
Keyboard Bindings
=================
Declarative table from key names to controller commands.

Key names are the characters typed ("7", "+", "s") plus the names of the
non-printing keys the calculator reacts to ("Enter", "Backspace", "Escape").
The view translates Qt key events into these names, so the table can be used
and tested without a running QApplication.
"""
from __future__ import annotations

from operator import methodcaller
from typing import Callable, Optional

from memcalc.controller.calculator import CalculatorController

KeyHandler = Callable[[CalculatorController], None]

# Characters that are appended to the display as typed
APPEND_SYMBOLS = "0123456789+-*/()."

KEY_BINDINGS: dict[str, KeyHandler] = {
    **{symbol: methodcaller("append_to_display", symbol) for symbol in APPEND_SYMBOLS},
    "Enter": CalculatorController.evaluate,
    "Backspace": CalculatorController.delete_last_char,
    "Escape": CalculatorController.clear_display,
    "s": CalculatorController.square_root,
    "S": CalculatorController.square_root,
    "%": CalculatorController.percentage,
}


def bind_key(key: str) -> Optional[KeyHandler]:
    """Return the command bound to `key`, or None if the calculator ignores it."""
    return KEY_BINDINGS.get(key)


def dispatch_key(controller: CalculatorController, key: str) -> bool:
    """
    Run the command bound to `key` on `controller`.

    Returns:
        True if the key was handled, False if it is not bound.
    """
    handler = bind_key(key)
    if handler is None:
        return False
    handler(controller)
    return True

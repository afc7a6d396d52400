"""
Keypad
======
The button grid. Every button runs exactly one controller command.
"""
from __future__ import annotations

from operator import methodcaller
from typing import Callable, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from memcalc.controller.calculator import CalculatorController


def _append(symbol: str) -> Callable[[CalculatorController], None]:
    return methodcaller("append_to_display", symbol)


# Rows of (label, command). Labels are unique and double as button keys.
BUTTON_LAYOUT: list[list[tuple[str, Callable[[CalculatorController], None]]]] = [
    [
        ("MC", CalculatorController.memory_clear),
        ("MR", CalculatorController.memory_recall),
        ("M+", CalculatorController.memory_add),
        ("M-", CalculatorController.memory_subtract),
    ],
    [
        ("C", CalculatorController.clear_display),
        ("⌫", CalculatorController.delete_last_char),
        ("%", CalculatorController.percentage),
        ("/", _append("/")),
    ],
    [
        ("√", CalculatorController.square_root),
        ("x²", CalculatorController.square),
        ("(", _append("(")),
        (")", _append(")")),
    ],
    [("7", _append("7")), ("8", _append("8")), ("9", _append("9")), ("*", _append("*"))],
    [("4", _append("4")), ("5", _append("5")), ("6", _append("6")), ("-", _append("-"))],
    [("1", _append("1")), ("2", _append("2")), ("3", _append("3")), ("+", _append("+"))],
    [
        ("0", _append("0")),
        (".", _append(".")),
        ("=", CalculatorController.evaluate),
    ],
]


class Keypad(QWidget):
    """Grid of calculator buttons wired to a controller."""

    def __init__(self, controller: CalculatorController, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.buttons: dict[str, QPushButton] = {}

        grid = QGridLayout(self)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.setSpacing(4)

        for row, entries in enumerate(BUTTON_LAYOUT):
            for col, (label, command) in enumerate(entries):
                btn = QPushButton(label, self)
                btn.setMinimumHeight(40)
                btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
                # Keys are handled by the window; a focused button would swallow Enter
                btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
                btn.clicked.connect(lambda _=False, c=command: c(self.controller))

                # "=" fills the rest of the last row
                span = 2 if label == "=" else 1
                grid.addWidget(btn, row, col, 1, span)
                self.buttons[label] = btn

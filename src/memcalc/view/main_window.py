"""
Main Application Window
=======================
The calculator window: display field, memory indicator and keypad.

Why is this file needed?
------------------------
1. Layout: It stacks the display, the memory indicator and the keypad.
2. Routing: It connects controller signals to the widgets and forwards key
   presses to the key bindings.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont, QKeyEvent
from PySide6.QtWidgets import QLineEdit, QMainWindow, QVBoxLayout, QWidget

from memcalc.config import VISIBLE_APP_NAME, WINDOW_HEIGHT, WINDOW_WIDTH
from memcalc.controller.calculator import CalculatorController
from memcalc.controller.keymap import dispatch_key
from memcalc.model.state import MemoryIndicator
from memcalc.view.widgets.keypad import Keypad
from memcalc.view.widgets.memory_indicator import MemoryIndicatorLabel

logger = logging.getLogger(__name__)

# Non-printing keys the key bindings know by name
_NAMED_KEYS: dict[int, str] = {
    Qt.Key.Key_Return.value: "Enter",
    Qt.Key.Key_Enter.value: "Enter",
    Qt.Key.Key_Backspace.value: "Backspace",
    Qt.Key.Key_Escape.value: "Escape",
}


def key_name(key: int, text: str) -> str:
    """Translate a Qt key code and its typed text to a key-binding name."""
    return _NAMED_KEYS.get(key, text)


class MainWindow(QMainWindow):
    def __init__(self, controller: CalculatorController) -> None:
        super().__init__()
        self.controller = controller

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)

        # --- Display ---
        self.display = QLineEdit(central)
        self.display.setReadOnly(True)
        self.display.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.display.setMinimumHeight(48)
        font = QFont(self.display.font())
        font.setPointSize(font.pointSize() + 8)
        self.display.setFont(font)
        self.display.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        layout.addWidget(self.display)

        # --- Memory Indicator ---
        self.memory_indicator = MemoryIndicatorLabel(central)
        layout.addWidget(self.memory_indicator)

        # --- Keypad ---
        self.keypad = Keypad(controller, central)
        layout.addWidget(self.keypad, 1)

        self.setCentralWidget(central)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        # --- SIGNAL CONNECTIONS ---
        self.controller.display_changed.connect(self.on_display_changed)
        self.controller.memory_changed.connect(self.on_memory_changed)

        # Initial render
        self.controller.refresh()

    # --- SLOTS ---

    def on_display_changed(self, text: str) -> None:
        self.display.setText(text)

    def on_memory_changed(self, indicator: MemoryIndicator) -> None:
        self.memory_indicator.set_indicator(indicator)

    # --- EVENTS ---

    def keyPressEvent(self, event: QKeyEvent) -> None:
        name = key_name(event.key(), event.text())
        if name and dispatch_key(self.controller, name):
            # Enter must not trigger any default button
            event.accept()
            return
        super().keyPressEvent(event)

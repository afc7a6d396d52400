"""
Memory Indicator
"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QGraphicsOpacityEffect, QLabel, QWidget

from memcalc.model.state import MemoryIndicator


class MemoryIndicatorLabel(QLabel):
    """Shows "M: <value>", dimmed while the memory register is zero."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)

        self._opacity = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self._opacity)

        self._active = False
        self.set_indicator(MemoryIndicator.from_memory(0.0))

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def opacity(self) -> float:
        return self._opacity.opacity()

    def set_indicator(self, indicator: MemoryIndicator) -> None:
        self._active = indicator.active
        self.setText(indicator.label)
        self._opacity.setOpacity(indicator.opacity)

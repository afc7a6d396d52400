"""
Calculator State (Data Model)
=============================
This module defines the two pieces of state the calculator works on.

Why is this file needed?
------------------------
1. State Management: The display text and the memory register live in one
   object owned by the controller instead of module globals.
2. Decoupling: The memory indicator is derived from the state, so the view
   never computes labels or emphasis on its own.

Classes:
    CalculatorState: Mutable display text + memory register.
    MemoryIndicator: Immutable rendering of the memory register.
"""
from __future__ import annotations

from dataclasses import dataclass

from memcalc.config import MEMORY_ACTIVE_OPACITY, MEMORY_INACTIVE_OPACITY, MEMORY_LABEL_TEMPLATE
from memcalc.model.numbers import format_number


@dataclass
class CalculatorState:
    """Current display text and memory value. Memory starts at zero every session."""
    display: str = ""
    memory: float = 0.0


@dataclass(frozen=True)
class MemoryIndicator:
    """What the memory indicator shows for a given memory value."""
    label: str
    active: bool
    opacity: float

    @classmethod
    def from_memory(cls, memory: float) -> MemoryIndicator:
        active = memory != 0
        return cls(
            label=MEMORY_LABEL_TEMPLATE.format(value=format_number(memory)),
            active=active,
            opacity=MEMORY_ACTIVE_OPACITY if active else MEMORY_INACTIVE_OPACITY,
        )

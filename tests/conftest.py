"""Pytest configuration and fixtures."""

import os

import pytest

# Widgets are created without a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from memcalc.controller.calculator import CalculatorController  # noqa: E402
from memcalc.model.evaluator import EvaluationError  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """One QApplication for the whole session; signals and widgets need it."""
    app = QApplication.instance() or QApplication([])
    yield app


class FakeEvaluator:
    """Evaluator double returning canned results and recording its input."""

    def __init__(self, results=None, error=None):
        self.results = results or {}
        self.error = error
        self.calls = []

    def evaluate(self, expression):
        self.calls.append(expression)
        if self.error is not None:
            raise self.error
        if expression not in self.results:
            raise EvaluationError(expression, "no canned result")
        return self.results[expression]


@pytest.fixture
def controller():
    """Controller backed by the real numexpr evaluator."""
    return CalculatorController()


@pytest.fixture
def recorder(controller):
    """Collects everything the controller emits."""
    emitted = {"display": [], "memory": []}
    controller.display_changed.connect(lambda text: emitted["display"].append(text))
    controller.memory_changed.connect(lambda indicator: emitted["memory"].append(indicator))
    return emitted

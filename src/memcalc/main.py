"""
Application Entry Point
=======================
This module wires the MVC pieces together and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging from the environment (see memcalc.config).
2. Instantiates the Expression Evaluator and the Calculator Controller.
3. Passes the Controller into the Main Window (View).
"""
import logging

from memcalc.app.application import create_app
from memcalc.config import LOG_FILE, LOG_LEVEL
from memcalc.controller.calculator import CalculatorController
from memcalc.logging_config import setup_logging
from memcalc.model.evaluator import NumexprEvaluator
from memcalc.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)

    app = create_app()

    controller = CalculatorController(evaluator=NumexprEvaluator())
    window = MainWindow(controller)
    window.show()

    logger.info("Calculator started.")
    return app.exec()

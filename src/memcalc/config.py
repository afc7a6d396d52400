"""
Configuration & Global Constants
================================
This module serves as the central registry for the constants shared by the
controller and the view.

Why is this file needed?
------------------------
1. Abstraction: It prevents literal strings (the error text, the memory label)
   from being scattered throughout the code.
2. Deployment: It reads the logging options from the environment so a frozen
   build can be debugged without code changes.

Exports:
    ERROR_TEXT (str): Display text after a failed operation.
    MEMORY_LABEL_TEMPLATE (str): Format of the memory indicator label.
    LOG_LEVEL (int): Level passed to setup_logging().
    LOG_FILE (str | None): Optional log file path.
"""
import logging
import os
from typing import Optional

# Application identity
ORG_ID: str = "memcalc"
APP_ID: str = "memcalc"
VISIBLE_APP_NAME: str = "Calculator"

# Display
ERROR_TEXT: str = "Error"

# Memory indicator
MEMORY_LABEL_TEMPLATE: str = "M: {value}"
MEMORY_ACTIVE_OPACITY: float = 1.0
MEMORY_INACTIVE_OPACITY: float = 0.5

# Main window
WINDOW_WIDTH: int = 320
WINDOW_HEIGHT: int = 420


def get_log_level(default: int = logging.INFO) -> int:
    """
    Resolve the log level from MEMCALC_LOG_LEVEL (name or number).
    Unknown values fall back to the default.
    """
    raw = os.environ.get("MEMCALC_LOG_LEVEL", "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


LOG_LEVEL: int = get_log_level()
LOG_FILE: Optional[str] = os.environ.get("MEMCALC_LOG_FILE") or None

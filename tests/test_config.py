"""Tests for configuration and logging setup."""

import logging

import pytest

from memcalc.config import get_log_level
from memcalc.logging_config import setup_logging


class TestGetLogLevel:

    def test_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("MEMCALC_LOG_LEVEL", raising=False)
        assert get_log_level() == logging.INFO

    @pytest.mark.parametrize(
        "raw, expected",
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("15", 15), ("bogus", logging.INFO)],
    )
    def test_from_environment(self, monkeypatch, raw, expected):
        monkeypatch.setenv("MEMCALC_LOG_LEVEL", raw)
        assert get_log_level() == expected


class TestSetupLogging:

    @pytest.fixture(autouse=True)
    def restore_logger(self):
        logger = logging.getLogger("memcalc")
        level, handlers = logger.level, list(logger.handlers)
        yield
        for handler in logger.handlers:
            handler.close()
        logger.handlers[:] = handlers
        logger.setLevel(level)

    def test_console_handler_only(self):
        logger = setup_logging(level=logging.WARNING)
        assert logger.name == "memcalc"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_reconfiguring_does_not_duplicate_handlers(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_level_by_name(self):
        assert setup_logging(level="debug").level == logging.DEBUG

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "memcalc.log"
        logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))
        logging.getLogger("memcalc.controller.calculator").debug("hello from controller")

        assert len(logger.handlers) == 2
        content = log_file.read_text(encoding="utf-8")
        assert "Logging initialized" in content
        assert "memcalc.controller.calculator - DEBUG - hello from controller" in content

"""Tests for logging utilities."""

import logging

from src.logging import Logger, get_logger


class TestLogger:
    """Tests for the Logger wrapper."""

    def test_get_logger_wraps_named_logger(self):
        logger = get_logger("src.mimedb.test")
        assert isinstance(logger, Logger)
        assert logger.name == "src.mimedb.test"

    def test_messages_reach_logging(self, caplog):
        logger = get_logger("src.mimedb.test")
        with caplog.at_level(logging.DEBUG, logger="src.mimedb.test"):
            logger.debug("debug message")
            logger.warning("warning message")
        assert "debug message" in caplog.text
        assert "warning message" in caplog.text

    def test_exception_includes_traceback(self, caplog):
        logger = get_logger("src.mimedb.test")
        try:
            raise ValueError("boom")
        except ValueError:
            logger.exception("failed")
        assert caplog.records[-1].exc_info is not None

    def test_set_level(self):
        logger = get_logger("src.mimedb.level")
        logger.setLevel(logging.ERROR)
        assert logger.level == logging.ERROR
        assert not logger.isEnabledFor(logging.WARNING)

"""Logging utilities for the MIME database."""

import logging
import sys
from typing import Any


class Logger:
    """
    Thin wrapper around Python's logging module.

    Keeps call sites uniform across the package and gives one place to
    adjust how messages are emitted.
    """

    def __init__(self, name: str):
        """
        Initialize the logger.

        Args:
            name: Logger name (typically __name__).
        """
        self._logger = logging.getLogger(name)

    def _log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.log(level, msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an info message."""
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an error message."""
        self._log(logging.ERROR, msg, *args, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an error message with exception info."""
        kwargs["exc_info"] = kwargs.get("exc_info", True)
        self._log(logging.ERROR, msg, *args, **kwargs)

    def critical(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a critical message."""
        self._log(logging.CRITICAL, msg, *args, **kwargs)

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def level(self) -> int:
        """Get the effective log level."""
        return self._logger.getEffectiveLevel()

    def setLevel(self, level: int) -> None:
        """Set the log level."""
        self._logger.setLevel(level)

    def isEnabledFor(self, level: int) -> bool:
        """Check if a log level is enabled."""
        return self._logger.isEnabledFor(level)


def get_logger(name: str) -> Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    return Logger(name)


def configure_logging(level: str = "INFO") -> None:
    """
    Configure logging for the application.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )

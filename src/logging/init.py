from __future__ import annotations

import logging
import sys

"""Logging initialization with labeled prefixes.

Every line written by the catalog CLI starts with one of the labels
INFO|WARN|ERROR|SUMMARY so that the output can be grepped by scripts. Standard
logging only; library modules log through ``logging.getLogger(__name__)`` and
the CLI attaches the labeled handler to the application logger.
"""

__all__ = [
    "LOGGER_NAME",
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "setup_logging",
    "set_debug",
    "get_logger",
    "log_summary",
    "reset_logging",
]

LOGGER_NAME = "card_catalog"

# Custom SUMMARY level (between INFO=20 and WARNING=30)
SUMMARY_LEVEL = 25

# Global logger instance
_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Formatter printing ``LABEL message`` (WARNING is shortened to WARN)."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{level_label} {record.getMessage()}"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure the application logger (idempotent).

    Module loggers live under the ``src`` package, so the handler is attached
    to the application logger and to the ``src`` logger; both stop propagation
    to avoid duplicate lines.

    Returns:
        Configured application logger
    """
    global _logger

    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(LabeledFormatter())

    for name in (LOGGER_NAME, "src"):
        lg = logging.getLogger(name)
        lg.setLevel(level)
        # Clear any existing handlers to avoid duplication
        for h in lg.handlers[:]:
            lg.removeHandler(h)
        lg.addHandler(handler)
        lg.propagate = False

    _logger = logging.getLogger(LOGGER_NAME)
    return _logger


def set_debug(logger: logging.Logger) -> None:
    """Lower the application and module loggers (and their handlers) to DEBUG."""
    for lg in (logger, logging.getLogger("src")):
        lg.setLevel(logging.DEBUG)
        for h in lg.handlers:
            h.setLevel(logging.DEBUG)


def get_logger() -> logging.Logger:
    """Get the configured application logger, configuring it on first use."""
    if _logger is None:
        return setup_logging()
    return _logger


def log_summary(message: str) -> None:
    """Log a message at SUMMARY level."""
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Reset the global logger state. Mainly for testing purposes."""
    global _logger
    _logger = None

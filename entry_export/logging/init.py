from __future__ import annotations

import logging
import sys
from typing import TextIO

"""Console logging for the exporter.

All output goes through the ``entry_export`` logger. Each line carries a
level label followed by the message, e.g. ``WARN enabled fields not in form``
or ``SUMMARY entries=2 ...``. Modules log via ``logging.getLogger(__name__)``
and reach the console handler by propagation.
"""

__all__ = [
    "LOGGER_NAME",
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "setup_logging",
    "set_level",
    "get_logger",
    "log_summary",
    "reset_logging",
]

LOGGER_NAME = "entry_export"

# INFO(20) と WARNING(30) の間
SUMMARY_LEVEL = 25

LABELS = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    SUMMARY_LEVEL: "SUMMARY",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "CRITICAL",
}


class LabeledFormatter(logging.Formatter):
    """``<LABEL> <message>`` with the short labels above."""

    def format(self, record: logging.LogRecord) -> str:
        return f"{LABELS.get(record.levelno, record.levelname)} {record.getMessage()}"


def _console_handler(logger: logging.Logger) -> logging.Handler | None:
    for handler in logger.handlers:
        if isinstance(handler.formatter, LabeledFormatter):
            return handler
    return None


def setup_logging(level: int = logging.INFO, stream: TextIO | None = None) -> logging.Logger:
    """Attach the labeled console handler once; later calls return the logger as is.

    Args:
        level: Initial level of the logger and its handler
        stream: Output stream (stdout when omitted)
    """
    logger = logging.getLogger(LOGGER_NAME)
    if _console_handler(logger) is not None:
        return logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    # root 側の handler で二重出力しない
    logger.propagate = False
    set_level(level)
    return logger


def set_level(level: int | str) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def get_logger() -> logging.Logger:
    return setup_logging()


def log_summary(message: str) -> None:
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Detach the console handler so the next setup_logging() binds a fresh stream."""
    logger = logging.getLogger(LOGGER_NAME)
    handler = _console_handler(logger)
    while handler is not None:
        logger.removeHandler(handler)
        handler = _console_handler(logger)

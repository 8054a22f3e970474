"""Logging setup for the ``rated_ir`` logger tree.

Modules log through ``logging.getLogger(__name__)``; everything below the
``rated_ir`` package logger inherits the handlers installed here. Console
output goes to stderr so log lines never mix with the interactive prompts.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any

LOGGER_NAME = "rated_ir"

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JSONExceptionFormatter(logging.Formatter):
    """One JSON object per record, with exception type and traceback when present."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": {
                "file": record.filename,
                "function": record.funcName,
                "line": record.lineno,
            },
        }
        exc_type, exc_value, _ = record.exc_info or (None, None, None)
        if exc_type is not None:
            entry["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value) if exc_value is not None else None,
                "traceback": self.formatException(record.exc_info),
            }
        return json.dumps(entry, default=str)


def _formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return JSONExceptionFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(
    level: str = "WARNING",
    log_file: Path | None = None,
    json_format: bool = False,
) -> logging.Logger:
    """(Re)configure the package logger.

    Args:
        level: Level name such as ``DEBUG`` or ``INFO``; unknown names
            fall back to WARNING.
        log_file: Also write records to this file, creating its directory.
        json_format: Emit JSON lines instead of the pipe-delimited text format.

    Returns:
        The ``rated_ir`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.WARNING))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = _formatter(json_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger ``rated_ir`` or its child ``rated_ir.<name>``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)

"""Turn exceptions into error payloads, log lines and exit codes."""

import json
import logging
import traceback
from pathlib import Path
from typing import Any

from ...core.domain.exceptions import (
    ConfigurationError,
    CorpusError,
    RatedIRError,
    ValidationError,
)

logger = logging.getLogger(__name__)

FOREIGN_ERROR_CODE = "PYTHON_ERR"

# Exit status per error category; anything unlisted exits with 1
_EXIT_CODES: tuple[tuple[type[Exception], int], ...] = (
    (ValidationError, 2),
    (ConfigurationError, 2),
    (CorpusError, 3),
)


def _foreign_location(exc: BaseException) -> dict[str, Any]:
    frames = traceback.extract_tb(exc.__traceback__)
    if not frames:
        return {"class": "<unknown>", "method": "<unknown>", "file": "<unknown>", "line": 0}
    innermost = frames[-1]
    return {
        "class": "<unknown>",
        "method": innermost.name,
        "file": Path(innermost.filename).name,
        "line": innermost.lineno,
    }


def format_exception_json(
    exc: BaseException,
    include_trace: bool = False,
    extra_context: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the error payload for ``exc``.

    RatedIRError instances render through their own ``to_dict``; any
    other exception gets the same shape with code ``PYTHON_ERR`` and the
    innermost traceback frame as its location.
    """
    if isinstance(exc, RatedIRError):
        payload = exc.to_dict(include_trace=include_trace)
    else:
        payload = {
            "error": {
                "type": type(exc).__name__,
                "code": FOREIGN_ERROR_CODE,
                "message": str(exc),
            },
            "location": _foreign_location(exc),
        }
        if include_trace:
            payload["stack_trace"] = [
                line.rstrip()
                for chunk in traceback.format_exception(exc)
                for line in chunk.splitlines()
                if line.strip()
            ]

    if extra_context:
        payload.setdefault("context", {}).update(extra_context)
    return payload


def log_exception(
    exc: BaseException,
    log: logging.Logger | None = None,
    level: int = logging.ERROR,
    extra_context: dict[str, Any] | None = None,
) -> None:
    """Log the full payload of ``exc``, trace included, as one JSON message."""
    payload = format_exception_json(exc, include_trace=True, extra_context=extra_context)
    (log or logger).log(level, json.dumps(payload, indent=2, default=str))


def get_error_code(exc: BaseException) -> str:
    if isinstance(exc, RatedIRError):
        return exc.error_code
    return FOREIGN_ERROR_CODE


def get_exit_code(exc: BaseException) -> int:
    """Process exit status: 2 for bad input or configuration, 3 for corpus errors."""
    for category, code in _EXIT_CODES:
        if isinstance(exc, category):
            return code
    return 1

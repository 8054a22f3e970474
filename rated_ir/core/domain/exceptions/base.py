"""Root of the rated-ir exception hierarchy.

Every error raised by the engine carries a stable code (``RIR_<AREA>_<NNN>``),
the place it was raised from, optional key/value context and the lower-level
exception it wraps, and renders to a plain dict for JSON logs and the CLI.
"""

from __future__ import annotations

import inspect
import traceback
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from types import FrameType
from typing import Any

UNKNOWN = "<unknown>"


def _now() -> str:
    return datetime.now(UTC).isoformat()


@dataclass(frozen=True)
class ExceptionContext:
    """Where an error was raised."""

    class_name: str
    method_name: str
    file_name: str
    line_number: int
    timestamp: str = field(default_factory=_now)

    @classmethod
    def from_frame(cls, frame: FrameType) -> ExceptionContext:
        owner = frame.f_locals.get("self")
        return cls(
            class_name=type(owner).__name__ if owner is not None else "<module>",
            method_name=frame.f_code.co_name,
            file_name=Path(frame.f_code.co_filename).name,
            line_number=frame.f_lineno,
        )

    @classmethod
    def unknown(cls) -> ExceptionContext:
        return cls(UNKNOWN, UNKNOWN, UNKNOWN, 0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "class": self.class_name,
            "method": self.method_name,
            "file": self.file_name,
            "line": self.line_number,
            "timestamp": self.timestamp,
        }


def _raise_site() -> ExceptionContext:
    """Find the first frame outside the ``__init__`` chain of a RatedIRError."""
    frame = inspect.currentframe()
    try:
        frame = frame.f_back if frame else None
        while (
            frame is not None
            and frame.f_code.co_name == "__init__"
            and isinstance(frame.f_locals.get("self"), RatedIRError)
        ):
            frame = frame.f_back
        return ExceptionContext.from_frame(frame) if frame else ExceptionContext.unknown()
    finally:
        del frame


class RatedIRError(Exception):
    """Base class for every error raised by rated-ir.

    Subclasses only override ``error_code``. Pass the wrapped exception as
    ``cause`` so it survives into ``to_dict`` and the logs::

        try:
            raw = path.read_text()
        except OSError as e:
            raise DocumentLoadError("Failed to read document", cause=e) from e
    """

    error_code: str = "RIR_ERR_001"

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.extra_context = dict(context or {})
        self.location = _raise_site()
        if cause is not None:
            self.__cause__ = cause

    @property
    def stack_trace(self) -> list[str] | None:
        """Formatted traceback of the wrapped exception, if there is one."""
        if self.cause is None:
            return None
        lines = traceback.format_exception(self.cause)
        return [line.rstrip() for chunk in lines for line in chunk.splitlines() if line.strip()]

    def to_dict(self, include_trace: bool = False) -> dict[str, Any]:
        """Render as ``{"error", "location"[, "context", "cause", "stack_trace"]}``."""
        result: dict[str, Any] = {
            "error": {
                "type": type(self).__name__,
                "code": self.error_code,
                "message": self.message,
            },
            "location": self.location.to_dict(),
        }
        if self.extra_context:
            result["context"] = dict(self.extra_context)
        if self.cause is not None:
            result["cause"] = {"type": type(self.cause).__name__, "message": str(self.cause)}
            if include_trace:
                result["stack_trace"] = self.stack_trace
        return result

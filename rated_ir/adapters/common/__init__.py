"""Adapter-side helpers shared by inbound and outbound adapters."""

from .exception_handler import format_exception_json, get_error_code, get_exit_code, log_exception

__all__ = [
    "format_exception_json",
    "get_error_code",
    "get_exit_code",
    "log_exception",
]

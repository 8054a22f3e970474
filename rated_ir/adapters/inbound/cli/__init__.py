"""Command-line interface for rated-ir."""

from .commands import app, main

__all__ = ["app", "main"]

"""Composition root wiring adapters to the core services."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from rich.console import Console

from ..adapters.outbound import BrowserDisplay, ConsoleDisplay, InvertedIndex
from ..config import settings
from ..core.domain import DocumentType
from ..core.ports import DocumentDisplayPort, FeedbackStrategy
from ..core.services import build_strategy

logger = logging.getLogger(__name__)


@lru_cache
def get_index(directory: Path, doc_type: DocumentType, stem: bool) -> InvertedIndex:
    logger.info(f"Building inverted index for {directory} ({doc_type.value}, stem={stem})...")
    return InvertedIndex.from_directory(directory, doc_type, stem)


def get_display(index: InvertedIndex, console: Console, browser: bool) -> DocumentDisplayPort:
    if browser:
        return BrowserDisplay()
    return ConsoleDisplay(index, console, max_chars=settings.display_chars)


def get_strategy(mode: str | None = None) -> FeedbackStrategy:
    mode = mode or settings.feedback_mode
    logger.info(f"Using {mode} relevance feedback")
    return build_strategy(mode, settings.revision_weights(mode))

"""Outbound adapters: corpus indexing, ranking and document display."""

from .display import BrowserDisplay, ConsoleDisplay
from .document_loader import html_to_text, load_text, load_vector
from .inverted_index import InvertedIndex

__all__ = [
    "BrowserDisplay",
    "ConsoleDisplay",
    "InvertedIndex",
    "html_to_text",
    "load_text",
    "load_vector",
]

"""Read corpus files and extract their text."""

import logging
from pathlib import Path

from bs4 import BeautifulSoup

from ...core.domain import DocumentRef, DocumentType, HashMapVector
from ...core.domain.exceptions import DocumentLoadError
from ...core.domain.utils import term_counts

logger = logging.getLogger(__name__)

# Tags whose contents are never shown to a reader
_INVISIBLE_TAGS = ("script", "style", "noscript", "head", "template")


def html_to_text(markup: str) -> str:
    """Extract visible text from HTML markup."""
    soup = BeautifulSoup(markup, "lxml")
    for tag in soup(_INVISIBLE_TAGS):
        tag.decompose()
    return soup.get_text(separator=" ", strip=True)


def load_text(path: Path, doc_type: DocumentType) -> str:
    """Read a document file and return its text.

    Args:
        path: File to read.
        doc_type: Whether to strip HTML markup.

    Returns:
        The document text.

    Raises:
        DocumentLoadError: If the file cannot be read.
    """
    try:
        raw = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise DocumentLoadError(
            f"Failed to read document {path.name}",
            cause=e,
            context={"path": str(path)},
        ) from e

    if doc_type is DocumentType.HTML:
        return html_to_text(raw)
    return raw


def load_vector(doc_ref: DocumentRef) -> HashMapVector:
    """Recompute the raw term-frequency vector of a document."""
    text = load_text(doc_ref.path, doc_ref.doc_type)
    return term_counts(text, doc_ref.stem)

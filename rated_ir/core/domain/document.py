"""Document reference and retrieval result models."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class DocumentType(Enum):
    """How a corpus file is parsed into text.

    Attributes:
        TEXT: Plain text, read as-is.
        HTML: HTML markup; tags are stripped and visible text kept.
    """

    TEXT = "text"
    HTML = "html"


@dataclass(frozen=True)
class DocumentRef:
    """A stable, hashable reference to a corpus document.

    The path together with the document type and stemming flag is enough
    to deterministically recompute the document's term vector on demand.

    Attributes:
        path: Location of the document file.
        doc_type: Parsing mode used when the document was indexed.
        stem: Whether tokens were stemmed when the document was indexed.
    """

    path: Path
    doc_type: DocumentType = DocumentType.TEXT
    stem: bool = False

    @property
    def name(self) -> str:
        return self.path.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Retrieval:
    """A retrieved document with its similarity score.

    Attributes:
        doc_ref: The retrieved document.
        score: Cosine similarity to the query (higher is more relevant).
    """

    doc_ref: DocumentRef
    score: float

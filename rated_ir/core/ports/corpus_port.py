"""Corpus Lookup Port Interface."""

from abc import ABC, abstractmethod

from ..domain import DocumentRef, HashMapVector


class CorpusLookupPort(ABC):
    """Abstract interface for fetching document contents by reference."""

    @abstractmethod
    def vector_of(self, doc_ref: DocumentRef) -> HashMapVector:
        """Recompute the term-frequency vector of a document.

        Returns a fresh vector on every call; callers may mutate it.
        """
        ...

    @abstractmethod
    def text_of(self, doc_ref: DocumentRef) -> str:
        """Return the extracted text of a document."""
        ...

"""Feedback Strategy Port."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from ..domain import DocumentRef, FeedbackLedger, HashMapVector

VectorLookup = Callable[[DocumentRef], HashMapVector]


class FeedbackStrategy(Protocol):
    """A style of relevance feedback (graded, binary, ...).

    Decides how a rating is asked for and parsed, how it is stored in the
    ledger, and how the ledger turns into a revised query.
    """

    invalid_hint: str

    def prompt_text(self, show_number: int, doc_ref: DocumentRef) -> str:  # pragma: no cover - protocol
        ...

    def parse(self, response: str) -> float | None:  # pragma: no cover - protocol
        """Return the rating for a response, or None when it is not valid."""
        ...

    def record(
        self, ledger: FeedbackLedger, doc_ref: DocumentRef, rating: float
    ) -> None:  # pragma: no cover - protocol
        ...

    def revise(
        self,
        original_query: HashMapVector,
        ledger: FeedbackLedger,
        vector_lookup: VectorLookup,
    ) -> HashMapVector:  # pragma: no cover - protocol
        ...

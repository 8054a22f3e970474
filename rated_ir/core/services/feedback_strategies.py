"""Feedback strategies: how ratings are collected and turned into queries."""

from __future__ import annotations

import math

from ..domain import MAX_RATING, MIN_RATING, DocumentRef, FeedbackLedger, HashMapVector
from ..domain.exceptions import InvalidConfigurationError
from ..ports.feedback_port import VectorLookup
from .query_reviser import QueryReviser, RevisionWeights

BINARY_WEIGHTS = RevisionWeights(alpha=1.0, beta=1.0, gamma=1.0)


class GradedFeedback:
    """Continuous ratings in [-1, 1] scaling each document's influence."""

    invalid_hint = "Please enter a number between -1 and 1."

    def __init__(self, weights: RevisionWeights | None = None) -> None:
        self.reviser = QueryReviser(weights)

    def prompt_text(self, show_number: int, doc_ref: DocumentRef) -> str:
        return (
            f"Is document #{show_number}:{doc_ref.name} relevant "
            "(enter a number between -1 and 1 where -1: very irrelevant, "
            "0: unsure, +1: very relevant)?"
        )

    def parse(self, response: str) -> float | None:
        try:
            value = float(response.strip())
        except ValueError:
            return None
        if not math.isfinite(value) or not MIN_RATING <= value <= MAX_RATING:
            return None
        return value

    def record(self, ledger: FeedbackLedger, doc_ref: DocumentRef, rating: float) -> None:
        ledger.record(doc_ref, rating)

    def revise(
        self,
        original_query: HashMapVector,
        ledger: FeedbackLedger,
        vector_lookup: VectorLookup,
    ) -> HashMapVector:
        return self.reviser.revise(original_query, ledger, vector_lookup)


class BinaryFeedback:
    """Yes/no relevance judgments, stored as ratings of +1 and -1."""

    invalid_hint = "Please answer y or n."

    YES = frozenset({"y", "yes"})
    NO = frozenset({"n", "no"})

    def __init__(self, weights: RevisionWeights | None = None) -> None:
        self.reviser = QueryReviser(weights or BINARY_WEIGHTS, negatives_by_magnitude=True)

    def prompt_text(self, show_number: int, doc_ref: DocumentRef) -> str:
        return f"Is document #{show_number}:{doc_ref.name} relevant (y/n)?"

    def parse(self, response: str) -> float | None:
        answer = response.strip().lower()
        if answer in self.YES:
            return 1.0
        if answer in self.NO:
            return -1.0
        return None

    def record(self, ledger: FeedbackLedger, doc_ref: DocumentRef, rating: float) -> None:
        ledger.record(doc_ref, rating)

    def revise(
        self,
        original_query: HashMapVector,
        ledger: FeedbackLedger,
        vector_lookup: VectorLookup,
    ) -> HashMapVector:
        return self.reviser.revise(original_query, ledger, vector_lookup)


def build_strategy(mode: str, weights: RevisionWeights | None = None) -> GradedFeedback | BinaryFeedback:
    """Create the feedback strategy for a configured mode name."""
    if mode == "graded":
        return GradedFeedback(weights)
    if mode == "binary":
        return BinaryFeedback(weights)
    raise InvalidConfigurationError(f"Unknown feedback mode: {mode}", context={"mode": mode})

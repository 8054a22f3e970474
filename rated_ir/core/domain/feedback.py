"""Ledger of graded relevance ratings collected during a session."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from types import MappingProxyType

from .document import DocumentRef
from .exceptions import InvalidRatingError

logger = logging.getLogger(__name__)

MIN_RATING = -1.0
MAX_RATING = 1.0


def _reject(doc: DocumentRef, rating: float, bucket: str) -> InvalidRatingError:
    return InvalidRatingError(
        f"Rating {rating} is not valid for the {bucket} bucket",
        context={"document": str(doc.path), "rating": rating, "bucket": bucket},
    )


class FeedbackLedger:
    """Graded ratings the user has assigned to retrieved documents.

    Ratings are kept in two mappings, one for ratings >= 0 and one for
    ratings < 0. A document lives in at most one of them; re-rating a
    document overwrites the earlier rating and moves it between buckets
    when the sign changes. A rating of exactly 0.0 counts as positive:
    the document is marked as rated but contributes nothing to revision.
    """

    def __init__(self) -> None:
        self._positive: dict[DocumentRef, float] = {}
        self._negative: dict[DocumentRef, float] = {}

    def record_positive(self, doc: DocumentRef, rating: float) -> None:
        """Store a non-negative rating, moving ``doc`` out of the negative bucket.

        Args:
            doc: The rated document.
            rating: A finite value in [0, 1].

        Raises:
            InvalidRatingError: If ``rating`` is outside [0, 1] or not finite.
        """
        if not math.isfinite(rating) or not 0.0 <= rating <= MAX_RATING:
            raise _reject(doc, rating, "positive")
        self._negative.pop(doc, None)
        self._positive[doc] = float(rating)

    def record_negative(self, doc: DocumentRef, rating: float) -> None:
        """Store a negative rating, moving ``doc`` out of the positive bucket.

        Args:
            doc: The rated document.
            rating: A finite value in [-1, 0).

        Raises:
            InvalidRatingError: If ``rating`` is outside [-1, 0) or not finite.
        """
        if not math.isfinite(rating) or not MIN_RATING <= rating < 0.0:
            raise _reject(doc, rating, "negative")
        self._positive.pop(doc, None)
        self._negative[doc] = float(rating)

    def record(self, doc: DocumentRef, rating: float) -> None:
        """Record ``rating`` for ``doc`` in the bucket matching its sign."""
        if math.isnan(rating):
            raise _reject(doc, rating, "any")
        if rating >= 0.0:
            self.record_positive(doc, rating)
        else:
            self.record_negative(doc, rating)
        logger.debug(f"Rated {doc.name}: {rating:+.2f}")

    def has_rating(self, doc: DocumentRef) -> bool:
        return doc in self._positive or doc in self._negative

    def is_empty(self) -> bool:
        return not self._positive and not self._negative

    def positives(self) -> Mapping[DocumentRef, float]:
        return MappingProxyType(self._positive)

    def negatives(self) -> Mapping[DocumentRef, float]:
        return MappingProxyType(self._negative)

    def summary(self) -> str:
        """Describe both buckets for display before a redo."""

        def _fmt(bucket: Mapping[DocumentRef, float]) -> str:
            if not bucket:
                return "none"
            return ", ".join(f"{doc.name}={rating:+.2f}" for doc, rating in sorted(
                bucket.items(), key=lambda kv: str(kv[0].path)
            ))

        return f"Positive docs: {_fmt(self._positive)}\nNegative docs: {_fmt(self._negative)}"

    def __len__(self) -> int:
        return len(self._positive) + len(self._negative)

"""Ide-regular query revision from graded relevance feedback.

The revised query is a linear combination of the original query and the
vectors of every rated document, each normalised by its own maximum
term weight:

    q' = alpha * q / max(q)
         + sum over positives  d of  r_d * beta  * d / max(d)
         - sum over negatives  d of  r_d * gamma * d / max(d)

For graded feedback ``r_d`` of a negative document is itself negative,
so the subtraction in the last term is applied to an already negated
vector. That composition is kept as-is; see ``QueryReviser``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain import DocumentRef, FeedbackLedger, HashMapVector
from ..domain.exceptions import DegenerateQueryError, InvalidConfigurationError
from ..ports.feedback_port import VectorLookup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RevisionWeights:
    """Weights of the three terms of the Ide-regular formula.

    Attributes:
        alpha: Weight on the original query.
        beta: Weight on positively rated documents.
        gamma: Weight on negatively rated documents.
    """

    alpha: float = 8.0
    beta: float = 16.0
    gamma: float = 4.0

    def __post_init__(self) -> None:
        for name in ("alpha", "beta", "gamma"):
            value = getattr(self, name)
            if not value > 0:
                raise InvalidConfigurationError(
                    f"Revision weight {name} must be positive",
                    context={name: value},
                )


class QueryReviser:
    """Computes a revised query vector from a feedback ledger.

    Revision is pure: the original query and every vector returned by the
    lookup are left unmodified, and the result depends only on the ledger
    contents, never on iteration order.

    Args:
        weights: Alpha/beta/gamma weights.
        negatives_by_magnitude: When False (graded feedback) a negative
            document is scaled by its signed rating and then subtracted.
            When True (binary feedback) it is scaled by the rating's
            magnitude, so irrelevant documents are pushed away.
    """

    def __init__(
        self,
        weights: RevisionWeights | None = None,
        negatives_by_magnitude: bool = False,
    ) -> None:
        self.weights = weights or RevisionWeights()
        self.negatives_by_magnitude = negatives_by_magnitude

    def _document_term(
        self,
        doc: DocumentRef,
        factor: float,
        vector_lookup: VectorLookup,
    ) -> HashMapVector | None:
        vector = vector_lookup(doc).copy()
        max_weight = vector.max_weight()
        if max_weight == 0:
            logger.warning(f"Skipping {doc.name}: document vector is all zero")
            return None
        vector.scale(factor / max_weight)
        return vector

    def revise(
        self,
        original_query: HashMapVector,
        ledger: FeedbackLedger,
        vector_lookup: VectorLookup,
    ) -> HashMapVector:
        """Compute the revised query.

        Args:
            original_query: The query vector captured at session start.
            ledger: Ratings collected so far.
            vector_lookup: Returns the term vector of a rated document.

        Returns:
            A new query vector.

        Raises:
            DegenerateQueryError: If the original query has no positive weight.
        """
        revised = original_query.copy()
        max_weight = revised.max_weight()
        if max_weight <= 0:
            raise DegenerateQueryError(
                "Cannot revise a query with no positive term weight",
                context={"terms": len(original_query)},
            )
        revised.scale(self.weights.alpha / max_weight)

        for doc, rating in ledger.positives().items():
            if rating == 0:
                continue
            term = self._document_term(doc, rating * self.weights.beta, vector_lookup)
            if term is not None:
                revised.add(term)

        for doc, rating in ledger.negatives().items():
            weight = abs(rating) if self.negatives_by_magnitude else rating
            term = self._document_term(doc, weight * self.weights.gamma, vector_lookup)
            if term is not None:
                revised.subtract(term)

        logger.info(
            f"Revised query from {len(ledger.positives())} positive and "
            f"{len(ledger.negatives())} negative ratings ({len(revised)} terms)"
        )
        return revised

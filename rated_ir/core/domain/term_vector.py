"""Sparse term-weight vectors for queries and documents."""

from __future__ import annotations

from collections.abc import Iterator, Mapping


class HashMapVector:
    """A sparse mapping from term to real-valued weight.

    Used both for raw term-frequency vectors of documents and queries
    and for revised query vectors, whose weights may be negative.

    The arithmetic operations mutate the receiver in place; callers
    that need the original intact take a ``copy()`` first.

    Attributes:
        weights: Underlying term -> weight dictionary.
    """

    __slots__ = ("weights",)

    def __init__(self, weights: Mapping[str, float] | None = None) -> None:
        self.weights: dict[str, float] = dict(weights) if weights else {}

    def increment(self, term: str, amount: float = 1.0) -> None:
        """Add ``amount`` to the weight of ``term``."""
        self.weights[term] = self.weights.get(term, 0.0) + amount

    def weight(self, term: str) -> float:
        """Return the weight of ``term`` (0.0 when absent)."""
        return self.weights.get(term, 0.0)

    def copy(self) -> HashMapVector:
        """Return an independent vector with the same weights.

        Returns:
            A new HashMapVector; mutating it leaves this one unchanged.
        """
        return HashMapVector(self.weights)

    def scale(self, factor: float) -> None:
        """Multiply every weight by ``factor``."""
        for term in self.weights:
            self.weights[term] *= factor

    def add(self, other: HashMapVector) -> None:
        """Add ``other`` term by term, in place.

        Terms only present in ``other`` are inserted with its weight.

        Args:
            other: Vector to add; it is not modified.
        """
        for term, value in other.weights.items():
            self.increment(term, value)

    def subtract(self, other: HashMapVector) -> None:
        """Subtract ``other`` term by term, in place.

        Terms only present in ``other`` are inserted with its negated weight.

        Args:
            other: Vector to subtract; it is not modified.
        """
        for term, value in other.weights.items():
            self.increment(term, -value)

    def max_weight(self) -> float:
        """Return the largest weight, or 0.0 for an empty vector."""
        if not self.weights:
            return 0.0
        return max(self.weights.values())

    def items(self) -> Iterator[tuple[str, float]]:
        return iter(self.weights.items())

    def __len__(self) -> int:
        return len(self.weights)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashMapVector):
            return NotImplemented
        return self.weights == other.weights

    def __repr__(self) -> str:
        top = sorted(self.weights.items(), key=lambda kv: (-kv[1], kv[0]))[:5]
        shown = ", ".join(f"{term}:{value:.3f}" for term, value in top)
        more = "" if len(self.weights) <= 5 else f", ... (+{len(self.weights) - 5})"
        return f"HashMapVector({shown}{more})"

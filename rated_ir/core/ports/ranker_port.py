"""Ranker Port Interface."""

from abc import ABC, abstractmethod

from ..domain import HashMapVector, Retrieval


class RankerPort(ABC):
    """Abstract interface for ranked retrieval."""

    @abstractmethod
    def retrieve(self, query: HashMapVector) -> list[Retrieval]:
        """Rank documents against a query vector, best first.

        May return an empty list.
        """
        ...

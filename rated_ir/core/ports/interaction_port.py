"""User Interaction Port Interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..domain import Retrieval


class UserInteractionPort(ABC):
    """Abstract interface for the prompt/response channel of a session.

    Exactly one prompt is outstanding at a time. ``ask`` blocks until the
    user answers and may raise ``EOFError`` or ``KeyboardInterrupt`` when
    input ends or is interrupted.
    """

    @abstractmethod
    def ask(self, message: str) -> str:
        """Prompt the user and return the raw response."""
        ...

    @abstractmethod
    def say(self, message: str) -> None:
        """Show an informational message."""
        ...

    @abstractmethod
    def show_retrievals(self, retrievals: Sequence[Retrieval], start: int) -> None:
        """Show a page of results.

        Args:
            retrievals: The page of results to show.
            start: 1-based display number of the first result on the page.
        """
        ...

"""Interactive retrieval session with relevance feedback.

A session shows a ranked list a page at a time and accepts commands:

- empty input: end the session
- ``m``: show the next page of results
- ``r``: re-run a revised query built from the ratings given so far
- ``N``: show document number N and, with feedback on, ask for a rating

End of input or an interrupt at any prompt ends the session.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from ..domain import DocumentRef, FeedbackLedger, HashMapVector, Retrieval
from ..domain.exceptions import (
    CorpusError,
    DegenerateQueryError,
    InvalidConfigurationError,
    RetrievalError,
    SessionTerminatedError,
)
from ..ports import (
    CorpusLookupPort,
    DocumentDisplayPort,
    FeedbackStrategy,
    RankerPort,
    UserInteractionPort,
)
from .feedback_strategies import GradedFeedback

logger = logging.getLogger(__name__)

MORE_COMMAND = "m"
REDO_COMMAND = "r"


class SessionState(Enum):
    """States of the session protocol."""

    BROWSING = "browsing"
    AWAITING_RATING = "awaiting_rating"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class SessionConfig:
    """Paging and prompting parameters for a session.

    Attributes:
        page_size: Number of results shown per page.
        max_rating_attempts: Invalid rating responses tolerated before the
            rating is abandoned. None retries until valid input or
            cancellation.
    """

    page_size: int = 10
    max_rating_attempts: int | None = None

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise InvalidConfigurationError(
                "page_size must be at least 1", context={"page_size": self.page_size}
            )
        if self.max_rating_attempts is not None and self.max_rating_attempts < 1:
            raise InvalidConfigurationError(
                "max_rating_attempts must be at least 1",
                context={"max_rating_attempts": self.max_rating_attempts},
            )


class RetrievalSession:
    """Drives one user through browsing, rating and re-querying.

    The session exclusively owns its ledger, query state and ranked list.
    The original query is captured once; every redo recomputes the
    revised query from it and the full ledger.
    """

    def __init__(
        self,
        query: HashMapVector,
        retrievals: Sequence[Retrieval],
        *,
        ranker: RankerPort,
        corpus: CorpusLookupPort,
        display: DocumentDisplayPort,
        interaction: UserInteractionPort,
        feedback_enabled: bool = False,
        strategy: FeedbackStrategy | None = None,
        config: SessionConfig | None = None,
    ) -> None:
        self.ranker = ranker
        self.corpus = corpus
        self.display = display
        self.interaction = interaction
        self.feedback_enabled = feedback_enabled
        self.strategy: FeedbackStrategy = strategy or GradedFeedback()
        self.config = config or SessionConfig()

        self.ledger = FeedbackLedger()
        self._original_query = query.copy()
        self._current_query = query
        self._retrievals: tuple[Retrieval, ...] = tuple(retrievals)
        self._cursor = 0
        self.state = SessionState.BROWSING

    @property
    def original_query(self) -> HashMapVector:
        return self._original_query

    @property
    def current_query(self) -> HashMapVector:
        return self._current_query

    @property
    def ranked_list(self) -> tuple[Retrieval, ...]:
        return self._retrievals

    @property
    def cursor(self) -> int:
        return self._cursor

    def _set_state(self, state: SessionState) -> None:
        if state is not self.state:
            logger.debug(f"Session state {self.state.value} -> {state.value}")
        self.state = state

    def _read(self, message: str) -> str | None:
        """Prompt once; None means the user cancelled or input ended."""
        try:
            return self.interaction.ask(message)
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input cancelled")
            return None

    def next_page(self) -> list[Retrieval]:
        """Return the page at the cursor and advance the cursor by a page."""
        page = list(self._retrievals[self._cursor : self._cursor + self.config.page_size])
        self._cursor += self.config.page_size
        return page

    def _show_page(self) -> None:
        start = self._cursor + 1
        page = self.next_page()
        if page:
            self.interaction.show_retrievals(page, start)
        else:
            self.interaction.say("No more results.")

    def _show_first_page(self) -> bool:
        self._cursor = 0
        if not self._retrievals:
            self.interaction.say("No documents retrieved.")
            return False
        self._show_page()
        return True

    def start(self) -> None:
        """Show the first page; a session with nothing to show ends at once."""
        if not self._show_first_page():
            self._set_state(SessionState.TERMINATED)

    def run(self) -> SessionState:
        """Run the command loop until the session terminates."""
        self.start()
        while self.state is not SessionState.TERMINATED:
            command = self._read("Enter command")
            if command is None:
                self._set_state(SessionState.TERMINATED)
            else:
                self.handle(command)
        return self.state

    def handle(self, command: str) -> SessionState:
        """Process one command typed while browsing.

        Returns:
            The state after the command.

        Raises:
            SessionTerminatedError: If the session has already ended.
        """
        if self.state is SessionState.TERMINATED:
            raise SessionTerminatedError("Session has already ended", context={"command": command})

        command = command.strip()
        if not command:
            self._set_state(SessionState.TERMINATED)
        elif command == MORE_COMMAND:
            self._show_page()
        elif command == REDO_COMMAND and self.feedback_enabled:
            self._redo()
        else:
            self._show_document(command)
        return self.state

    def _show_document(self, command: str) -> None:
        try:
            show_number = int(command)
        except ValueError:
            self.interaction.say("Unknown command.")
            self.interaction.say(
                "Enter `m' to see more, a number to show the nth document, nothing to exit."
            )
            if self.feedback_enabled and not self.ledger.is_empty():
                self.interaction.say(
                    "Enter `r' to use any feedback given to `redo' with a revised query."
                )
            return

        if not 1 <= show_number <= len(self._retrievals):
            self.interaction.say(f"No such document number: {show_number}")
            return

        doc_ref = self._retrievals[show_number - 1].doc_ref
        self.interaction.say(f"Showing document {show_number}: {doc_ref.name}")
        try:
            self.display.show(doc_ref)
        except CorpusError as exc:
            logger.warning(f"Cannot show {doc_ref.name}: {exc.message}")
            self.interaction.say(f"Cannot show document {show_number}: {exc.message}")
            return
        if self.feedback_enabled and not self.ledger.has_rating(doc_ref):
            self._collect_rating(show_number, doc_ref)

    def _collect_rating(self, show_number: int, doc_ref: DocumentRef) -> None:
        self._set_state(SessionState.AWAITING_RATING)
        prompt = self.strategy.prompt_text(show_number, doc_ref)
        attempts = 0
        while True:
            response = self._read(prompt)
            if response is None:
                self._set_state(SessionState.TERMINATED)
                return

            rating = self.strategy.parse(response)
            if rating is not None:
                self.strategy.record(self.ledger, doc_ref, rating)
                self._set_state(SessionState.BROWSING)
                return

            attempts += 1
            limit = self.config.max_rating_attempts
            if limit is not None and attempts >= limit:
                self.interaction.say(f"No valid rating given; document {show_number} left unrated.")
                self._set_state(SessionState.BROWSING)
                return
            self.interaction.say(self.strategy.invalid_hint)

    def _redo(self) -> None:
        if self.ledger.is_empty():
            self.interaction.say("Need to first view some documents and provide feedback.")
            return

        self.interaction.say(self.ledger.summary())
        try:
            revised = self.strategy.revise(self._original_query, self.ledger, self.corpus.vector_of)
        except (DegenerateQueryError, CorpusError) as exc:
            logger.warning(f"Query revision failed: {exc.message}")
            self.interaction.say(f"Cannot revise query: {exc.message}")
            return

        self.interaction.say("Executing New Expanded and Reweighted Query:")
        try:
            retrievals = self.ranker.retrieve(revised)
        except RetrievalError as exc:
            logger.error(f"Revised query failed: {exc.message}")
            self.interaction.say(f"Retrieval failed: {exc.message}")
            return
        self._current_query = revised
        self._retrievals = tuple(retrievals)
        self._show_first_page()


def run_session(
    query: HashMapVector,
    retrievals: Sequence[Retrieval],
    *,
    ranker: RankerPort,
    corpus: CorpusLookupPort,
    display: DocumentDisplayPort,
    interaction: UserInteractionPort,
    feedback_enabled: bool = False,
    strategy: FeedbackStrategy | None = None,
    config: SessionConfig | None = None,
) -> RetrievalSession:
    """Run an interactive session to completion and return it."""
    session = RetrievalSession(
        query,
        retrievals,
        ranker=ranker,
        corpus=corpus,
        display=display,
        interaction=interaction,
        feedback_enabled=feedback_enabled,
        strategy=strategy,
        config=config,
    )
    session.run()
    return session

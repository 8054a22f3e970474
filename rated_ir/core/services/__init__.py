"""Core services: query revision, feedback strategies and the session."""

from .feedback_strategies import BinaryFeedback, GradedFeedback, build_strategy
from .query_reviser import QueryReviser, RevisionWeights
from .retrieval_session import (
    RetrievalSession,
    SessionConfig,
    SessionState,
    run_session,
)

__all__ = [
    "BinaryFeedback",
    "GradedFeedback",
    "QueryReviser",
    "RetrievalSession",
    "RevisionWeights",
    "SessionConfig",
    "SessionState",
    "build_strategy",
    "run_session",
]

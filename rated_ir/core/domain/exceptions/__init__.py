"""Custom exception hierarchy for rated-ir.

This package provides structured exceptions with automatic context capture.
Each exception includes:
- Error codes for quick identification
- Automatic capture of class, method, file, and line number
- Cause chaining for underlying exceptions
- JSON serialization for structured logging

Import from this package directly:

    from rated_ir.core.domain.exceptions import RatedIRError, InvalidRatingError
"""

# Base classes
from .base import ExceptionContext, RatedIRError

# Configuration exceptions
from .configuration import ConfigurationError, InvalidConfigurationError

# Corpus exceptions
from .corpus import CorpusError, DocumentLoadError, EmptyCorpusError

# Feedback exceptions
from .feedback import DegenerateQueryError, FeedbackError

# Retrieval exceptions
from .retrieval import RetrievalError

# Session exceptions
from .session import SessionError, SessionTerminatedError

# Validation exceptions
from .validation import EmptyQueryError, InvalidRatingError, ValidationError

__all__ = [
    # Base
    "ExceptionContext",
    "RatedIRError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    # Corpus
    "CorpusError",
    "DocumentLoadError",
    "EmptyCorpusError",
    # Feedback
    "FeedbackError",
    "DegenerateQueryError",
    # Retrieval
    "RetrievalError",
    # Session
    "SessionError",
    "SessionTerminatedError",
    # Validation
    "ValidationError",
    "InvalidRatingError",
    "EmptyQueryError",
]

"""Domain models for rated-ir.

This package contains the data models used across the application:

- term_vector: HashMapVector, the sparse term-weight vector
- document: DocumentType, DocumentRef and Retrieval
- feedback: FeedbackLedger holding graded ratings for a session

All models are re-exported here for convenient importing:

    from rated_ir.core.domain import DocumentRef, FeedbackLedger, HashMapVector
"""

from .document import DocumentRef, DocumentType, Retrieval
from .feedback import MAX_RATING, MIN_RATING, FeedbackLedger
from .term_vector import HashMapVector

__all__ = [
    # Vector model
    "HashMapVector",
    # Document models
    "DocumentType",
    "DocumentRef",
    "Retrieval",
    # Feedback
    "FeedbackLedger",
    "MIN_RATING",
    "MAX_RATING",
]

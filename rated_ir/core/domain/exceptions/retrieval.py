"""Retrieval exceptions for rated-ir."""

from .base import RatedIRError


class RetrievalError(RatedIRError):
    """Error during document retrieval."""

    error_code = "RIR_RET_001"

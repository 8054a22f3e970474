"""Relevance feedback exceptions for rated-ir."""

from .base import RatedIRError


class FeedbackError(RatedIRError):
    """Error while revising a query from feedback."""

    error_code = "RIR_FBK_001"


class DegenerateQueryError(FeedbackError):
    """The original query vector has no non-zero weight.

    No meaningful revision is possible because the base term would
    divide by a zero maximum weight.
    """

    error_code = "RIR_FBK_002"

"""Validation exceptions for rated-ir."""

from .base import RatedIRError


class ValidationError(RatedIRError):
    """Input validation failed."""

    error_code = "RIR_VAL_001"


class InvalidRatingError(ValidationError):
    """Rating is outside [-1, 1] or has the wrong sign for its bucket."""

    error_code = "RIR_VAL_002"


class EmptyQueryError(ValidationError):
    """Query has no indexable terms."""

    error_code = "RIR_VAL_003"

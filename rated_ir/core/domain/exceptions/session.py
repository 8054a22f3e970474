"""Interactive session exceptions for rated-ir."""

from .base import RatedIRError


class SessionError(RatedIRError):
    """Error in the interactive retrieval session."""

    error_code = "RIR_SES_001"


class SessionTerminatedError(SessionError):
    """A command was sent to a session that has already ended."""

    error_code = "RIR_SES_002"

"""Corpus and indexing exceptions for rated-ir."""

from .base import RatedIRError


class CorpusError(RatedIRError):
    """Error while reading or indexing the document corpus."""

    error_code = "RIR_CRP_001"


class DocumentLoadError(CorpusError):
    """A document could not be read or parsed.

    Common causes:
    - File removed after indexing
    - Permission denied
    - Malformed HTML the parser cannot recover from
    """

    error_code = "RIR_CRP_002"


class EmptyCorpusError(CorpusError):
    """No indexable documents were found in the corpus directory."""

    error_code = "RIR_CRP_003"

"""Ports: the contracts the core expects from its collaborators."""

from .corpus_port import CorpusLookupPort
from .display_port import DocumentDisplayPort
from .feedback_port import FeedbackStrategy, VectorLookup
from .interaction_port import UserInteractionPort
from .ranker_port import RankerPort

__all__ = [
    "CorpusLookupPort",
    "DocumentDisplayPort",
    "FeedbackStrategy",
    "RankerPort",
    "UserInteractionPort",
    "VectorLookup",
]

"""rated-ir: vector-space document retrieval with graded relevance feedback."""

__version__ = "0.1.0"

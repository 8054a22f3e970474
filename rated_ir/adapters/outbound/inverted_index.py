"""In-memory inverted index with TF-IDF weighting and cosine ranking.

Implements both the ranker and the corpus lookup ports: documents are
indexed once from a directory, retrieval scores every document sharing a
term with the query, and document vectors are recomputed from disk on
demand.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path

from ...core.domain import DocumentRef, DocumentType, HashMapVector, Retrieval
from ...core.domain.exceptions import EmptyCorpusError, EmptyQueryError, RetrievalError
from ...core.domain.utils import term_counts
from ...core.ports import CorpusLookupPort, RankerPort
from .document_loader import load_text, load_vector

logger = logging.getLogger(__name__)


@dataclass
class TokenInfo:
    """Index entry for one term.

    Attributes:
        idf: Inverse document frequency, log(N / df).
        postings: Raw count of the term in each document containing it.
    """

    idf: float
    postings: dict[DocumentRef, float]


class InvertedIndex(RankerPort, CorpusLookupPort):
    """Inverted index over a directory of text or HTML documents."""

    def __init__(self, doc_type: DocumentType = DocumentType.TEXT, stem: bool = False) -> None:
        self.doc_type = doc_type
        self.stem = stem
        self.token_index: dict[str, TokenInfo] = {}
        self.doc_lengths: dict[DocumentRef, float] = {}
        self._finalized = False

    @classmethod
    def from_directory(
        cls,
        directory: Path,
        doc_type: DocumentType = DocumentType.TEXT,
        stem: bool = False,
    ) -> InvertedIndex:
        """Index every non-hidden file below ``directory``.

        Raises:
            EmptyCorpusError: If no file yields any indexable term.
        """
        index = cls(doc_type, stem)
        paths = sorted(
            p for p in Path(directory).rglob("*")
            if p.is_file() and not any(part.startswith(".") for part in p.relative_to(directory).parts)
        )
        for path in paths:
            index.add_document(DocumentRef(path, doc_type, stem))
        index.finalize()
        if not index.doc_lengths:
            raise EmptyCorpusError(
                f"No indexable documents in {directory}", context={"directory": str(directory)}
            )
        logger.info(f"Indexed {len(index.doc_lengths)} documents, {len(index.token_index)} terms")
        return index

    def add_document(self, doc_ref: DocumentRef, vector: HashMapVector | None = None) -> None:
        """Add the postings of one document. Call ``finalize`` afterwards."""
        if vector is None:
            vector = load_vector(doc_ref)
        if not len(vector):
            logger.debug(f"Skipping {doc_ref.name}: no indexable terms")
            return
        for term, count in vector.items():
            info = self.token_index.setdefault(term, TokenInfo(idf=0.0, postings={}))
            info.postings[doc_ref] = count
        self.doc_lengths[doc_ref] = 0.0
        self._finalized = False

    def finalize(self) -> None:
        """Compute IDF weights and document vector lengths."""
        total = len(self.doc_lengths)
        squares = dict.fromkeys(self.doc_lengths, 0.0)
        for info in self.token_index.values():
            info.idf = math.log(total / len(info.postings)) if total else 0.0
            for doc_ref, count in info.postings.items():
                squares[doc_ref] += (info.idf * count) ** 2
        self.doc_lengths = {doc_ref: math.sqrt(value) for doc_ref, value in squares.items()}
        self._finalized = True

    def query_vector(self, text: str) -> HashMapVector:
        """Parse query text into a term-frequency vector.

        Raises:
            EmptyQueryError: If the text has no indexable terms.
        """
        vector = term_counts(text, self.stem)
        if not len(vector):
            raise EmptyQueryError("Query has no indexable terms", context={"query": text})
        return vector

    def retrieve(self, query: HashMapVector) -> list[Retrieval]:
        """Rank indexed documents by cosine similarity to ``query``.

        Args:
            query: Raw or revised query weights; negative weights are allowed.

        Returns:
            Retrievals with a computable score, best first, ties broken by path.

        Raises:
            RetrievalError: If documents were added since the last ``finalize``.
        """
        if not self._finalized:
            raise RetrievalError(
                "Index has documents without IDF weights; call finalize() first",
                context={"documents": len(self.doc_lengths)},
            )
        scores: dict[DocumentRef, float] = {}
        query_length_sq = 0.0
        for term, count in query.items():
            info = self.token_index.get(term)
            if info is None:
                continue
            weight = info.idf * count
            query_length_sq += weight * weight
            for doc_ref, doc_count in info.postings.items():
                scores[doc_ref] = scores.get(doc_ref, 0.0) + weight * info.idf * doc_count

        query_length = math.sqrt(query_length_sq)
        retrievals = []
        for doc_ref, score in scores.items():
            doc_length = self.doc_lengths.get(doc_ref, 0.0)
            if doc_length == 0 or query_length == 0:
                continue
            retrievals.append(Retrieval(doc_ref, score / (doc_length * query_length)))

        retrievals.sort(key=lambda r: (-r.score, str(r.doc_ref.path)))
        logger.debug(f"Retrieved {len(retrievals)} documents")
        return retrievals

    def vector_of(self, doc_ref: DocumentRef) -> HashMapVector:
        return load_vector(doc_ref)

    def text_of(self, doc_ref: DocumentRef) -> str:
        return load_text(doc_ref.path, doc_ref.doc_type)

    @property
    def document_count(self) -> int:
        return len(self.doc_lengths)

    @property
    def vocabulary_size(self) -> int:
        return len(self.token_index)

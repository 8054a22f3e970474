"""
Pytest configuration and shared fixtures.
"""

from collections.abc import Sequence
from pathlib import Path

import pytest

from rated_ir.core.domain import DocumentRef, HashMapVector, Retrieval
from rated_ir.core.ports import (
    CorpusLookupPort,
    DocumentDisplayPort,
    RankerPort,
    UserInteractionPort,
)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "cli: Tests driving the typer application")


class ScriptedInteraction(UserInteractionPort):
    """Replays canned responses; raises EOFError once the script runs out."""

    def __init__(self, responses: Sequence[str | BaseException] = ()):
        self.responses = list(responses)
        self.prompts: list[str] = []
        self.messages: list[str] = []
        self.pages: list[tuple[int, list[Retrieval]]] = []

    def ask(self, message: str) -> str:
        self.prompts.append(message)
        if not self.responses:
            raise EOFError
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response

    def say(self, message: str) -> None:
        self.messages.append(message)

    def show_retrievals(self, retrievals: Sequence[Retrieval], start: int) -> None:
        self.pages.append((start, list(retrievals)))

    def shown_numbers(self) -> list[list[int]]:
        return [list(range(start, start + len(page))) for start, page in self.pages]


class DictCorpus(CorpusLookupPort):
    """Serves fresh copies of fixed document vectors and counts lookups."""

    def __init__(self, vectors: dict[DocumentRef, HashMapVector]):
        self.vectors = vectors
        self.lookups: list[DocumentRef] = []

    def vector_of(self, doc_ref: DocumentRef) -> HashMapVector:
        self.lookups.append(doc_ref)
        return self.vectors[doc_ref].copy()

    def text_of(self, doc_ref: DocumentRef) -> str:
        return " ".join(term for term, _ in self.vectors[doc_ref].items())


class StaticRanker(RankerPort):
    """Returns a fixed ranking and remembers every query it was given."""

    def __init__(self, retrievals: Sequence[Retrieval] = ()):
        self.retrievals = list(retrievals)
        self.queries: list[HashMapVector] = []

    def retrieve(self, query: HashMapVector) -> list[Retrieval]:
        self.queries.append(query.copy())
        return list(self.retrievals)


class RecordingDisplay(DocumentDisplayPort):
    def __init__(self):
        self.shown: list[DocumentRef] = []

    def show(self, doc_ref: DocumentRef) -> None:
        self.shown.append(doc_ref)


def make_ref(name: str) -> DocumentRef:
    return DocumentRef(Path("/corpus") / name)


def make_retrievals(count: int, prefix: str = "doc") -> list[Retrieval]:
    return [
        Retrieval(make_ref(f"{prefix}{i:02d}.txt"), 1.0 - i / (count + 1))
        for i in range(1, count + 1)
    ]


@pytest.fixture
def query_vector():
    """Parsed vector for the query "machine learning"."""
    return HashMapVector({"machine": 1.0, "learning": 1.0})


@pytest.fixture
def five_docs():
    """Documents A-E with distinct term vectors, ranked A first."""
    refs = {name: make_ref(f"{name}.txt") for name in "ABCDE"}
    vectors = {
        refs["A"]: HashMapVector({"machine": 2.0, "learning": 4.0, "neural": 2.0}),
        refs["B"]: HashMapVector({"machine": 1.0, "vision": 1.0}),
        refs["C"]: HashMapVector({"learning": 3.0, "curve": 1.0}),
        refs["D"]: HashMapVector({"machine": 5.0, "washing": 10.0}),
        refs["E"]: HashMapVector({"learning": 1.0}),
    }
    retrievals = [Retrieval(refs[name], score) for name, score in zip("ABCDE", [0.9, 0.7, 0.5, 0.3, 0.1])]
    return refs, vectors, retrievals


@pytest.fixture
def text_corpus(tmp_path: Path) -> Path:
    """A small directory of plain-text and HTML documents."""
    corpus = tmp_path / "corpus"
    corpus.mkdir()
    (corpus / "ml.txt").write_text(
        "Machine learning builds models that learn from data. Learning rates matter.",
        encoding="utf-8",
    )
    (corpus / "washing.txt").write_text(
        "The washing machine cleans clothes. A machine with a drum.", encoding="utf-8"
    )
    (corpus / "cooking.txt").write_text("Cooking pasta requires boiling water.", encoding="utf-8")
    (corpus / "empty.txt").write_text("the and of", encoding="utf-8")
    (corpus / ".hidden.txt").write_text("machine learning secret", encoding="utf-8")
    return corpus

"""Document Display Port Interface."""

from abc import ABC, abstractmethod

from ..domain import DocumentRef


class DocumentDisplayPort(ABC):
    """Abstract interface for showing a document to the user."""

    @abstractmethod
    def show(self, doc_ref: DocumentRef) -> None: ...

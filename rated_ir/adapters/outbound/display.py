"""Document display adapters."""

import logging

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from ...core.domain import DocumentRef
from ...core.ports import CorpusLookupPort, DocumentDisplayPort

logger = logging.getLogger(__name__)


class ConsoleDisplay(DocumentDisplayPort):
    """Prints the document text in a panel, truncated to ``max_chars``.

    Document text is rendered as plain ``Text`` so square brackets in a
    file are shown as written instead of being read as console markup.
    """

    def __init__(self, corpus: CorpusLookupPort, console: Console, max_chars: int = 2000) -> None:
        self.corpus = corpus
        self.console = console
        self.max_chars = max_chars

    def show(self, doc_ref: DocumentRef) -> None:
        text = self.corpus.text_of(doc_ref)
        if len(text) > self.max_chars:
            text = text[: self.max_chars].rstrip() + " ..."
        self.console.print(
            Panel(Text(text), title=f"[bold]{escape(doc_ref.name)}[/]", border_style="blue")
        )


class BrowserDisplay(DocumentDisplayPort):
    """Opens the document file with the system's default application."""

    def show(self, doc_ref: DocumentRef) -> None:
        status = typer.launch(str(doc_ref.path))
        if status != 0:
            logger.warning(f"Viewer exited with status {status} for {doc_ref.path}")

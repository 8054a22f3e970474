"""Rich console implementation of the user interaction port."""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from ....core.domain import Retrieval
from ....core.ports import UserInteractionPort


class RichInteraction(UserInteractionPort):
    """Prompts on a rich console and renders result pages as tables.

    Messages from the session embed document names and ledger summaries,
    so they are printed verbatim; only the styling added here is markup.
    """

    def __init__(self, console: Console) -> None:
        self.console = console

    def ask(self, message: str) -> str:
        return Prompt.ask(
            f"\n[bold cyan]{escape(message)}[/]",
            console=self.console,
            default="",
            show_default=False,
        )

    def say(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False)

    def show_retrievals(self, retrievals: Sequence[Retrieval], start: int) -> None:
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Document")
        table.add_column("Score", justify="right")
        for number, retrieval in enumerate(retrievals, start):
            table.add_row(str(number), Text(retrieval.doc_ref.name), f"{retrieval.score:.5f}")
        self.console.print(table)

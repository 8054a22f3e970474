"""CLI interface for rated-ir."""

import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.json import JSON
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from ....composition.container import get_display, get_index, get_strategy
from ....config import settings, setup_logging
from ....core.domain import DocumentType
from ....core.domain.exceptions import EmptyQueryError
from ....core.services import run_session
from ...common.exception_handler import format_exception_json, get_exit_code, log_exception
from .interaction import RichInteraction

app = typer.Typer(
    name="rated-ir",
    help="Vector-space document retrieval with graded relevance feedback",
    add_completion=False,
)

logger = logging.getLogger(__name__)

console = Console(legacy_windows=False)

# DEBUG=true prints the whole error payload, trace included
DEBUG_MODE = os.getenv("DEBUG", "false").lower() == "true"

QUIT_WORDS = ("quit", "exit", "q")


def handle_cli_error(exc: Exception) -> None:
    """Report ``exc`` to the user by error code, or as the full payload in debug mode."""
    log_exception(exc, log=logger, level=logging.DEBUG)
    payload = format_exception_json(exc, include_trace=DEBUG_MODE)

    if DEBUG_MODE:
        console.print(Panel(JSON.from_data(payload, default=str), title="[bold red]Error[/]", border_style="red"))
        return

    error = payload["error"]
    where = payload["location"]
    console.print(f"\n[red]Error \\[{error['code']}]:[/] {escape(error['message'])}")
    console.print(f"[dim]{error['type']} at {where['file']}:{where['line']} in {where['method']}[/]")
    console.print("[dim]Run with DEBUG=true for the full error payload.[/]")


def _configure_logging() -> None:
    setup_logging(settings.log_level, log_file=settings.log_file, json_format=settings.log_json)


def _load_index(directory: Path, html: bool, stem: bool):
    doc_type = DocumentType.HTML if html else DocumentType.TEXT
    try:
        with console.status("[bold green]Indexing documents...[/]"):
            return get_index(directory.resolve(), doc_type, stem)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(get_exit_code(exc))


@app.command()
def search(
    directory: Path = typer.Argument(
        ..., exists=True, file_okay=False, dir_okay=True, help="Directory of documents to index"
    ),
    html: bool = typer.Option(False, "--html", help="Strip HTML tags from documents"),
    stem: bool = typer.Option(False, "--stem", help="Stem tokens with a Porter-style stemmer"),
    feedback: bool = typer.Option(False, "--feedback", help="Collect relevance feedback"),
    binary: bool = typer.Option(False, "--binary", help="Ask yes/no instead of graded ratings"),
    browser: bool = typer.Option(False, "--browser", help="Open documents in the system viewer"),
) -> None:
    """Index a directory and interactively run queries against it."""
    _configure_logging()
    index = _load_index(directory, html, stem)
    console.print(
        f"[green]Indexed {index.document_count} documents "
        f"({index.vocabulary_size} terms).[/]"
    )

    try:
        strategy = get_strategy("binary" if binary else None)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(get_exit_code(exc))

    interaction = RichInteraction(console)
    display = get_display(index, console, browser)
    session_config = settings.session_config()

    while True:
        try:
            text = Prompt.ask(
                "\n[bold cyan]Enter query[/]", console=console, default="", show_default=False
            )
        except (KeyboardInterrupt, EOFError):
            console.print("\n[dim]Goodbye.[/]")
            break

        if not text.strip() or text.strip().lower() in QUIT_WORDS:
            console.print("[dim]Goodbye.[/]")
            break

        try:
            query = index.query_vector(text)
        except EmptyQueryError as exc:
            console.print(f"[yellow]{exc.message}[/]")
            continue

        try:
            run_session(
                query,
                index.retrieve(query),
                ranker=index,
                corpus=index,
                display=display,
                interaction=interaction,
                feedback_enabled=feedback,
                strategy=strategy,
                config=session_config,
            )
        except Exception as exc:
            handle_cli_error(exc)


@app.command()
def index(
    directory: Path = typer.Argument(
        ..., exists=True, file_okay=False, dir_okay=True, help="Directory of documents to index"
    ),
    html: bool = typer.Option(False, "--html", help="Strip HTML tags from documents"),
    stem: bool = typer.Option(False, "--stem", help="Stem tokens with a Porter-style stemmer"),
) -> None:
    """Build the index for a directory and show its statistics."""
    _configure_logging()
    inverted_index = _load_index(directory, html, stem)

    table = Table(title="Index Statistics")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Documents", str(inverted_index.document_count))
    table.add_row("Vocabulary", str(inverted_index.vocabulary_size))
    table.add_row("Parsing", "html" if html else "text")
    table.add_row("Stemming", "on" if stem else "off")
    console.print(table)


def main() -> None:
    app()

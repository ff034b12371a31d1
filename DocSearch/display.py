"""
Rich rendering of search results.
"""
from typing import List

from rich import box
from rich.console import Console
from rich.table import Table

from .preprocessing.document import Document, DocumentStatus

STATUS_STYLES = {
    DocumentStatus.ACTUAL: "green",
    DocumentStatus.IRRELEVANT: "yellow",
    DocumentStatus.BANNED: "red",
    DocumentStatus.REMOVED: "dim",
}


def documents_table(documents: List[Document], title: str = "Search results") -> Table:
    """Build a table with one row per result, in ranking order."""
    table = Table(title=title, box=box.ROUNDED, show_lines=False)
    table.add_column("#", style="dim", width=4)
    table.add_column("Document", style="cyan bold", justify="right")
    table.add_column("Relevance", justify="right")
    table.add_column("Rating", justify="right")
    table.add_column("Status")

    for i, doc in enumerate(documents):
        style = STATUS_STYLES.get(doc.status, "")
        table.add_row(
            str(i + 1),
            str(doc.id),
            f"{doc.relevance:.6f}",
            str(doc.rating),
            f"[{style}]{doc.status.name}[/{style}]" if style else doc.status.name
        )
    return table


def print_documents(documents: List[Document], console: Console = None, title: str = "Search results"):
    console = console or Console()
    if not documents:
        console.print("[yellow]No matching documents found.[/yellow]")
        return
    console.print(documents_table(documents, title=title))


def print_match_result(words: List[str], status: DocumentStatus, console: Console = None):
    console = console or Console()
    matched = ", ".join(words) if words else "[dim]no words matched[/dim]"
    console.print(f"Matched: [cyan]{matched}[/cyan] ({status})")

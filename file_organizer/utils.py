"""
Console helpers for the File Organizer.

Includes:
- Styled message helpers
- Directory listing and run summary tables
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .categories import classify
from .scanner import Entry

# Global console instance
console = Console()


def print_header(title: str, subtitle: str = ""):
    """Print a styled header."""
    console.print(Panel(f"[bold blue]{title}[/bold blue]\n[italic]{subtitle}[/italic]", expand=False))


def print_error(msg: str):
    console.print(f"[bold red]ERROR:[/bold red] {msg}", highlight=False, soft_wrap=True)


def print_warning(msg: str):
    console.print(f"[bold yellow]WARNING:[/bold yellow] {msg}", highlight=False, soft_wrap=True)


def print_success(msg: str):
    console.print(f"[bold green]SUCCESS:[/bold green] {msg}")


def print_listing_table(entries: list[Entry], limit: int = 50):
    """
    Print the top-level contents of a directory with the folder each file
    would be sorted into.

    Args:
        entries: Entries as returned by ``list_directory``.
        limit: Maximum number of rows before the rest is summarized.
    """
    table = Table(title="Directory Contents")
    table.add_column("Name", style="cyan")
    table.add_column("Kind", style="magenta")
    table.add_column("Category", style="green")

    for entry in entries[:limit]:
        if entry.is_dir:
            table.add_row(escape(entry.path.name), "dir", "[dim]-[/dim]")
        elif entry.is_file:
            category = classify(entry.path)
            table.add_row(escape(entry.path.name), "file", category or "[dim]skip[/dim]")
        else:
            table.add_row(escape(entry.path.name), "other", "[dim]skip[/dim]")

    if len(entries) > limit:
        table.add_row(f"[italic]... and {len(entries) - limit} more[/italic]", "", "")

    console.print(table)


def print_summary_table(files_moved: int, dirs_created: int):
    """Print the run counters."""
    table = Table(title="Run Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="magenta")

    table.add_row("Files moved", str(files_moved))
    table.add_row("Directories created", str(dirs_created))

    console.print(table)

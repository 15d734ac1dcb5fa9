"""Shared console helpers for webstarter.

All user-facing output goes through the module-level Rich consoles defined
here: ``console`` for progress on stdout and ``err_console`` for errors on
stderr.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(0.42)  -> "0.4s"
        format_duration(65.2)  -> "1m 5s"
    """
    if seconds < 0:
        return "0.0s"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_stage_header(title: str) -> None:
    """Print a dim rule announcing the next pipeline stage."""
    console.print(Rule(f"[bold cyan]{escape(title)}[/bold cyan]", style="cyan"))


def print_created(kind: str, path: str | Path) -> None:
    """Report a created file or directory, e.g. ``Creating file demo/style.css``."""
    console.print(f"Creating {kind} [bold yellow]{escape(str(path))}[/bold yellow]")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_warning(message: str, out: Console | None = None) -> None:
    """Print a yellow warning message on *out* (stdout console by default)."""
    (out or console).print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_error(message: str) -> None:
    """Print a red error message on stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")

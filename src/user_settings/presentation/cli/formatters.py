"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, syntax) in a module that knows
nothing about storage or serialization.
"""

from __future__ import annotations

from datetime import datetime

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

console = Console()


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {message}[/]")


def info_message(message: str) -> None:
    console.print(f"[dim]{message}[/]")


def xml_panel(raw_xml: str, title: str) -> None:
    """Render XML inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_xml, "xml", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


def entries_table(rows: list[tuple[str, int, float]], title: str) -> None:
    """Print stored entries as ``(name, size in bytes, mtime)`` rows."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Entry", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Modified", style="green")

    for name, size, mtime in rows:
        modified = datetime.fromtimestamp(mtime).strftime("%Y-%m-%d %H:%M:%S")
        table.add_row(name, f"{size} B", modified)

    console.print(table)

"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success / yes
SYM_ERR = "✗"  # Error / no
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Guidance Toolkit[/bold] v{version}")
    console.print("─" * 44)


def print_decision(question: str, answer: bool, details: list[str] | None = None) -> None:
    """Print a yes/no decision.

    Args:
        question: What was decided, e.g. "Announce name change"
        answer: The decision
        details: Optional secondary lines (rule names, inputs)
    """
    symbol, style, word = (SYM_OK, "green", "yes") if answer else (SYM_ERR, "yellow", "no")
    line = Text(f"{SYM_STEP} ")
    line.append(question)
    line.append(f"  {symbol} {word}", style=f"bold {style}")
    console.print(line)
    for detail in details or []:
        console.print(Text(f"  {SYM_DOT} {detail}"))


def print_values(title: str, rows: list[tuple[str, str]]) -> None:
    """Print labelled values as a two-column table.

    Args:
        title: Table title
        rows: (label, value) pairs
    """
    table = Table(title=title, show_header=False, title_justify="left")
    table.add_column("field", style="bold")
    table.add_column("value")
    for label, value in rows:
        table.add_row(label, Text(value))
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(Text.assemble(("\n" + SYM_ERR + " Error: ", "bold red"), message))
    if details:
        console.print(Text(f"  {details}"))

"""Themed Rich consoles, the path table and message helpers.

Results and info messages go to ``console`` (stdout). Warnings and errors
go to ``err_console`` (stderr).
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pathsift.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Return "truecolor" for interactive terminals, None to let Rich auto-detect."""
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Both consoles share the cached theme
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_path_table(title: str, *, with_rank: bool = False) -> Table:
    """Create a pre-configured table for listing paths.

    Args:
        title: Table title.
        with_rank: Add a column for the glob priority index.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("#", style="muted", justify="right")
    if with_rank:
        table.add_column("Rank", style="rank", justify="right")
    table.add_column("Path", no_wrap=True)
    return table


def format_rank(rank: int, no_match: int) -> str:
    """Render a glob priority index, "-" when no glob matched."""
    return "-" if rank == no_match else str(rank)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")

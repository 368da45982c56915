"""Shared Rich display functions for listing results.

Used by the files and dirs commands for table output, JSON output and
JSON export.
"""

import json
from collections.abc import Sequence
from pathlib import Path

import typer
from rich.markup import escape

from pathsift.fs.path import FsPath
from pathsift.listing.sort import NO_MATCH_RANK
from pathsift.utils.formatting import (
    console,
    create_path_table,
    format_rank,
    print_error,
    print_info,
)


def _path_records(paths: Sequence[FsPath], ranks: Sequence[int] | None) -> list[dict[str, object]]:
    """Build JSON-ready records; ``rank`` is None for paths no glob matched."""
    if ranks is None:
        return [{"path": p.as_str()} for p in paths]
    return [
        {"path": p.as_str(), "rank": None if rank == NO_MATCH_RANK else rank}
        for p, rank in zip(paths, ranks, strict=True)
    ]


def print_path_table(
    paths: Sequence[FsPath],
    title: str,
    *,
    is_dir: bool = False,
    ranks: Sequence[int] | None = None,
) -> None:
    """Display paths as a Rich table, with a rank column when ranks are given."""
    table = create_path_table(title, with_rank=ranks is not None)
    style = "path_dir" if is_dir else "path_file"

    for index, path in enumerate(paths, start=1):
        row = [str(index)]
        if ranks is not None:
            row.append(format_rank(ranks[index - 1], NO_MATCH_RANK))
        row.append(f"[{style}]{escape(path.as_str())}[/]")
        table.add_row(*row)

    console.print(table)


def print_path_json(paths: Sequence[FsPath], ranks: Sequence[int] | None = None) -> None:
    """Display paths as JSON."""
    console.print_json(json.dumps(_path_records(paths, ranks)))


def export_paths(
    paths: Sequence[FsPath], export_path: Path, ranks: Sequence[int] | None = None
) -> None:
    """Export listing results to a JSON file."""
    export_path = export_path.resolve()
    if export_path.is_dir():
        print_error(f"Export path is a directory: {export_path}")
        raise typer.Exit(code=1)

    try:
        export_path.parent.mkdir(parents=True, exist_ok=True)
        export_path.write_text(json.dumps(_path_records(paths, ranks), indent=2))
        print_info(f"Results exported to {export_path}")
    except OSError as e:
        print_error(f"Failed to export: {e}")
        raise typer.Exit(code=1) from e


def print_summary(noun: str, shown: int, total: int, limit: int | None) -> None:
    """Print the trailing result count line."""
    console.print(f"\n[dim]Found {total} {noun}[/dim]")
    if limit and shown < total:
        console.print(f"[dim](showing {shown} of {total}, limited to {limit})[/dim]")

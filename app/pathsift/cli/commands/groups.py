"""Groups command implementation.

Shows how include globs are grouped into walk roots, which is what decides
how many walks a listing performs and how deep each one goes.
"""

import json
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from pathsift.cli.types import OutputFormat, get_settings, resolve_output_format
from pathsift.fs.path import FsPath
from pathsift.glob.groups import GlobGroup, process_globs
from pathsift.listing.options import ListOptions, resolve_list_options
from pathsift.utils.formatting import console


def show_groups_command(
    directory: Annotated[
        str,
        typer.Argument(help="Directory the globs are relative to."),
    ],
    globs: Annotated[
        list[str] | None,
        typer.Option(
            "--glob",
            "-g",
            help="Include pattern (repeatable). '!' patterns become excludes.",
        ),
    ] = None,
    depth: Annotated[
        int | None,
        typer.Option(
            "--depth",
            "-d",
            min=0,
            help="Explicit walk depth to apply to every group.",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """Show the walk groups computed for DIRECTORY and the given globs."""
    settings = get_settings()
    includes, options = resolve_list_options(globs or None, ListOptions(depth=depth))
    groups = process_globs(FsPath.from_os_path(directory), includes)

    if resolve_output_format(output_format, settings) == OutputFormat.JSON:
        _print_json(groups, options)
        return

    _print_table(groups, options)
    if options.exclude_globs:
        console.print(f"\n[dim]Negated patterns (excluded): {escape(', '.join(options.exclude_globs))}[/dim]")


def _print_table(groups: list[GlobGroup], options: ListOptions) -> None:
    """Display groups as a Rich table."""
    table = Table(
        title="Glob Groups",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Base", style="path_dir", no_wrap=True)
    table.add_column("Patterns", style="pattern")
    table.add_column("Prefixes", style="muted")
    table.add_column("Depth", justify="right")

    for group in groups:
        table.add_row(
            escape(group.base.as_str()),
            escape("\n".join(group.patterns)),
            escape("\n".join(group.prefixes)) or "-",
            str(group.depth(options.depth)),
        )

    console.print(table)


def _print_json(groups: list[GlobGroup], options: ListOptions) -> None:
    """Display groups as JSON."""
    data = [
        {
            "base": group.base.as_str(),
            "patterns": list(group.patterns),
            "prefixes": list(group.prefixes),
            "depth": group.depth(options.depth),
        }
        for group in groups
    ]
    console.print_json(json.dumps(data))

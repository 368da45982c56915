"""Dirs command implementation.

Lists directories below a directory, filtered by include globs.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from pathsift.cli.display import export_paths, print_path_json, print_path_table, print_summary
from pathsift.cli.types import (
    OutputFormat,
    build_list_options,
    collect_paths,
    get_settings,
    require_directory,
    resolve_output_format,
)
from pathsift.listing.api import iter_dirs


def list_dirs_command(
    ctx: typer.Context,
    directory: Annotated[
        str,
        typer.Argument(help="Directory to list."),
    ],
    globs: Annotated[
        list[str] | None,
        typer.Option(
            "--glob",
            "-g",
            help="Include pattern (repeatable). Prefix with '!' to exclude.",
        ),
    ] = None,
    excludes: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude",
            "-x",
            help="Exclude pattern (repeatable). Replaces the configured excludes.",
        ),
    ] = None,
    relative: Annotated[
        bool | None,
        typer.Option(
            "--relative/--no-relative",
            help="Match excludes relative to DIRECTORY.",
        ),
    ] = None,
    depth: Annotated[
        int | None,
        typer.Option(
            "--depth",
            "-d",
            min=0,
            help="Maximum walk depth (default: derived from the globs).",
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
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-l",
            min=1,
            help="Limit number of results.",
        ),
    ] = None,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export results to JSON file.",
        ),
    ] = None,
) -> None:
    """List directories under DIRECTORY matching the given globs."""
    require_directory(directory)
    settings = get_settings()
    options = build_list_options(settings, excludes, relative, depth)

    paths = collect_paths(iter_dirs, directory, globs, options)
    display_paths = paths[:limit] if limit else paths

    if export_path is not None:
        export_paths(paths, export_path)

    if resolve_output_format(output_format, settings) == OutputFormat.JSON:
        print_path_json(display_paths)
        return

    print_path_table(display_paths, f"Directories in {escape(directory)}", is_dir=True)
    if not ctx.obj or not ctx.obj.get("quiet"):
        print_summary("directories", len(display_paths), len(paths), limit)

"""Files command implementation.

Lists files under a directory that match include globs, optionally sorted
by glob priority.
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
from pathsift.errors import SortByGlobsError
from pathsift.listing.api import iter_files
from pathsift.listing.options import split_negated_globs
from pathsift.listing.sort import rank_by_globs
from pathsift.utils.formatting import print_error


def list_files_command(
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
    sort: Annotated[
        bool,
        typer.Option(
            "--sort",
            "-s",
            help="Order results by the first matching --glob, then by path.",
        ),
    ] = False,
    end_weighted: Annotated[
        bool,
        typer.Option(
            "--end-weighted",
            help="With --sort, rank by the last matching --glob instead.",
        ),
    ] = False,
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
    """List files under DIRECTORY matching the given globs."""
    require_directory(directory)
    settings = get_settings()
    options = build_list_options(settings, excludes, relative, depth)

    paths = collect_paths(iter_files, directory, globs, options)

    ranks: list[int] | None = None
    if sort:
        sort_globs, _negated = split_negated_globs(globs or [])
        try:
            ranked = rank_by_globs(paths, sort_globs, end_weighted)
        except SortByGlobsError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
        ranks = [rank for rank, _ in ranked]
        paths = [p for _, p in ranked]

    display_paths = paths[:limit] if limit else paths
    display_ranks = ranks[: len(display_paths)] if ranks is not None else None

    if export_path is not None:
        export_paths(paths, export_path, ranks)

    if resolve_output_format(output_format, settings) == OutputFormat.JSON:
        print_path_json(display_paths, display_ranks)
        return

    print_path_table(display_paths, f"Files in {escape(directory)}", ranks=display_ranks)
    if not ctx.obj or not ctx.obj.get("quiet"):
        print_summary("files", len(display_paths), len(paths), limit)

"""Shared types and helpers for CLI commands.

Merges command-line flags with the user's config file and turns library
errors into error messages plus a non-zero exit.
"""

import os
from collections.abc import Callable, Iterable, Sequence
from enum import Enum

import typer

from pathsift.core.config import ConfigError, Settings, load_settings_or_default
from pathsift.errors import DirNotFoundError, PathsiftError
from pathsift.fs.path import FsPath
from pathsift.listing.options import ListOptions
from pathsift.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def get_settings() -> Settings:
    """Load the user's settings, exiting with code 1 if the file is invalid."""
    try:
        return load_settings_or_default()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def build_list_options(
    settings: Settings,
    excludes: Sequence[str] | None,
    relative: bool | None,
    depth: int | None,
) -> ListOptions:
    """Combine command-line flags with configured defaults.

    A flag left unset falls back to the settings value. Passing any
    ``--exclude`` replaces the configured exclude list entirely.
    """
    options = settings.to_list_options()
    if excludes:
        options = options.with_exclude_globs(excludes)
    if relative is not None:
        options = options.with_relative_glob(relative)
    if depth is not None:
        options = options.with_depth(depth)
    return options


def resolve_output_format(output_format: OutputFormat | None, settings: Settings) -> OutputFormat:
    """Use the flag when given, otherwise the configured format."""
    if output_format is not None:
        return output_format
    return OutputFormat(settings.output_format)


def require_directory(directory: str) -> None:
    """Exit with code 1 unless ``directory`` is an existing directory."""
    if not os.path.isdir(directory):
        print_error(str(DirNotFoundError(directory)))
        raise typer.Exit(code=1)


def collect_paths(
    iter_fn: Callable[..., Iterable[FsPath]],
    directory: str,
    globs: Sequence[str] | None,
    options: ListOptions,
) -> list[FsPath]:
    """Run a listing iterator to completion, exiting with code 1 on bad patterns."""
    try:
        return list(iter_fn(directory, globs or None, options))
    except PathsiftError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

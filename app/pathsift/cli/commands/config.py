"""Config commands.

Show the effective listing settings and create a starter config file.
"""

from typing import Annotated

import typer
from rich.table import Table

from pathsift.cli.types import get_settings
from pathsift.core.config import ConfigError, Settings, save_settings
from pathsift.core.paths import get_config_path
from pathsift.utils.formatting import console, print_error, print_info, print_success, print_warning

app = typer.Typer(
    help="Show and initialize the pathsift configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective listing settings."""
    config_path = get_config_path()
    settings = get_settings()

    if config_path.exists():
        print_info(f"Config file: {config_path}")
    else:
        print_info(f"No config file at {config_path}; showing defaults.")

    table = Table(show_header=True, header_style="bold_header", border_style="border")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("exclude_globs", "\n".join(settings.exclude_globs) or "-")
    table.add_row("relative_glob", str(settings.relative_glob).lower())
    table.add_row("depth", "auto" if settings.depth is None else str(settings.depth))
    table.add_row("output_format", settings.output_format)
    console.print(table)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file holding the default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_warning(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_settings(Settings())
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")

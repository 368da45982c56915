"""pathsift command-line entry point.

Builds the Typer app, its global flags and the command table.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from pathsift import __version__
from pathsift.cli.commands import config, dirs, files, groups
from pathsift.utils.formatting import err_console

app = typer.Typer(
    name="pathsift",
    help="Glob-driven file and directory listing.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pathsift version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Send pathsift debug logs to stderr through Rich when verbose."""
    if not verbose:
        return
    package_logger = logging.getLogger("pathsift")
    if any(isinstance(h, RichHandler) for h in package_logger.handlers):
        return
    handler = RichHandler(console=err_console, show_path=False)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """pathsift - list files and directories by glob, fast.

    Walks only the directories that can contain a match and can order the
    results by glob priority.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    _configure_logging(verbose)


# Register commands
app.command("files")(files.list_files_command)
app.command("dirs")(dirs.list_dirs_command)
app.command("groups")(groups.show_groups_command)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()

"""CLI package for pathsift.

This package contains the Typer application and all subcommands.
"""

from pathsift.cli.main import app

__all__ = ["app"]

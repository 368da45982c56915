"""CLI commands for pathsift.

This package contains all subcommand implementations.
"""

from pathsift.cli.commands import config, dirs, files, groups

__all__ = ["config", "dirs", "files", "groups"]

"""Locations of pathsift's user files.

Everything lives in one XDG config directory, ``$XDG_CONFIG_HOME/pathsift``
or ``~/.config/pathsift`` when the variable is unset or empty.
"""

import os
from pathlib import Path

APP_NAME = "pathsift"

CONFIG_FILE_NAME = "config.toml"
THEME_FILE_NAME = "theme.toml"


def _get_xdg_dir(env_var: str, fallback: str) -> Path:
    root = os.environ.get(env_var)
    base = Path(root) if root else Path.home() / fallback
    return base / APP_NAME


def get_config_dir() -> Path:
    """Directory holding config.toml and theme.toml."""
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    return get_config_dir() / CONFIG_FILE_NAME


def get_user_theme_path() -> Path:
    return get_config_dir() / THEME_FILE_NAME


def ensure_config_dir() -> Path:
    """Create the config directory when missing and return it.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    path = get_config_dir()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create config directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create config directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path

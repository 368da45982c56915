"""Color theme for pathsift output.

The bundled ``data/theme.toml`` supplies every color. A user file at
``~/.config/pathsift/theme.toml`` may override any subset of keys. If the
merged colors do not validate, the built-in defaults are used instead.
"""

import functools
import logging
import tomllib
from importlib import resources
from pathlib import Path
from typing import cast

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from rich.theme import Theme

from pathsift.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _check_hex(field: str, value: object) -> str:
    if not isinstance(value, str):
        msg = f"{field}: color must be a string"
        raise ValueError(msg)
    color = value.strip()
    if not color.startswith("#"):
        msg = f"{field}: color must start with '#'"
        raise ValueError(msg)
    digits = color[1:]
    if len(digits) not in (3, 6):
        msg = f"{field}: color must be #RGB or #RRGGBB format"
        raise ValueError(msg)
    if not set(digits) <= _HEX_DIGITS:
        msg = f"{field}: invalid hex color '{color}'"
        raise ValueError(msg)
    return color


class ThemeColors(BaseModel):
    """Hex colors for each role in pathsift's output."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    # Listing output
    path_file: str = "#e8f1f2"
    path_dir: str = "#5fafd7"
    pattern: str = "#faf870"
    rank: str = "#d44ebc"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: ValidationInfo) -> str:
        return _check_hex(info.field_name or "color", v)

    def styles(self) -> dict[str, str]:
        """Rich style definitions keyed by style name."""
        styles = self.model_dump()
        styles["error"] = f"bold {self.error}"
        styles["path_dir"] = f"bold {self.path_dir}"
        styles["bold_header"] = f"bold {self.header}"
        styles["dim"] = self.muted
        return styles


def get_bundled_theme_path() -> Path:
    """Path of the theme shipped inside the package."""
    return resources.files("pathsift.data").joinpath("theme.toml")  # type: ignore[return-value]


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Read the string values of a ``[colors]`` table.

    Returns None when the file is missing, unreadable or malformed.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return None

    table: object = data.get("colors", {})
    if not isinstance(table, dict):
        logger.warning("Ignoring theme file %s: 'colors' is not a table", path)
        return None
    return {
        key: value
        for key, value in cast(dict[str, object], table).items()
        if isinstance(value, str)
    }


def load_theme() -> ThemeColors:
    """Merge the bundled colors with the user's overrides."""
    merged: dict[str, str] = {}
    for source in (Path(get_bundled_theme_path()), get_user_theme_path()):
        colors = _load_toml_colors(source)
        if colors is None:
            continue
        logger.debug("Loaded %d theme colors from %s", len(colors), source)
        merged.update(colors)

    try:
        return ThemeColors(**merged)
    except ValueError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build a Rich theme, loading the colors when none are given."""
    if colors is None:
        colors = load_theme()
    return Theme(colors.styles())


@functools.cache
def get_theme() -> Theme:
    """Rich theme shared by every console, built on first use."""
    return get_rich_theme()


def reload_theme() -> Theme:
    """Drop the cached theme and rebuild it from the theme files."""
    get_theme.cache_clear()
    return get_theme()

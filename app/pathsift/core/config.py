"""CLI settings stored in ~/.config/pathsift/config.toml.

The file holds a single ``[list]`` table:

    [list]
    exclude_globs = ["**/.git", "**/node_modules"]
    relative_glob = false
    depth = 3
    output_format = "table"

Every key is optional. The library API never reads this file; only the
CLI turns it into ListOptions.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pathsift.core.paths import CONFIG_FILE_NAME, ensure_config_dir, get_config_path
from pathsift.errors import PathsiftError
from pathsift.glob.matcher import DEFAULT_EXCLUDE_GLOBS
from pathsift.listing.options import ListOptions

logger = logging.getLogger(__name__)

OutputFormatName = Literal["table", "json"]

# Top-level table holding the listing settings
CONFIG_SECTION = "list"


class Settings(BaseModel):
    """Default listing options for the CLI.

    Attributes:
        exclude_globs: Patterns excluded when no ``--exclude`` is given.
        relative_glob: Match excludes relative to the listed directory.
        depth: Fixed walk depth; None lets the patterns decide.
        output_format: Default output format for listing commands.
    """

    model_config = ConfigDict(extra="forbid")

    exclude_globs: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDE_GLOBS),
        description="Exclude patterns applied by default",
    )
    relative_glob: Annotated[
        bool,
        Field(description="Match excludes against paths relative to the listed directory"),
    ] = False
    depth: Annotated[
        int | None,
        Field(ge=0, description="Walk depth (None = derived from patterns)"),
    ] = None
    output_format: Annotated[
        OutputFormatName,
        Field(description="Default output format"),
    ] = "table"

    def to_list_options(self) -> ListOptions:
        """Build the library options these settings describe."""
        return ListOptions(
            exclude_globs=tuple(self.exclude_globs),
            relative_glob=self.relative_glob,
            depth=self.depth,
        )


class ConfigError(PathsiftError):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid TOML."""


class ConfigValidationError(ConfigError):
    """Raised when the config file does not match the settings schema."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated Settings object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
        ConfigError: If the file cannot be read.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    section = data.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigValidationError(f"'{CONFIG_SECTION}' must be a table in {config_path}")

    try:
        settings = Settings.model_validate(section)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content: {e}") from e

    logger.debug("Loaded settings from %s", config_path)
    return settings


def load_settings_or_default(path: Path | None = None) -> Settings:
    """Load settings, falling back to defaults when no config file exists.

    Raises:
        ConfigError: If the file exists but is invalid.
    """
    try:
        return load_settings(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using default settings")
        return Settings()


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    try:
        if path is None:
            config_path = ensure_config_dir() / CONFIG_FILE_NAME
        else:
            config_path = path
            config_path.parent.mkdir(parents=True, exist_ok=True)
    except (RuntimeError, OSError) as e:
        raise ConfigError(f"Failed to write config: {e}") from e

    data = {CONFIG_SECTION: _settings_to_dict(settings)}

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _settings_to_dict(settings: Settings) -> dict[str, object]:
    """Convert Settings to a TOML-ready dict; TOML has no null so None is omitted."""
    return settings.model_dump(exclude_none=True)

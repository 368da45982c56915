"""Unit tests for XDG path management."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pathsift.core.paths import (
    APP_NAME,
    ensure_config_dir,
    get_config_dir,
    get_config_path,
    get_user_theme_path,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ, {}, clear=True):
            result = get_config_dir()
            expected = Path.home() / ".config" / APP_NAME

        assert result == expected

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME

    def test_file_paths(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_config_path() == tmp_path / "pathsift" / "config.toml"
            assert get_user_theme_path() == tmp_path / "pathsift" / "theme.toml"


class TestEnsureConfigDir:
    """Tests for ensure_config_dir function."""

    def test_creates_directory(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = ensure_config_dir()

        assert result == tmp_path / APP_NAME
        assert result.is_dir()

    def test_existing_directory_ok(self, tmp_path: Path) -> None:
        (tmp_path / APP_NAME).mkdir()
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert ensure_config_dir().is_dir()

    def test_permission_error(self, tmp_path: Path) -> None:
        with (
            patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}),
            patch.object(Path, "mkdir", side_effect=PermissionError("denied")),
            pytest.raises(RuntimeError, match="Permission denied"),
        ):
            ensure_config_dir()

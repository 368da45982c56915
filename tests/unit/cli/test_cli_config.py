"""Unit tests for the config CLI commands."""

import tomllib
from pathlib import Path

from pathsift.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigShow:
    """Tests for pathsift config show."""

    def test_defaults_without_file(self) -> None:
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "No config file" in result.stdout
        assert "exclude_globs" in result.stdout
        assert "**/node_modules" in result.stdout

    def test_shows_file_values(self, isolated_config_home: Path) -> None:
        config_dir = isolated_config_home / "pathsift"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text('[list]\nexclude_globs = ["*.log"]\ndepth = 4\n')

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "Config file:" in result.stdout
        assert "*.log" in result.stdout
        assert "node_modules" not in result.stdout

    def test_invalid_file(self, isolated_config_home: Path) -> None:
        config_dir = isolated_config_home / "pathsift"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("[list]\nunknown = 1\n")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 1


class TestConfigInit:
    """Tests for pathsift config init."""

    def test_creates_file(self, isolated_config_home: Path) -> None:
        result = runner.invoke(app, ["config", "init"])

        config_path = isolated_config_home / "pathsift" / "config.toml"
        assert result.exit_code == 0
        assert "Config written to" in result.stdout
        with config_path.open("rb") as f:
            data = tomllib.load(f)
        assert data["list"]["exclude_globs"] == [
            "**/.git",
            "**/.DS_Store",
            "**/target",
            "**/node_modules",
        ]

    def test_refuses_to_overwrite(self) -> None:
        runner.invoke(app, ["config", "init"])
        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 1
        assert "Config already exists" in result.output

    def test_force_overwrites(self) -> None:
        runner.invoke(app, ["config", "init"])
        result = runner.invoke(app, ["config", "init", "--force"])

        assert result.exit_code == 0

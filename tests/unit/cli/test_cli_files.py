"""Unit tests for the files CLI command."""

import json
import os
from pathlib import Path

from pathsift.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()

ALL_MD = {
    "file1.md",
    "dir1/file3.md",
    "dir1/dir2/file5.md",
    "dir1/dir2/dir3/file7.md",
    "another-dir/notes.md",
    "another-dir/sub-dir/example.md",
    "another-dir/sub-dir/deep-folder/final.md",
}


def _json_paths(stdout: str, root: str) -> list[str]:
    return [os.path.relpath(item["path"], root) for item in json.loads(stdout)]


class TestFilesCommand:
    """Tests for pathsift files."""

    def test_json_output(self, sample_root: str) -> None:
        result = runner.invoke(app, ["files", sample_root, "-g", "**/*.md", "--format", "json"])

        assert result.exit_code == 0
        assert set(_json_paths(result.stdout, sample_root)) == ALL_MD

    def test_table_output(self, in_sample_parent: Path) -> None:
        result = runner.invoke(app, ["files", "tests-data", "-g", "*.md"])

        assert result.exit_code == 0
        assert "tests-data/file1.md" in result.stdout
        assert "Found 1 files" in result.stdout

    def test_quiet_hides_summary(self, in_sample_parent: Path) -> None:
        result = runner.invoke(app, ["-q", "files", "tests-data", "-g", "*.md"])

        assert result.exit_code == 0
        assert "Found" not in result.stdout

    def test_negated_glob(self, sample_root: str) -> None:
        result = runner.invoke(
            app, ["files", sample_root, "-g", "**/*.md", "-g", "!**/another-dir/**", "-f", "json"]
        )

        assert result.exit_code == 0
        paths = set(_json_paths(result.stdout, sample_root))
        assert paths == {p for p in ALL_MD if not p.startswith("another-dir")}

    def test_exclude_option(self, sample_root: str) -> None:
        result = runner.invoke(
            app, ["files", sample_root, "-g", "**/*.md", "-x", "**/dir1", "-f", "json"]
        )

        assert result.exit_code == 0
        assert not any(p.startswith("dir1") for p in _json_paths(result.stdout, sample_root))

    def test_relative_option(self, sample_root: str) -> None:
        result = runner.invoke(
            app,
            ["files", sample_root, "-g", "**/*.md", "-x", "dir1", "--relative", "-f", "json"],
        )

        assert result.exit_code == 0
        paths = _json_paths(result.stdout, sample_root)
        assert "file1.md" in paths
        assert not any(p.startswith("dir1") for p in paths)

    def test_depth_option(self, sample_root: str) -> None:
        result = runner.invoke(
            app, ["files", sample_root, "-g", "**/*.md", "--depth", "1", "-f", "json"]
        )

        assert result.exit_code == 0
        assert _json_paths(result.stdout, sample_root) == ["file1.md"]

    def test_sort_by_first_matching_glob(self, sample_root: str) -> None:
        result = runner.invoke(
            app,
            ["files", sample_root, "-g", "**/dir3/*.md", "-g", "**/*.md", "--sort", "-f", "json"],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert os.path.relpath(data[0]["path"], sample_root) == "dir1/dir2/dir3/file7.md"
        assert data[0]["rank"] == 0
        assert all(item["rank"] == 1 for item in data[1:])
        rest = [item["path"] for item in data[1:]]
        assert rest == sorted(rest)

    def test_sort_end_weighted(self, sample_root: str) -> None:
        result = runner.invoke(
            app,
            [
                "files",
                sample_root,
                "-g",
                "**/*.md",
                "-g",
                "**/dir1/**",
                "--sort",
                "--end-weighted",
                "-f",
                "json",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        ranks = [item["rank"] for item in data]
        paths = [os.path.relpath(item["path"], sample_root) for item in data]
        assert ranks == sorted(ranks)
        for path, rank in zip(paths, ranks, strict=True):
            assert rank == (1 if path.startswith("dir1/") else 0)
        assert sum(p.startswith("dir1/") for p in paths) == 5

    def test_sort_table_shows_rank(self, in_sample_parent: Path) -> None:
        result = runner.invoke(
            app, ["files", "tests-data", "-g", "*.md", "-g", "*.txt", "--sort"]
        )

        assert result.exit_code == 0
        assert "Rank" in result.stdout

    def test_limit(self, sample_root: str) -> None:
        result = runner.invoke(
            app, ["files", sample_root, "-g", "**/*.md", "--limit", "2", "-f", "json"]
        )

        assert result.exit_code == 0
        assert len(json.loads(result.stdout)) == 2

    def test_limit_note_in_table(self, in_sample_parent: Path) -> None:
        result = runner.invoke(app, ["files", "tests-data", "-g", "**/*.md", "-l", "2"])

        assert result.exit_code == 0
        assert "showing 2 of 7" in result.stdout

    def test_export_all_results(self, sample_root: str, tmp_path: Path) -> None:
        export_file = tmp_path / "out" / "files.json"
        result = runner.invoke(
            app,
            ["files", sample_root, "-g", "**/*.md", "--limit", "1", "--export", str(export_file)],
        )

        assert result.exit_code == 0
        exported = json.loads(export_file.read_text())
        assert len(exported) == len(ALL_MD)

    def test_export_to_directory_fails(self, sample_root: str, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["files", sample_root, "-g", "*.md", "--export", str(tmp_path)]
        )

        assert result.exit_code == 1
        assert "Export path is a directory" in result.output

    def test_missing_directory(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["files", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Directory not found" in result.output

    def test_invalid_glob(self, sample_root: str) -> None:
        result = runner.invoke(app, ["files", sample_root, "-g", "[abc"])

        assert result.exit_code == 1
        assert "Cannot create glob pattern" in result.output


class TestFilesCommandConfig:
    """The files command takes its defaults from config.toml."""

    def test_configured_defaults(self, sample_root: str, isolated_config_home: Path) -> None:
        config_dir = isolated_config_home / "pathsift"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text('[list]\ndepth = 1\noutput_format = "json"\n')

        result = runner.invoke(app, ["files", sample_root, "-g", "**/*.md"])

        assert result.exit_code == 0
        assert _json_paths(result.stdout, sample_root) == ["file1.md"]

    def test_flags_override_config(self, sample_root: str, isolated_config_home: Path) -> None:
        config_dir = isolated_config_home / "pathsift"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text('[list]\ndepth = 1\noutput_format = "json"\n')

        result = runner.invoke(app, ["files", sample_root, "-g", "**/*.md", "--depth", "2"])

        assert result.exit_code == 0
        assert set(_json_paths(result.stdout, sample_root)) == {
            "file1.md",
            "dir1/file3.md",
            "another-dir/notes.md",
        }

    def test_invalid_config(self, sample_root: str, isolated_config_home: Path) -> None:
        config_dir = isolated_config_home / "pathsift"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("[list\n")

        result = runner.invoke(app, ["files", sample_root])

        assert result.exit_code == 1
        assert "Invalid TOML syntax" in result.output

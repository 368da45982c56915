"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest

# Files of the sample tree, relative to its root. Directories are implied.
SAMPLE_FILES = (
    "file1.md",
    "file2.txt",
    "dir1/file3.md",
    "dir1/file4.txt",
    "dir1/dir2/file5.md",
    "dir1/dir2/file6.txt",
    "dir1/dir2/dir3/file7.md",
    "another-dir/notes.md",
    "another-dir/sub-dir/example.md",
    "another-dir/sub-dir/deep-folder/final.md",
    ".git/config",
    "node_modules/pkg/index.js",
)


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create the sample directory tree and return its root."""
    root = tmp_path / "tests-data"
    for rel in SAMPLE_FILES:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"content of {rel}\n")
    return root


@pytest.fixture
def sample_root(sample_tree: Path) -> str:
    """Sample tree root as a plain absolute string."""
    return str(sample_tree)


@pytest.fixture
def in_sample_parent(sample_tree: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from the sample tree's parent so 'tests-data' is a relative path."""
    monkeypatch.chdir(sample_tree.parent)
    return sample_tree


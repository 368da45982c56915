"""Unit tests for glob-priority sorting."""

from dataclasses import dataclass
from pathlib import Path

import pytest
from pathsift.errors import SortByGlobsError
from pathsift.fs.path import FsPath
from pathsift.listing.sort import (
    NO_MATCH_RANK,
    compile_sort_globs,
    match_index_for_path,
    rank_by_globs,
    sort_by_globs,
)


@dataclass
class _Item:
    """Stand-in for a caller type carrying a path attribute."""

    path: str
    size: int = 0


class TestSortByGlobs:
    """Tests for sort_by_globs."""

    def test_end_weighted(self) -> None:
        """With end weighting the most specific (last) matching glob decides."""
        items = ["src/list/sort.rs", "src/list/mod.rs"]
        globs = ["src/**", "src/list/**", "src/list/sort.rs"]
        assert sort_by_globs(items, globs, end_weighted=True) == [
            "src/list/mod.rs",
            "src/list/sort.rs",
        ]

    def test_first_match_ties_broken_by_path(self) -> None:
        items = ["src/list/sort.rs", "src/list/mod.rs"]
        globs = ["src/**", "src/list/**", "src/list/sort.rs"]
        assert sort_by_globs(items, globs) == ["src/list/mod.rs", "src/list/sort.rs"]

    def test_priority_order(self) -> None:
        items = ["b.txt", "a.md", "README.md", "z.rs"]
        globs = ["README.md", "*.md", "*.txt"]
        assert sort_by_globs(items, globs) == ["README.md", "a.md", "b.txt", "z.rs"]

    def test_unmatched_items_last_in_path_order(self) -> None:
        items = ["y.bin", "x.bin", "a.md"]
        assert sort_by_globs(items, ["*.md"]) == ["a.md", "x.bin", "y.bin"]

    def test_no_globs_sorts_by_path(self) -> None:
        assert sort_by_globs(["c", "a", "b"], []) == ["a", "b", "c"]

    def test_leading_dot_slash_ignored_for_matching(self) -> None:
        items = ["./docs/b.md", "./src/a.rs"]
        assert sort_by_globs(items, ["src/**", "docs/**"]) == ["./src/a.rs", "./docs/b.md"]

    def test_fs_paths_and_path_objects(self) -> None:
        items = [FsPath("b.rs"), FsPath("a.md")]
        assert sort_by_globs(items, ["*.rs"]) == [FsPath("b.rs"), FsPath("a.md")]
        assert sort_by_globs([Path("b.rs"), Path("a.md")], ["*.md"]) == [
            Path("a.md"),
            Path("b.rs"),
        ]

    def test_items_with_path_attribute(self) -> None:
        items = [_Item("z.md", 1), _Item("a.txt", 2)]
        result = sort_by_globs(items, ["*.md"])
        assert [i.path for i in result] == ["z.md", "a.txt"]

    def test_deterministic(self) -> None:
        items = [f"dir{i % 3}/f{i}.md" for i in range(20)]
        globs = ["dir2/**", "dir0/**"]
        assert sort_by_globs(items, globs) == sort_by_globs(list(reversed(items)), globs)

    def test_input_not_mutated(self) -> None:
        items = ["b", "a"]
        sort_by_globs(items, [])
        assert items == ["b", "a"]

    def test_bad_glob(self) -> None:
        with pytest.raises(SortByGlobsError, match="Cannot sort by globs"):
            sort_by_globs(["a"], ["[abc"])

    def test_star_does_not_cross_separator(self) -> None:
        """A single ``*`` ranks only direct children, like listing globs."""
        items = ["src/a/b.rs", "src/c.rs"]
        assert sort_by_globs(items, ["src/*.rs"]) == ["src/c.rs", "src/a/b.rs"]
        assert sort_by_globs(items, ["src/**/*.rs"]) == ["src/a/b.rs", "src/c.rs"]


class TestRankByGlobs:
    """Tests for rank_by_globs."""

    def test_pairs_ranks_with_items(self) -> None:
        items = [FsPath("b.txt"), FsPath("a.md"), FsPath("c.md")]
        assert rank_by_globs(items, ["*.md"]) == [
            (0, FsPath("a.md")),
            (0, FsPath("c.md")),
            (NO_MATCH_RANK, FsPath("b.txt")),
        ]

    def test_same_order_as_sort_by_globs(self) -> None:
        items = ["src/list/sort.rs", "src/list/mod.rs", "README.md", "src/lib.rs"]
        globs = ["src/**", "src/list/**", "src/list/sort.rs"]
        for end_weighted in (False, True):
            ranked = [item for _, item in rank_by_globs(items, globs, end_weighted)]
            assert ranked == sort_by_globs(items, globs, end_weighted)


class TestMatchIndex:
    """Tests for rank computation."""

    def test_first_and_last(self) -> None:
        matchers = compile_sort_globs(["src/**", "src/list/**", "src/list/sort.rs"])
        assert match_index_for_path("src/list/sort.rs", matchers, False) == 0
        assert match_index_for_path("src/list/sort.rs", matchers, True) == 2
        assert match_index_for_path("src/list/mod.rs", matchers, True) == 1

    def test_no_match(self) -> None:
        matchers = compile_sort_globs(["*.md"])
        assert match_index_for_path("a.rs", matchers, False) == NO_MATCH_RANK
        assert match_index_for_path("a.rs", matchers, True) == NO_MATCH_RANK

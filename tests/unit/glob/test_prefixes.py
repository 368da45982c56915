"""Unit tests for literal-prefix extraction."""

import pytest
from pathsift.glob.prefixes import (
    expand_brace_segment,
    glob_literal_prefixes,
    group_prefixes,
    normalize_prefixes,
    segment_contains_wildcard,
)


class TestGlobLiteralPrefixes:
    """Tests for glob_literal_prefixes."""

    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            ("assets/images/*.png", ["assets/images"]),
            ("{a,b}/c/*.md", ["a/c", "b/c"]),
            ("assets/{img, icons}/*.png", ["assets/img", "assets/icons"]),
            ("src/*/mod.rs", ["src"]),
            ("./docs/*.md", ["docs"]),
            ("a/../b/*.md", ["a"]),
            ("a/{b,{c,d}}/x.md", ["a"]),
            ("a/b{c,d}/x.md", ["a"]),
        ],
    )
    def test_prefixes(self, pattern: str, expected: list[str]) -> None:
        assert glob_literal_prefixes(pattern) == expected

    @pytest.mark.parametrize("pattern", ["**/*.md", "*.md", "file.md", "", "./", "*/x/y.md"])
    def test_no_prefix(self, pattern: str) -> None:
        """Patterns without a literal leading directory allow no pruning."""
        assert glob_literal_prefixes(pattern) == []

    def test_last_segment_never_a_prefix(self) -> None:
        """The final segment may be a file, so it is not used."""
        assert glob_literal_prefixes("a/b/c") == ["a/b"]


class TestHelpers:
    """Tests for segment helpers and prefix normalization."""

    def test_segment_contains_wildcard(self) -> None:
        assert segment_contains_wildcard("src*")
        assert segment_contains_wildcard("file?.md")
        assert segment_contains_wildcard("[ab]")
        assert not segment_contains_wildcard("{a,b}")
        assert not segment_contains_wildcard("plain")

    def test_expand_brace_segment(self) -> None:
        assert expand_brace_segment("{foo, bar}") == ["foo", "bar"]
        assert expand_brace_segment("{a,,b}") == ["a", "b"]
        assert expand_brace_segment("{}") is None
        assert expand_brace_segment("{ , }") is None
        assert expand_brace_segment("plain") is None
        assert expand_brace_segment("{a,{b}}") is None

    def test_normalize_prefixes(self) -> None:
        assert normalize_prefixes(["b", "a", "b"]) == ["a", "b"]
        assert normalize_prefixes(["a", ""]) == []

    def test_group_prefixes_union(self) -> None:
        assert group_prefixes(["src/**/*.rs", "docs/*.md", "src/lib.rs"]) == ("docs", "src")

    def test_group_prefixes_disabled_by_any_unprefixed_pattern(self) -> None:
        assert group_prefixes(["src/**/*.rs", "*.md"]) == ()

"""Literal directory-prefix extraction for traversal pruning.

A glob such as ``assets/{img,icons}/*.png`` can only ever match files
below ``assets/img`` or ``assets/icons``. Those literal prefixes let the
walker skip every other directory without reading it. An empty result
always means "no pruning possible, walk everything".
"""

import posixpath
from collections.abc import Iterable

_WILDCARDS = frozenset("*?[")


def segment_contains_wildcard(segment: str) -> bool:
    """Report whether a path segment contains glob wildcards.

    Example:
        ``src*`` gives True, ``{a,b}`` gives False.
    """
    return any(c in _WILDCARDS for c in segment)


def expand_brace_segment(segment: str) -> list[str] | None:
    """Expand a whole-segment ``{a,b}`` alternation into its options.

    Returns None when the segment is not exactly one non-nested brace
    group, or when the group has no non-empty option.

    Example:
        ``{foo, bar}`` gives ``["foo", "bar"]``.
    """
    if not (segment.startswith("{") and segment.endswith("}")) or len(segment) < 2:
        return None
    inner = segment[1:-1]
    if "{" in inner or "}" in inner:
        return None
    options = [option.strip() for option in inner.split(",")]
    options = [option for option in options if option]
    return options or None


def glob_literal_prefixes(pattern: str) -> list[str]:
    """Extract the literal directory prefixes a pattern is confined to.

    Example:
        ``assets/images/*.png`` gives ``["assets/images"]``;
        ``{a,b}/c/*.md`` gives ``["a/c", "b/c"]``;
        ``**/*.md`` and ``*.md`` give ``[]``.

    Returns:
        Prefixes relative to the pattern's base, or an empty list when the
        whole subtree has to be traversed.
    """
    clean = pattern
    while clean.startswith("./"):
        clean = clean[2:]
    if not clean:
        return []

    segments = [s for s in clean.split("/") if s and s != "."]
    if len(segments) <= 1:
        return []

    prefixes = [""]
    for segment in segments[:-1]:
        if segment == ".." or segment_contains_wildcard(segment):
            break

        options = expand_brace_segment(segment)
        if options is None:
            if "{" in segment or "}" in segment:
                break
            options = [segment]

        next_prefixes = [
            posixpath.join(prefix, option) if prefix else option
            for prefix in prefixes
            for option in options
        ]
        if not next_prefixes:
            break
        prefixes = next_prefixes

    if prefixes == [""]:
        return []
    return prefixes


def normalize_prefixes(prefixes: Iterable[str]) -> list[str]:
    """Sort and dedupe prefixes; any empty member disables pruning (``[]``)."""
    values = list(prefixes)
    if any(not value for value in values):
        return []
    return sorted(set(values))


def group_prefixes(patterns: Iterable[str]) -> tuple[str, ...]:
    """Union of literal prefixes across a group's patterns.

    A single pattern without a usable prefix forces full traversal for
    the whole group, so the result is then empty.
    """
    collected: list[str] = []
    for pattern in patterns:
        found = glob_literal_prefixes(pattern)
        if not found:
            return ()
        collected.extend(found)
    return tuple(normalize_prefixes(collected))

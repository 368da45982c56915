"""Grouping of include patterns by the directory their walk starts from.

Absolute patterns are anchored at their own wildcard-free base directory,
relative patterns at the caller's directory. Groups whose bases are
ancestors of one another are then merged so no subtree is walked twice.

Example:
    main_base="/project", globs=["/project/src/**/*.rs", "*.md"] gives a
    single group ``GlobGroup(base="/project", patterns=("*.md", "src/**/*.rs"))``.
"""

import logging
import posixpath
from collections.abc import Sequence
from dataclasses import dataclass
from functools import reduce

from pathsift.fs.path import FsPath
from pathsift.glob.matcher import get_depth, longest_base_path_wild_free
from pathsift.glob.prefixes import group_prefixes

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GlobGroup:
    """Patterns sharing one walk root.

    Attributes:
        base: Directory the group's walk starts from.
        patterns: Include patterns, all relative to ``base``.
        prefixes: Literal directory prefixes (relative to ``base``) the
            walk may be confined to. Empty means walk everything.
    """

    base: FsPath
    patterns: tuple[str, ...]
    prefixes: tuple[str, ...]

    def depth(self, depth: int | None = None) -> int:
        """Walk depth for this group, honoring an explicit override."""
        return get_depth(self.patterns, depth)


_BasePatterns = tuple[FsPath, tuple[str, ...]]


def process_globs(main_base: FsPath, globs: Sequence[str]) -> list[GlobGroup]:
    """Partition include patterns into merged, prefix-annotated groups.

    Args:
        main_base: The directory the caller asked to list.
        globs: Non-negated include patterns, absolute or relative.

    Returns:
        Groups ordered by base length, shortest first. The result only
        depends on the inputs, so calling twice gives equal lists.
    """
    pairs = _collect_bases(main_base, globs)
    groups: tuple[GlobGroup, ...] = reduce(_merge_group, pairs, ())
    for group in groups:
        logger.debug(
            "Glob group base=%s patterns=%s prefixes=%s",
            group.base,
            list(group.patterns),
            list(group.prefixes) or "<all>",
        )
    return list(groups)


# =============================================================================
# Phase 1: base discovery
# =============================================================================


def _collect_bases(main_base: FsPath, globs: Sequence[str]) -> list[_BasePatterns]:
    """Map each pattern to its base, sorted by base string length."""
    absolute: dict[str, tuple[FsPath, list[str]]] = {}
    relative: list[str] = []

    for pattern in globs:
        if pattern.startswith("/"):
            base, rel_pattern = split_absolute_glob(pattern)
            absolute.setdefault(base.as_str(), (base, []))[1].append(rel_pattern)
        else:
            relative.append(collapse_relative_glob(pattern, main_base))

    pairs: list[_BasePatterns] = [(base, tuple(pats)) for base, pats in absolute.values()]
    if relative:
        pairs.append((main_base, tuple(relative)))

    return sorted(pairs, key=lambda pair: len(pair[0].as_str()))


def split_absolute_glob(pattern: str) -> tuple[FsPath, str]:
    """Split an absolute pattern into its natural base and a relative rest.

    A pattern without any glob syntax names a single entry; its base is
    then the parent directory so the entry itself can be matched.

    Example:
        ``/root/a/**/*.txt`` gives ``("/root/a", "**/*.txt")``;
        ``/root/a/file.md`` gives ``("/root/a", "file.md")``.
    """
    base = longest_base_path_wild_free(pattern)
    pattern_path = FsPath(pattern)
    if base.components() == pattern_path.collapse().components():
        base = base.parent() or FsPath("/")

    rel = pattern_path.diff(base)
    if rel is None:
        return base, pattern
    return base, rel.as_str()


def collapse_relative_glob(pattern: str, main_base: FsPath) -> str:
    """Make a relative pattern relative to the caller's directory.

    Leading ``./`` is dropped, then a leading copy of the caller's own
    directory spelling is stripped, so listing ``./docs`` with
    ``./docs/*.md`` behaves like ``*.md``.
    """
    cleaned = pattern
    while cleaned.startswith("./"):
        cleaned = cleaned[2:]

    base_str = main_base.as_str()
    while base_str.startswith("./"):
        base_str = base_str[2:]
    if not base_str:
        return cleaned
    if not base_str.endswith("/"):
        base_str += "/"

    if cleaned.startswith(base_str):
        return cleaned[len(base_str) :]
    return cleaned


# =============================================================================
# Phase 2: merge
# =============================================================================


def _is_ancestor_or_equal(ancestor: FsPath, path: FsPath) -> bool:
    return path.starts_with(ancestor)


def _rebase_patterns(offset: FsPath | None, patterns: Sequence[str]) -> tuple[str, ...]:
    if offset is None or offset.as_str() in ("", "."):
        return tuple(patterns)
    return tuple(posixpath.join(offset.as_str(), pattern) for pattern in patterns)


def _make_group(base: FsPath, patterns: Sequence[str]) -> GlobGroup:
    patterns = tuple(patterns)
    return GlobGroup(base=base, patterns=patterns, prefixes=group_prefixes(patterns))


def _merge_group(groups: tuple[GlobGroup, ...], pair: _BasePatterns) -> tuple[GlobGroup, ...]:
    """Fold one (base, patterns) pair into the finalized groups."""
    base, patterns = pair

    for index, existing in enumerate(groups):
        if _is_ancestor_or_equal(existing.base, base):
            rebased = _rebase_patterns(base.diff(existing.base), patterns)
            merged = _make_group(existing.base, existing.patterns + rebased)
        elif _is_ancestor_or_equal(base, existing.base):
            rebased = _rebase_patterns(existing.base.diff(base), existing.patterns)
            merged = _make_group(base, tuple(patterns) + rebased)
        else:
            continue
        return groups[:index] + (merged,) + groups[index + 1 :]

    return (*groups, _make_group(base, patterns))

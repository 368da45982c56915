"""Ordering of listing results by glob priority."""

import os
import sys
from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from pathsift.errors import PatternCompileError, SortByGlobsError
from pathsift.fs.path import FsPath
from pathsift.glob.matcher import GlobSet

T = TypeVar("T")

# Rank of an item no glob matches; sorts after every real index
NO_MATCH_RANK = sys.maxsize


def _path_str(item: Any) -> str:
    """Path string of an FsPath, str, os.PathLike, or object with ``.path``."""
    if isinstance(item, FsPath | str):
        return str(item)
    path = getattr(item, "path", None)
    if path is not None:
        return str(path)
    return os.fspath(item)


def match_index_for_path(path: str, matchers: Sequence[GlobSet], end_weighted: bool) -> int:
    """Index of the first (or, end weighted, last) glob matching ``path``.

    Returns:
        The glob index, or NO_MATCH_RANK if nothing matches.
    """
    candidate = path[2:] if path.startswith("./") else path

    found = NO_MATCH_RANK
    for index, matcher in enumerate(matchers):
        if matcher.is_match(candidate):
            if not end_weighted:
                return index
            found = index
    return found


def compile_sort_globs(globs: Sequence[str]) -> list[GlobSet]:
    """Compile one matcher per glob, keeping their priority order.

    Sort globs use the same syntax as listing globs: ``*`` stops at ``/``,
    so ``src/*.rs`` ranks ``src/c.rs`` but not ``src/a/b.rs``.

    Raises:
        SortByGlobsError: If a glob cannot be compiled.
    """
    try:
        return [GlobSet([pattern]) for pattern in globs]
    except PatternCompileError as e:
        raise SortByGlobsError(str(e)) from e


def rank_by_globs(
    items: Iterable[T], globs: Sequence[str], end_weighted: bool = False
) -> list[tuple[int, T]]:
    """Pair each item with its glob rank, ordered by ``(rank, path string)``.

    Raises:
        SortByGlobsError: If a glob cannot be compiled.
    """
    matchers = compile_sort_globs(globs)

    def sort_key(item: T) -> tuple[int, str]:
        path = _path_str(item)
        return match_index_for_path(path, matchers, end_weighted), path

    keyed = sorted(((sort_key(item), item) for item in items), key=lambda pair: pair[0])
    return [(key[0], item) for key, item in keyed]


def sort_by_globs(items: Iterable[T], globs: Sequence[str], end_weighted: bool = False) -> list[T]:
    """Sort items by glob priority, then by full path string.

    Args:
        items: FsPath values, strings, or objects exposing ``.path``.
        globs: Patterns in priority order.
        end_weighted: Rank by the last matching glob instead of the first,
            so later, more specific globs push their matches to the end.

    Returns:
        A new list ordered by ``(glob index, path string)``. Items that
        match no glob come last.

    Raises:
        SortByGlobsError: If a glob cannot be compiled.
    """
    return [item for _, item in rank_by_globs(items, globs, end_weighted)]

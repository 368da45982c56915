"""Lazy file and directory iterators driven by glob groups.

Both iterators do all pattern work (negation split, grouping, glob
compilation) in their constructor, so a malformed pattern fails before
any directory is read. Iteration then chains one pruned walk per group
and drops paths already produced by an earlier group.
"""

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from itertools import chain

from pathsift.fs.path import FsPath
from pathsift.fs.walker import WalkEntry
from pathsift.glob.groups import GlobGroup, process_globs
from pathsift.glob.matcher import GlobSet, get_glob_set
from pathsift.listing.options import ListOptions, resolve_list_options
from pathsift.listing.walk import is_excluded, walk_group

logger = logging.getLogger(__name__)


def _dedupe(paths: Iterable[FsPath]) -> Iterator[FsPath]:
    """Yield each filesystem entry once, in the spelling first seen.

    Paths are compared in absolute form, so ``./a.md`` and ``/cwd/a.md``
    count as the same entry.
    """
    seen: set[str] = set()
    for path in paths:
        key = os.path.abspath(path.as_str())
        if key in seen:
            logger.debug("Dropping duplicate path: %s", path)
            continue
        seen.add(key)
        yield path


class _GlobsIter(ABC):
    """Shared construction and chaining for file and directory iterators.

    Attributes:
        main_base: The directory passed by the caller.
        groups: Glob groups in walk order.
        options: Options after negated patterns were folded into excludes.
    """

    def __init__(
        self,
        directory: str | os.PathLike[str] | FsPath,
        include_globs: Sequence[str] | None = None,
        list_options: ListOptions | None = None,
    ) -> None:
        self.main_base = FsPath.from_os_path(directory)
        includes, self.options = resolve_list_options(include_globs, list_options)
        self.groups: list[GlobGroup] = process_globs(self.main_base, includes)

        self._exclude_set = get_glob_set(self.options.effective_exclude_globs())
        compiled = [(group, get_glob_set(group.patterns)) for group in self.groups]

        self._inner = _dedupe(
            chain.from_iterable(self._iter_group(group, globset) for group, globset in compiled)
        )

    def __iter__(self) -> Iterator[FsPath]:
        return self

    def __next__(self) -> FsPath:
        return next(self._inner)

    def _iter_group(self, group: GlobGroup, globset: GlobSet) -> Iterator[FsPath]:
        walked = walk_group(
            group,
            self._exclude_set,
            relative_glob=self.options.relative_glob,
            depth=self.options.depth,
        )
        for entry in walked:
            if self._accept(entry, group, globset):
                yield entry.path

    def _passes_filters(self, path: FsPath, group: GlobGroup, globset: GlobSet) -> bool:
        """Exclude check against the caller's base, then the group's own globs."""
        if is_excluded(
            path,
            self._exclude_set,
            relative_glob=self.options.relative_glob,
            relative_to=self.main_base,
        ):
            return False

        rel_path = path.diff(group.base)
        if rel_path is None:
            return False
        return globset.is_match(rel_path)

    @abstractmethod
    def _accept(self, entry: WalkEntry, group: GlobGroup, globset: GlobSet) -> bool:
        """Decide whether a walked entry is part of the result."""


class GlobsFileIter(_GlobsIter):
    """Iterator over files matching include globs, minus exclusions.

    Example:
        >>> for path in GlobsFileIter("./docs", ["**/*.md", "!**/drafts/**"]):
        ...     print(path)
    """

    def _accept(self, entry: WalkEntry, group: GlobGroup, globset: GlobSet) -> bool:
        if entry.is_dir:
            return False
        return self._passes_filters(entry.path, group, globset)


class GlobsDirIter(_GlobsIter):
    """Iterator over directories below the listed directory.

    The walk roots themselves are not yielded. With no include globs
    every non-excluded directory is yielded.
    """

    def _accept(self, entry: WalkEntry, group: GlobGroup, globset: GlobSet) -> bool:
        if not entry.is_dir or entry.depth == 0:
            return False
        return self._passes_filters(entry.path, group, globset)

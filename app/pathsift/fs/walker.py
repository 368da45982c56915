"""Depth-first, depth-bounded directory walker with pruning.

This is the single place where the engine touches the OS directory API.
Everything above it works on WalkEntry values.
"""

import logging
import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from pathsift.fs.path import FsPath

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WalkEntry:
    """A single entry observed during a walk.

    Attributes:
        path: Path as produced by joining the walk root and entry names.
        is_dir: True for directories, including symlinks to directories.
        depth: 0 for the walk root, 1 for its direct children, and so on.
    """

    path: FsPath
    is_dir: bool
    depth: int


PruneFn = Callable[[WalkEntry], bool]


def walk(
    root: str | FsPath,
    max_depth: int,
    *,
    prune: PruneFn | None = None,
    follow_links: bool = False,
) -> Iterator[WalkEntry]:
    """Walk a directory tree lazily, depth first, sorted by name.

    The root is yielded first at depth 0. Each directory is offered to
    ``prune`` before it is yielded; a pruned directory is neither yielded
    nor read. Files are never passed to ``prune``.

    Entries that cannot be represented as UTF-8, vanish mid-walk, or are
    neither directories nor regular files (broken symlinks, sockets) are
    skipped. Unreadable directories are logged and skipped.

    Args:
        root: Directory (or single file) to start from.
        max_depth: Deepest level to yield; children of entries at this
            depth are not read.
        prune: Optional predicate; returning True skips the directory.
        follow_links: Descend into symlinked directories. When False they
            are still yielded but their contents are not read.

    Yields:
        WalkEntry for every accepted entry.
    """
    root_path = root if isinstance(root, FsPath) else FsPath(root)

    if os.path.isdir(root_path.value):
        root_entry = WalkEntry(path=root_path, is_dir=True, depth=0)
        if prune is not None and prune(root_entry):
            return
        yield root_entry
        if max_depth > 0:
            yield from _walk_dir(root_path, 1, max_depth, prune, follow_links)
    elif os.path.isfile(root_path.value):
        yield WalkEntry(path=root_path, is_dir=False, depth=0)
    else:
        logger.debug("Walk root does not exist: %s", root_path)


def _walk_dir(
    dir_path: FsPath,
    depth: int,
    max_depth: int,
    prune: PruneFn | None,
    follow_links: bool,
) -> Iterator[WalkEntry]:
    """Yield the entries of one directory, recursing into subdirectories."""
    try:
        with os.scandir(dir_path.value) as it:
            entries = sorted(it, key=lambda e: e.name)
    except PermissionError:
        logger.warning("Permission denied reading directory: %s", dir_path)
        return
    except OSError as e:
        logger.debug("Cannot read directory %s: %s", dir_path, e)
        return

    for entry in entries:
        path = FsPath.from_os_path_ok(entry.path)
        if path is None:
            logger.debug("Skipping non UTF-8 path under %s", dir_path)
            continue

        try:
            is_dir = entry.is_dir()
            if not is_dir and not entry.is_file():
                logger.debug("Skipping special or dangling entry: %s", path)
                continue
            descend = follow_links or not entry.is_symlink()
        except OSError as e:
            logger.debug("Cannot stat %s: %s", path, e)
            continue

        walk_entry = WalkEntry(path=path, is_dir=is_dir, depth=depth)

        if not is_dir:
            yield walk_entry
            continue

        if prune is not None and prune(walk_entry):
            continue
        yield walk_entry
        if descend and depth < max_depth:
            yield from _walk_dir(path, depth + 1, max_depth, prune, follow_links)

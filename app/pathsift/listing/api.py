"""Public listing entry points.

``iter_*`` functions return lazy iterators; ``list_*`` functions collect
them into lists in walk order.
"""

import os
from collections.abc import Sequence

from pathsift.errors import DirNotFoundError
from pathsift.fs.path import FsPath
from pathsift.fs.walker import walk
from pathsift.listing.iterators import GlobsDirIter, GlobsFileIter
from pathsift.listing.options import ListOptions

PathArg = str | os.PathLike[str] | FsPath


def iter_files(
    directory: PathArg,
    include_globs: Sequence[str] | None = None,
    list_options: ListOptions | None = None,
) -> GlobsFileIter:
    """Lazily iterate files under ``directory`` matching ``include_globs``.

    Raises:
        PatternCompileError: If any include or exclude pattern is malformed.
        PathNotRepresentableError: If ``directory`` is not valid UTF-8.
    """
    return GlobsFileIter(directory, include_globs, list_options)


def list_files(
    directory: PathArg,
    include_globs: Sequence[str] | None = None,
    list_options: ListOptions | None = None,
) -> list[FsPath]:
    """Collect iter_files into a list."""
    return list(iter_files(directory, include_globs, list_options))


def iter_dirs(
    directory: PathArg,
    include_globs: Sequence[str] | None = None,
    list_options: ListOptions | None = None,
) -> GlobsDirIter:
    """Lazily iterate directories under ``directory`` matching ``include_globs``."""
    return GlobsDirIter(directory, include_globs, list_options)


def list_dirs(
    directory: PathArg,
    include_globs: Sequence[str] | None = None,
    list_options: ListOptions | None = None,
) -> list[FsPath]:
    """Collect iter_dirs into a list."""
    return list(iter_dirs(directory, include_globs, list_options))


def list_dirs_at_depth(base: PathArg, depth: int) -> list[FsPath]:
    """List directories under ``base`` (itself included) down to ``depth``.

    No globs and no default excludes apply.

    Raises:
        DirNotFoundError: If ``base`` does not exist.
    """
    base_path = FsPath.from_os_path(base)
    if not base_path.exists():
        raise DirNotFoundError(base_path.as_str())
    return [entry.path for entry in walk(base_path, depth) if entry.is_dir]

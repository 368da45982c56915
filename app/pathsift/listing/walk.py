"""Per-group directory walks with exclude and literal-prefix pruning."""

from collections.abc import Iterator, Sequence

from pathsift.fs.path import FsPath
from pathsift.fs.walker import WalkEntry, walk
from pathsift.glob.groups import GlobGroup
from pathsift.glob.matcher import GlobSet


def directory_matches_allowed_prefixes(
    path: FsPath, base: FsPath, prefixes: Sequence[str]
) -> bool:
    """Check whether a directory lies on the way to, or below, an allowed prefix.

    Example:
        path="/root/a/b", base="/root", prefixes=["a", "docs"] gives True
        (``a/b`` is below ``a``); path="/root/a", prefixes=["a/b/c"] gives
        True (``a`` leads to ``a/b/c``); path="/root/x" gives False.
    """
    if not prefixes:
        return True
    if path.as_str() == base.as_str():
        return True

    rel_path = path.diff(base)
    if rel_path is None:
        return True

    rel_str = rel_path.as_str()
    while rel_str.startswith("./"):
        rel_str = rel_str[2:]
    if rel_str in ("", "."):
        return True
    rel = FsPath(rel_str)

    for prefix in prefixes:
        if not prefix:
            return True
        prefix_path = FsPath(prefix)
        if rel.starts_with(prefix_path) or prefix_path.starts_with(rel):
            return True
    return False


def is_excluded(
    path: FsPath, exclude_set: GlobSet, *, relative_glob: bool, relative_to: FsPath
) -> bool:
    """Apply the exclude set to a path.

    In relative mode the path is matched relative to ``relative_to``; a
    path with no relation to it is never excluded.
    """
    if not len(exclude_set):
        return False
    if relative_glob:
        rel = path.diff(relative_to)
        return rel is not None and exclude_set.is_match(rel)
    return exclude_set.is_match(path)


def walk_group(
    group: GlobGroup,
    exclude_set: GlobSet,
    *,
    relative_glob: bool,
    depth: int | None,
) -> Iterator[WalkEntry]:
    """Walk one group's subtree, skipping directories that cannot match.

    Directories are pruned when excluded (relative to the group base in
    relative mode) or when they are off every literal prefix of the group.
    Files are passed through untouched.
    """

    def prune(entry: WalkEntry) -> bool:
        if is_excluded(
            entry.path, exclude_set, relative_glob=relative_glob, relative_to=group.base
        ):
            return True
        return not directory_matches_allowed_prefixes(entry.path, group.base, group.prefixes)

    return walk(group.base, group.depth(depth), prune=prune)

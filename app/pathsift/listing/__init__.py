"""File and directory listing driven by glob groups."""

from pathsift.listing.api import iter_dirs, iter_files, list_dirs, list_dirs_at_depth, list_files
from pathsift.listing.iterators import GlobsDirIter, GlobsFileIter
from pathsift.listing.options import ListOptions
from pathsift.listing.sort import rank_by_globs, sort_by_globs

__all__ = [
    "GlobsDirIter",
    "GlobsFileIter",
    "ListOptions",
    "iter_dirs",
    "iter_files",
    "list_dirs",
    "list_dirs_at_depth",
    "list_files",
    "rank_by_globs",
    "sort_by_globs",
]

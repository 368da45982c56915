"""pathsift - glob-driven file and directory listing.

Walks only the directories that can contain a match for a set of include
globs, applies exclude globs, and can order results by glob priority.

Example:
    >>> from pathsift import list_files, sort_by_globs
    >>> files = list_files("./docs", ["**/*.md", "!**/drafts/**"])
    >>> sort_by_globs(files, ["**/README.md", "**/*.md"])
"""

__version__ = "0.1.0"

from pathsift.errors import (
    CanonicalizeError,
    DiffError,
    DirNotFoundError,
    GlobSetBuildError,
    PathNotRepresentableError,
    PathsiftError,
    PatternCompileError,
    SortByGlobsError,
)
from pathsift.fs.path import FsPath
from pathsift.glob.groups import GlobGroup, process_globs
from pathsift.glob.matcher import DEFAULT_EXCLUDE_GLOBS, TOP_MAX_DEPTH, GlobSet, get_glob_set
from pathsift.listing.api import (
    iter_dirs,
    iter_files,
    list_dirs,
    list_dirs_at_depth,
    list_files,
)
from pathsift.listing.iterators import GlobsDirIter, GlobsFileIter
from pathsift.listing.options import ListOptions
from pathsift.listing.sort import sort_by_globs

__all__ = [
    "DEFAULT_EXCLUDE_GLOBS",
    "TOP_MAX_DEPTH",
    "CanonicalizeError",
    "DiffError",
    "DirNotFoundError",
    "FsPath",
    "GlobGroup",
    "GlobSet",
    "GlobSetBuildError",
    "GlobsDirIter",
    "GlobsFileIter",
    "ListOptions",
    "PathNotRepresentableError",
    "PathsiftError",
    "PatternCompileError",
    "SortByGlobsError",
    "__version__",
    "get_glob_set",
    "iter_dirs",
    "iter_files",
    "list_dirs",
    "list_dirs_at_depth",
    "list_files",
    "process_globs",
    "sort_by_globs",
]

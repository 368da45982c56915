"""Glob compilation, literal-prefix extraction and grouping by base directory."""

from pathsift.glob.groups import GlobGroup, process_globs
from pathsift.glob.matcher import (
    DEFAULT_EXCLUDE_GLOBS,
    TOP_MAX_DEPTH,
    GlobSet,
    get_depth,
    get_glob_set,
    longest_base_path_wild_free,
)
from pathsift.glob.prefixes import glob_literal_prefixes, group_prefixes

__all__ = [
    "DEFAULT_EXCLUDE_GLOBS",
    "TOP_MAX_DEPTH",
    "GlobGroup",
    "GlobSet",
    "get_depth",
    "get_glob_set",
    "glob_literal_prefixes",
    "group_prefixes",
    "longest_base_path_wild_free",
    "process_globs",
]

"""Filesystem primitives: UTF-8 paths and the depth-bounded walker."""

from pathsift.fs.path import FsPath
from pathsift.fs.walker import WalkEntry, walk

__all__ = ["FsPath", "WalkEntry", "walk"]

"""Exception hierarchy for pathsift.

All errors raised by the traversal engine derive from PathsiftError so
callers can catch the whole family at the library boundary.
"""

from collections.abc import Sequence


class PathsiftError(Exception):
    """Base exception for all pathsift errors."""


# =============================================================================
# Path errors
# =============================================================================


class PathNotRepresentableError(PathsiftError):
    """Raised when an OS path is not valid UTF-8.

    Attributes:
        path: Lossy string rendering of the offending path.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Path is not valid UTF-8: '{path}'")


class DiffError(PathsiftError):
    """Raised when a relative path cannot be computed between two paths."""

    def __init__(self, path: str, base: str) -> None:
        self.path = path
        self.base = base
        super().__init__(f"Cannot compute relative path from '{base}' to '{path}'")


class CanonicalizeError(PathsiftError):
    """Raised when a path cannot be canonicalized (usually it does not exist)."""

    def __init__(self, path: str, cause: str) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot canonicalize path '{path}'\nCause: {cause}")


class DirNotFoundError(PathsiftError):
    """Raised when the directory to list does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Directory not found: '{path}'")


# =============================================================================
# Glob errors
# =============================================================================


class PatternCompileError(PathsiftError):
    """Raised when a glob pattern is syntactically invalid.

    Attributes:
        pattern: The offending pattern string.
        cause: Message from the underlying glob compiler.
    """

    def __init__(self, pattern: str, cause: str) -> None:
        self.pattern = pattern
        self.cause = cause
        super().__init__(f"Cannot create glob pattern '{pattern}'.\nCause: {cause}")


class GlobSetBuildError(PathsiftError):
    """Raised when a set of individually valid patterns cannot be compiled."""

    def __init__(self, patterns: Sequence[str], cause: str) -> None:
        self.patterns = list(patterns)
        self.cause = cause
        super().__init__(f"Cannot build glob set from {self.patterns!r}.\nCause: {cause}")


class SortByGlobsError(PathsiftError):
    """Raised when sort_by_globs is given a pattern it cannot compile."""

    def __init__(self, cause: str) -> None:
        self.cause = cause
        super().__init__(f"Cannot sort by globs.\nCause: {cause}")

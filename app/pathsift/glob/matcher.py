"""Glob compilation and matching.

Patterns are compiled through wcmatch with globstar, brace expansion and
dot-file matching enabled, and with ``*`` never crossing a ``/``. Matching
is purely lexical: nothing here touches the filesystem.
"""

import re
from collections.abc import Iterable, Sequence

from wcmatch import glob

from pathsift.errors import GlobSetBuildError, PatternCompileError
from pathsift.fs.path import FsPath

# Upper bound used when a pattern contains ``**`` and no depth is given
TOP_MAX_DEPTH = 100

# Applied when the caller provides no exclude list at all
DEFAULT_EXCLUDE_GLOBS: tuple[str, ...] = (
    "**/.git",
    "**/.DS_Store",
    "**/target",
    "**/node_modules",
)

GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.DOTGLOB | glob.FORCEUNIX

# Characters that end a literal base directory
_BASE_MAGIC = frozenset("*?[{")


def _strip_dot_slash(value: str) -> str:
    while value.startswith("./"):
        value = value[2:]
    return value


def _syntax_error(pattern: str) -> str | None:
    """Return a message for unbalanced ``[...]`` or ``{...}``, else None.

    wcmatch silently treats such characters as literals; rejecting them
    keeps typos from turning into patterns that never match.
    """
    braces = 0
    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        if c == "\\":
            i += 2
            continue
        if c == "[":
            j = i + 1
            if j < n and pattern[j] in "!^":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            while j < n and pattern[j] != "]":
                j += 1
            if j >= n:
                return "unclosed character class; missing ']'"
            i = j + 1
            continue
        if c == "{":
            braces += 1
        elif c == "}":
            if braces == 0:
                return "unopened alternate group; missing '{'"
            braces -= 1
        i += 1
    if braces:
        return "unclosed alternate group; missing '}'"
    return None


def compile_glob(pattern: str) -> list[re.Pattern[str]]:
    """Compile one glob pattern into anchored regular expressions.

    A pattern starting with ``**`` also gets an absolute-rooted variant so
    that ``**/.git`` matches ``/home/me/repo/.git`` as well as ``repo/.git``.

    Raises:
        PatternCompileError: If the pattern is malformed.
    """
    error = _syntax_error(pattern)
    if error is not None:
        raise PatternCompileError(pattern, error)

    normalized = _strip_dot_slash(pattern)
    variants = [normalized]
    if normalized.startswith("**"):
        variants.append("/" + normalized)

    try:
        positive, _negative = glob.translate(variants, flags=GLOB_FLAGS)
        return [re.compile(regex) for regex in positive]
    except Exception as e:  # wcmatch and re raise unrelated exception types
        raise PatternCompileError(pattern, str(e)) from e


class GlobSet:
    """A set of glob patterns matched as a single predicate.

    Attributes:
        patterns: The source patterns, in the order given.
    """

    __slots__ = ("_regexes", "patterns")

    def __init__(self, patterns: Iterable[str]) -> None:
        self.patterns: tuple[str, ...] = tuple(patterns)
        regexes: list[re.Pattern[str]] = []
        for pattern in self.patterns:
            regexes.extend(compile_glob(pattern))
        self._regexes = tuple(regexes)

    def is_match(self, path: str | FsPath) -> bool:
        """True if any pattern matches the path (leading ``./`` ignored)."""
        candidate = _strip_dot_slash(str(path))
        return any(regex.match(candidate) for regex in self._regexes)

    def __len__(self) -> int:
        return len(self.patterns)

    def __repr__(self) -> str:
        return f"GlobSet({list(self.patterns)!r})"


def get_glob_set(globs: Sequence[str]) -> GlobSet:
    """Compile a list of patterns into one GlobSet.

    Raises:
        PatternCompileError: On the first malformed pattern.
        GlobSetBuildError: If an entry is not a pattern string at all.
    """
    for pattern in globs:
        if not isinstance(pattern, str):
            raise GlobSetBuildError(globs, f"expected a string pattern, got {type(pattern).__name__}")
    return GlobSet(globs)


def get_depth(patterns: Sequence[str], depth: int | None = None) -> int:
    """Compute the walk depth needed to match a set of patterns.

    An explicit depth always wins. Otherwise any ``**`` means
    TOP_MAX_DEPTH, and plain patterns need one level per path segment.

    Returns:
        The depth, at least 1 when computed.
    """
    if depth is not None:
        return depth
    if any("**" in pattern for pattern in patterns):
        return TOP_MAX_DEPTH
    max_depth = 0
    for pattern in patterns:
        count = pattern.count("/") + pattern.count("\\") + 1
        max_depth = max(max_depth, count)
    return max(max_depth, 1)


def longest_base_path_wild_free(pattern: str) -> FsPath:
    """Return the leading run of path components with no glob syntax.

    Example:
        ``/root/a/**/*.txt`` gives ``/root/a``.
    """
    parts: list[str] = []
    for component in pattern.split("/"):
        if any(c in _BASE_MAGIC for c in component):
            break
        parts.append(component)

    joined = "/".join(parts)
    if not joined:
        return FsPath("/" if pattern.startswith("/") else ".")
    return FsPath(joined).collapse()

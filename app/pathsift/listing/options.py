"""Options controlling a listing call, and include/exclude resolution."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from pathsift.glob.matcher import DEFAULT_EXCLUDE_GLOBS


@dataclass(frozen=True, slots=True)
class ListOptions:
    """Options for iter_files / iter_dirs.

    Attributes:
        exclude_globs: Patterns to exclude. None means the default
            exclude set (VCS metadata, build output, dependencies).
        relative_glob: Match exclude patterns against paths relative to
            the listed directory instead of the walked path.
        depth: Explicit recursion depth; None lets the patterns decide.
    """

    exclude_globs: tuple[str, ...] | None = None
    relative_glob: bool = False
    depth: int | None = None

    def __post_init__(self) -> None:
        """Validate option values."""
        if self.depth is not None and self.depth < 0:
            msg = f"Depth cannot be negative, got {self.depth}"
            raise ValueError(msg)
        if self.exclude_globs is not None and not isinstance(self.exclude_globs, tuple):
            object.__setattr__(self, "exclude_globs", tuple(self.exclude_globs))

    # -- Constructors

    @classmethod
    def from_exclude_globs(cls, globs: Sequence[str] | None) -> ListOptions:
        return cls(exclude_globs=None if globs is None else tuple(globs))

    @classmethod
    def from_relative_glob(cls, value: bool = True) -> ListOptions:
        return cls(relative_glob=value)

    # -- Builders (return new instances)

    def with_exclude_globs(self, globs: Sequence[str]) -> ListOptions:
        return replace(self, exclude_globs=tuple(globs))

    def with_relative_glob(self, value: bool = True) -> ListOptions:
        return replace(self, relative_glob=value)

    def with_depth(self, depth: int | None) -> ListOptions:
        return replace(self, depth=depth)

    def add_exclude_globs(self, globs: Sequence[str]) -> ListOptions:
        """Append patterns to the caller's excludes (not to the defaults)."""
        if not globs:
            return self
        current = self.exclude_globs or ()
        return replace(self, exclude_globs=(*current, *globs))

    # -- Getters

    def effective_exclude_globs(self) -> tuple[str, ...]:
        """Exclude patterns actually applied, falling back to the defaults."""
        if self.exclude_globs is None:
            return DEFAULT_EXCLUDE_GLOBS
        return self.exclude_globs


def split_negated_globs(include_globs: Sequence[str] | None) -> tuple[list[str], list[str]]:
    """Separate plain include patterns from ``!``-negated ones.

    When no include list is given, or it holds only negations, the plain
    list becomes ``["**"]`` so that there is still something to walk.

    Returns:
        (includes, negated patterns with the ``!`` removed)
    """
    if include_globs is None:
        return ["**"], []

    includes: list[str] = []
    negated: list[str] = []
    for pattern in include_globs:
        if pattern.startswith("!"):
            negated.append(pattern[1:])
        else:
            includes.append(pattern)

    if not includes and negated:
        includes = ["**"]
    return includes, negated


def resolve_list_options(
    include_globs: Sequence[str] | None,
    list_options: ListOptions | None,
) -> tuple[list[str], ListOptions]:
    """Fold negated include patterns into the options' exclude list.

    Returns:
        (plain include patterns, options with negations appended to excludes)
    """
    includes, negated = split_negated_globs(include_globs)
    options = list_options or ListOptions()
    return includes, options.add_exclude_globs(negated)

"""UTF-8 guaranteed, POSIX-separated path value type.

FsPath is the path currency of the traversal engine. It is a thin,
immutable wrapper over a string so that the exact spelling a caller used
(for example a leading ``./``) survives the walk and shows up unchanged in
the results.
"""

from __future__ import annotations

import os
import posixpath
from dataclasses import dataclass

from pathsift.errors import CanonicalizeError, DiffError, PathNotRepresentableError


def _lossy(value: str) -> str:
    """Render a surrogate-escaped string for error messages."""
    return value.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


@dataclass(frozen=True, slots=True, order=True)
class FsPath:
    """Immutable path backed by a valid UTF-8 string.

    Backslashes produced by the host OS separator are normalized to ``/``.
    No other normalization is applied; use :meth:`collapse` for that.

    Attributes:
        value: The path string.

    Raises:
        PathNotRepresentableError: If ``value`` cannot be encoded as UTF-8
            (e.g. it carries surrogate escapes from an undecodable OS name).
    """

    value: str

    def __post_init__(self) -> None:
        """Validate UTF-8 and normalize separators."""
        try:
            self.value.encode("utf-8")
        except UnicodeEncodeError:
            raise PathNotRepresentableError(_lossy(self.value)) from None
        if os.sep != "/" and os.sep in self.value:
            object.__setattr__(self, "value", self.value.replace(os.sep, "/"))

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_os_path(cls, path: str | bytes | os.PathLike[str] | os.PathLike[bytes]) -> FsPath:
        """Build an FsPath from anything os.fspath accepts.

        Raises:
            PathNotRepresentableError: If the path is not valid UTF-8.
        """
        if isinstance(path, FsPath):
            return path
        raw = os.fspath(path)
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError:
                raise PathNotRepresentableError(raw.decode("utf-8", "replace")) from None
        return cls(raw)

    @classmethod
    def from_os_path_ok(
        cls, path: str | bytes | os.PathLike[str] | os.PathLike[bytes]
    ) -> FsPath | None:
        """Like from_os_path, but return None instead of raising."""
        try:
            return cls.from_os_path(path)
        except PathNotRepresentableError:
            return None

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    def __fspath__(self) -> str:
        return self.value

    def is_absolute(self) -> bool:
        return self.value.startswith("/")

    def file_name(self) -> str:
        """Last component, or "" for a root or empty path."""
        return posixpath.basename(self.value.rstrip("/"))

    def stem(self) -> str:
        return posixpath.splitext(self.file_name())[0]

    def ext(self) -> str:
        """Extension without the dot, "" if none."""
        return posixpath.splitext(self.file_name())[1].lstrip(".")

    def components(self) -> tuple[str, ...]:
        """Path components, ignoring empty and ``.`` segments.

        Absolute paths start with a ``"/"`` component.
        """
        parts = tuple(p for p in self.value.split("/") if p not in ("", "."))
        return ("/", *parts) if self.is_absolute() else parts

    # -------------------------------------------------------------------------
    # Derivations
    # -------------------------------------------------------------------------

    def join(self, *others: str | FsPath) -> FsPath:
        return FsPath(posixpath.join(self.value, *(str(o) for o in others)))

    def parent(self) -> FsPath | None:
        """Parent directory, or None for a root or a single relative component."""
        stripped = self.value.rstrip("/")
        if not stripped:
            return None
        head = posixpath.dirname(stripped)
        if not head:
            return None
        return FsPath(head)

    def collapse(self) -> FsPath:
        """Lexically fold ``.`` and ``..`` segments and duplicate separators."""
        if not self.value:
            return FsPath(".")
        return FsPath(posixpath.normpath(self.value))

    def starts_with(self, prefix: str | FsPath) -> bool:
        """Whole-component prefix test (``a/bc`` does not start with ``a/b``)."""
        other = prefix if isinstance(prefix, FsPath) else FsPath(prefix)
        if other.is_absolute() != self.is_absolute():
            return False
        mine = self.components()
        theirs = other.components()
        return mine[: len(theirs)] == theirs

    def diff(self, base: str | FsPath) -> FsPath | None:
        """Relative path that leads from ``base`` to this path.

        Both paths are collapsed first. Returns ``"."`` when they are equal
        and None when no lexical relation exists (one absolute and one
        relative, or ``base`` climbs above the common part with ``..``).
        """
        base_path = base if isinstance(base, FsPath) else FsPath(base)
        if self.is_absolute() != base_path.is_absolute():
            return None

        mine = self.collapse().components()
        theirs = base_path.collapse().components()

        common = 0
        for a, b in zip(mine, theirs, strict=False):
            if a != b:
                break
            common += 1

        remaining_base = theirs[common:]
        if ".." in remaining_base:
            return None

        parts = [".."] * len(remaining_base) + list(mine[common:])
        if not parts:
            return FsPath(".")
        return FsPath("/".join(parts))

    def diff_or_raise(self, base: str | FsPath) -> FsPath:
        """Like diff, but raise DiffError when no relation exists."""
        rel = self.diff(base)
        if rel is None:
            raise DiffError(self.value, str(base))
        return rel

    # -------------------------------------------------------------------------
    # Filesystem queries
    # -------------------------------------------------------------------------

    def canonicalize(self) -> FsPath:
        """Resolve symlinks and ``..`` against the real filesystem.

        Raises:
            CanonicalizeError: If the path does not exist or cannot be resolved.
        """
        try:
            resolved = os.path.realpath(self.value, strict=True)
        except OSError as e:
            raise CanonicalizeError(self.value, str(e)) from e
        return FsPath.from_os_path(resolved)

    def exists(self) -> bool:
        return os.path.exists(self.value)

    def is_dir(self) -> bool:
        return os.path.isdir(self.value)

    def is_file(self) -> bool:
        return os.path.isfile(self.value)

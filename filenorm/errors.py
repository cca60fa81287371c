"""Exception hierarchy for filenorm.

Malformed input is rejected with an :class:`InvalidPathError` subclass. A path
that is well formed but ascends above its root is *not* an error: the
normalizing functions return ``None`` for it.
"""

from __future__ import annotations


class FilenormError(Exception):
    """Base class for filenorm errors."""


class InvalidPathError(FilenormError, ValueError):
    """Raised when a path string cannot be interpreted as a path."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{reason}: {path!r}")
        self.path = path
        self.reason = reason


class InvalidPrefixError(InvalidPathError):
    """Raised when the prefix of a path cannot be parsed."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "unparseable path prefix")


class IllegalCharacterError(InvalidPathError):
    """Raised when a path contains a NUL character."""

    def __init__(self, path: str) -> None:
        super().__init__(
            path,
            "null character present in file/path name; there are no known "
            "legitimate use cases for such data, but several injection "
            "attacks may use it",
        )


class AlternateDataStreamError(InvalidPathError):
    """Raised when a Windows file name carries an NTFS stream separator."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "NTFS ADS separator (':') in file name is forbidden")


__all__ = [
    "AlternateDataStreamError",
    "FilenormError",
    "IllegalCharacterError",
    "InvalidPathError",
    "InvalidPrefixError",
]

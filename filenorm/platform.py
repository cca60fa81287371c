"""Separator model and platform style detection shared across filenorm modules.

Centralising the logic keeps the Windows/Unix matrix in one place: every other
module asks for a :class:`PathStyle` rather than inspecting the host directly,
so both styles can be exercised on any machine.
"""

from __future__ import annotations

import enum
import os
import sys
import typing as t

UNIX_SEPARATOR: t.Final[str] = "/"
WINDOWS_SEPARATOR: t.Final[str] = "\\"
EXTENSION_SEPARATOR: t.Final[str] = "."

# Tests set this override to emulate alternative platforms (for example
# Windows) without needing to spawn a different OS. It is read once at import.
PLATFORM_OVERRIDE_ENV: t.Final[str] = "FILENORM_PLATFORM_OVERRIDE"


class PathStyle(enum.Enum):
    """Path conventions of a platform family."""

    UNIX = UNIX_SEPARATOR
    WINDOWS = WINDOWS_SEPARATOR

    @property
    def separator(self) -> str:
        """Return the native name separator."""
        return self.value

    @property
    def other_separator(self) -> str:
        """Return the separator native to the other style."""
        return flip_separator(self.value)

    @property
    def supports_drive_letter(self) -> bool:
        """Return ``True`` when bare ``X:`` names a drive."""
        return self is PathStyle.WINDOWS

    @property
    def is_case_sensitive(self) -> bool:
        """Return ``True`` when file names compare case-sensitively."""
        return self is PathStyle.UNIX

    @classmethod
    def for_platform(cls, platform: str) -> PathStyle:
        """Return the style for a ``sys.platform``-like name."""
        return cls.WINDOWS if _normalise(platform).startswith("win") else cls.UNIX


def _normalise(platform: str) -> str:
    """Return a lowercase version of *platform* suitable for prefix checks."""
    return platform.strip().lower()


def _detect_system_style() -> PathStyle:
    """Return the style of the running host, honouring test overrides."""
    if override := os.getenv(PLATFORM_OVERRIDE_ENV):
        return PathStyle.for_platform(override)
    if os.name == "nt":
        return PathStyle.WINDOWS
    return PathStyle.for_platform(sys.platform)


SYSTEM_STYLE: PathStyle = _detect_system_style()


def system_style() -> PathStyle:
    """Return the process-wide system style."""
    return SYSTEM_STYLE


def resolve_style(style: PathStyle | None) -> PathStyle:
    """Return *style*, falling back to the system style when ``None``."""
    return system_style() if style is None else style


def is_system_windows() -> bool:
    """Return ``True`` when the system separator is the Windows one."""
    return system_style() is PathStyle.WINDOWS


def is_separator(ch: str) -> bool:
    """Return ``True`` when *ch* is either name separator."""
    return ch in (UNIX_SEPARATOR, WINDOWS_SEPARATOR)


def flip_separator(ch: str) -> str:
    """Return the opposite separator to *ch*.

    Raises
    ------
    ValueError
        If *ch* is not a name separator.
    """
    if ch == UNIX_SEPARATOR:
        return WINDOWS_SEPARATOR
    if ch == WINDOWS_SEPARATOR:
        return UNIX_SEPARATOR
    msg = f"not a name separator: {ch!r}"
    raise ValueError(msg)


def to_separator(*, unix_separator: bool) -> str:
    """Return ``/`` when *unix_separator* is true, otherwise ``\\``."""
    return UNIX_SEPARATOR if unix_separator else WINDOWS_SEPARATOR


def _convert_separators(path: str | None, style: PathStyle) -> str | None:
    if path is None:
        return None
    return path.replace(style.other_separator, style.separator)


def separators_to_unix(path: str | None) -> str | None:
    """Convert all separators in *path* to ``/``."""
    return _convert_separators(path, PathStyle.UNIX)


def separators_to_windows(path: str | None) -> str | None:
    """Convert all separators in *path* to ``\\``."""
    return _convert_separators(path, PathStyle.WINDOWS)


def separators_to_system(
    path: str | None, *, style: PathStyle | None = None
) -> str | None:
    """Convert all separators in *path* to the system (or *style*) separator."""
    return _convert_separators(path, resolve_style(style))


__all__ = [
    "EXTENSION_SEPARATOR",
    "PLATFORM_OVERRIDE_ENV",
    "SYSTEM_STYLE",
    "UNIX_SEPARATOR",
    "WINDOWS_SEPARATOR",
    "PathStyle",
    "flip_separator",
    "is_separator",
    "is_system_windows",
    "resolve_style",
    "separators_to_system",
    "separators_to_unix",
    "separators_to_windows",
    "system_style",
    "to_separator",
]

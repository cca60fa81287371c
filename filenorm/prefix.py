"""Classification of the prefix (root) of a path string.

The prefix is the leading part of a name that anchors it: a drive, a UNC
server, a home directory marker or a single separator. Everything else in
filenorm is computed relative to it.

==========================  ===============  ======
Name                        Kind             Length
==========================  ===============  ======
``a/b``, ``a\\b``           NONE             0
``/a``, ``\\a``             CURRENT_DRIVE..  1
``C:a``                     DRIVE_RELATIVE   2
``C:\\a``                   DRIVE_ABSOLUTE   3
``//server/a``              UNC              9
``~/a``, ``~``              HOME_CURRENT..   2
``~user/a``, ``~user``      HOME_NAMED_USER  6
==========================  ===============  ======

A length larger than the input (``~`` and ``~user``) means the prefix needs
a separator appended to be complete.
"""

from __future__ import annotations

import dataclasses as dc
import enum
import logging
import string
import typing as t

from ._validators import require_no_nul
from .errors import InvalidPrefixError
from .hostnames import is_valid_host_name
from .platform import (
    UNIX_SEPARATOR,
    WINDOWS_SEPARATOR,
    PathStyle,
    is_separator,
    resolve_style,
)

logger = logging.getLogger(__name__)

_HOME: t.Final[str] = "~"
_DRIVE_MARKER: t.Final[str] = ":"


class PrefixKind(enum.Enum):
    """The kind of root a path starts from."""

    NONE = "none"
    CURRENT_DRIVE_ABSOLUTE = "current-drive-absolute"
    DRIVE_RELATIVE = "drive-relative"
    DRIVE_ABSOLUTE = "drive-absolute"
    UNC = "unc"
    HOME_CURRENT_USER = "home-current-user"
    HOME_NAMED_USER = "home-named-user"
    INVALID = "invalid"


@dc.dataclass(frozen=True, slots=True)
class Prefix:
    """The classified prefix of a path."""

    kind: PrefixKind
    length: int | None

    @property
    def is_valid(self) -> bool:
        """Return ``True`` unless the prefix could not be parsed."""
        return self.kind is not PrefixKind.INVALID

    @property
    def is_absolute(self) -> bool:
        """Return ``True`` when the prefix anchors the path somewhere."""
        return self.is_valid and self.kind is not PrefixKind.NONE

    def is_synthetic(self, name: str) -> bool:
        """Return ``True`` if the prefix extends past the end of *name*."""
        return self.length is not None and self.length > len(name)


_NO_PREFIX: t.Final = Prefix(PrefixKind.NONE, 0)
_INVALID: t.Final = Prefix(PrefixKind.INVALID, None)
_ROOT: t.Final = Prefix(PrefixKind.CURRENT_DRIVE_ABSOLUTE, 1)


def _first_separator(name: str, start: int) -> int:
    """Return the index of the first separator at or after *start*, or -1."""
    unix_pos = name.find(UNIX_SEPARATOR, start)
    windows_pos = name.find(WINDOWS_SEPARATOR, start)
    positions = [pos for pos in (unix_pos, windows_pos) if pos != -1]
    return min(positions, default=-1)


def _is_ascii_letter(ch: str) -> bool:
    return ch in string.ascii_letters


def _classify_home(name: str) -> Prefix:
    pos = _first_separator(name, 1)
    if pos == -1:
        return Prefix(PrefixKind.HOME_NAMED_USER, len(name) + 1)
    if pos == 1:
        return Prefix(PrefixKind.HOME_CURRENT_USER, 2)
    return Prefix(PrefixKind.HOME_NAMED_USER, pos + 1)


def _classify_drive(name: str, style: PathStyle) -> Prefix:
    first = name[0]
    if _is_ascii_letter(first):
        if len(name) == 2 and not style.supports_drive_letter:
            return _NO_PREFIX
        if len(name) == 2 or not is_separator(name[2]):
            return Prefix(PrefixKind.DRIVE_RELATIVE, 2)
        return Prefix(PrefixKind.DRIVE_ABSOLUTE, 3)
    if first == UNIX_SEPARATOR:
        return _ROOT
    return _INVALID


def _classify_unc(name: str) -> Prefix:
    pos = _first_separator(name, 2)
    if pos in (-1, 2):
        return _INVALID
    host = name[2:pos]
    if not is_valid_host_name(host):
        logger.debug("Rejecting UNC prefix with invalid host name %r", host)
        return _INVALID
    return Prefix(PrefixKind.UNC, pos + 1)


def classify_prefix(name: str, *, style: PathStyle | None = None) -> Prefix:
    """Classify the prefix of *name*.

    Parameters
    ----------
    name : str
        The path to inspect. Both separators are recognised regardless of
        *style*.
    style : PathStyle | None, optional
        Platform conventions to apply; only drive-letter support depends on
        it. Defaults to the system style.

    Returns
    -------
    Prefix
        The prefix kind and length. Malformed prefixes (a leading ``:``, a
        bad drive marker, three leading separators, an invalid UNC host)
        yield ``PrefixKind.INVALID`` with ``length=None``.
    """
    size = len(name)
    if size == 0:
        return _NO_PREFIX
    first = name[0]
    if first == _DRIVE_MARKER:
        return _INVALID
    if size == 1:
        if first == _HOME:
            return Prefix(PrefixKind.HOME_CURRENT_USER, 2)
        return _ROOT if is_separator(first) else _NO_PREFIX
    if first == _HOME:
        return _classify_home(name)
    if name[1] == _DRIVE_MARKER:
        return _classify_drive(name, resolve_style(style))
    if not is_separator(first):
        return _NO_PREFIX
    if not is_separator(name[1]):
        return _ROOT
    return _classify_unc(name)


def get_prefix_length(name: str, *, style: PathStyle | None = None) -> int:
    """Return the length of the prefix of *name*.

    Raises
    ------
    InvalidPrefixError
        If the prefix cannot be parsed.
    """
    prefix = classify_prefix(name, style=style)
    if prefix.length is None:
        raise InvalidPrefixError(name)
    return prefix.length


@t.overload
def get_prefix(name: str, *, style: PathStyle | None = None) -> str: ...


@t.overload
def get_prefix(name: None, *, style: PathStyle | None = None) -> None: ...


def get_prefix(name: str | None, *, style: PathStyle | None = None) -> str | None:
    """Return the prefix text of *name*, e.g. ``C:\\`` or ``~/``.

    A synthetic prefix (bare ``~`` or ``~user``) is completed with ``/``.
    """
    if name is None:
        return None
    length = get_prefix_length(name, style=style)
    require_no_nul(name)
    if length > len(name):
        return name + UNIX_SEPARATOR
    return name[:length]


__all__ = [
    "Prefix",
    "PrefixKind",
    "classify_prefix",
    "get_prefix",
    "get_prefix_length",
]

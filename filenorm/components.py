"""Splitting a path string into prefix, path, name and extension.

Given ``C:\\a\\b\\c.txt`` (or ``~/a/b/c.txt``):

=================================  =================
Function                           Result
=================================  =================
get_prefix                         ``C:\\``
get_full_path                      ``C:\\a\\b\\``
get_full_path_no_end_separator     ``C:\\a\\b``
get_path                           ``a\\b\\``
get_path_no_end_separator          ``a\\b``
get_name                           ``c.txt``
get_base_name                      ``c``
get_extension                      ``txt``
=================================  =================

Both separators are recognised whatever the style. ``None`` input yields
``None``.
"""

from __future__ import annotations

import logging
import typing as t
from collections.abc import Iterable

from ._validators import require_no_nul
from .errors import AlternateDataStreamError
from .platform import (
    EXTENSION_SEPARATOR,
    UNIX_SEPARATOR,
    WINDOWS_SEPARATOR,
    PathStyle,
    resolve_style,
)
from .prefix import PrefixKind, classify_prefix, get_prefix, get_prefix_length

logger = logging.getLogger(__name__)

NOT_FOUND: t.Final[int] = -1
_STREAM_MARKER: t.Final[str] = ":"


def index_of_last_separator(name: str | None) -> int:
    """Return the index of the last ``/`` or ``\\`` in *name*, or -1."""
    if name is None:
        return NOT_FOUND
    return max(name.rfind(UNIX_SEPARATOR), name.rfind(WINDOWS_SEPARATOR))


def _stream_marker_offset(name: str, last_separator: int) -> int:
    """Return where a stream ``:`` may first appear, skipping a drive marker."""
    offset = last_separator + 1
    prefix = classify_prefix(name, style=PathStyle.WINDOWS)
    if prefix.kind in (PrefixKind.DRIVE_RELATIVE, PrefixKind.DRIVE_ABSOLUTE):
        offset = max(offset, 2)
    return offset


def index_of_extension(name: str | None, *, style: PathStyle | None = None) -> int:
    """Return the index of the extension dot in *name*, or -1.

    Raises
    ------
    AlternateDataStreamError
        On Windows style, if a ``:`` follows the last separator anywhere but
        in the drive marker.
    """
    if name is None:
        return NOT_FOUND
    last_separator = index_of_last_separator(name)
    if resolve_style(style) is PathStyle.WINDOWS:
        offset = _stream_marker_offset(name, last_separator)
        if name.find(_STREAM_MARKER, offset) != NOT_FOUND:
            logger.debug("Rejecting alternate data stream name %r", name)
            raise AlternateDataStreamError(name)
    extension_pos = name.rfind(EXTENSION_SEPARATOR)
    return NOT_FOUND if last_separator > extension_pos else extension_pos


def _full_path(
    name: str | None, *, include_separator: bool, style: PathStyle | None
) -> str | None:
    if name is None:
        return None
    prefix = get_prefix_length(name, style=style)
    if prefix >= len(name):
        if include_separator:
            return get_prefix(name, style=style)
        return require_no_nul(name)
    index = index_of_last_separator(name)
    if index < 0:
        return require_no_nul(name[:prefix])
    end = index + (1 if include_separator else 0)
    if end == 0:
        end += 1
    return require_no_nul(name[:end])


def get_full_path(
    name: str | None, *, style: PathStyle | None = None
) -> str | None:
    """Return the prefix and directories of *name*, ending in a separator."""
    return _full_path(name, include_separator=True, style=style)


def get_full_path_no_end_separator(
    name: str | None, *, style: PathStyle | None = None
) -> str | None:
    """Return the prefix and directories of *name* without the last separator."""
    return _full_path(name, include_separator=False, style=style)


def _path(
    name: str | None, *, separator_add: int, style: PathStyle | None
) -> str | None:
    if name is None:
        return None
    prefix = get_prefix_length(name, style=style)
    index = index_of_last_separator(name)
    end = index + separator_add
    if prefix >= len(name) or index < 0 or prefix >= end:
        return ""
    return require_no_nul(name[prefix:end])


def get_path(name: str | None, *, style: PathStyle | None = None) -> str | None:
    """Return the directories of *name* without the prefix."""
    return _path(name, separator_add=1, style=style)


def get_path_no_end_separator(
    name: str | None, *, style: PathStyle | None = None
) -> str | None:
    """Return the directories of *name* without prefix or final separator."""
    return _path(name, separator_add=0, style=style)


def get_name(name: str | None, *, style: PathStyle | None = None) -> str | None:
    """Return the text after the last separator of *name*."""
    if name is None:
        return None
    get_prefix_length(name, style=style)  # rejects unparseable prefixes
    return require_no_nul(name)[index_of_last_separator(name) + 1 :]


def remove_extension(
    name: str | None, *, style: PathStyle | None = None
) -> str | None:
    """Return *name* without its extension, e.g. ``a/b.c.txt`` -> ``a/b.c``."""
    if name is None:
        return None
    require_no_nul(name)
    index = index_of_extension(name, style=style)
    if index == NOT_FOUND:
        return name
    return name[:index]


def get_base_name(
    name: str | None, *, style: PathStyle | None = None
) -> str | None:
    """Return the file name of *name* minus its extension."""
    base = get_name(name, style=style)
    if base is None:
        return None
    # stream markers are located against the full path; a bare name such as
    # ``b:c.txt`` would otherwise read as drive-relative
    index_of_extension(name, style=style)
    return remove_extension(base, style=style)


def get_extension(
    name: str | None, *, style: PathStyle | None = None
) -> str | None:
    """Return the extension of *name*, or ``""`` when it has none."""
    if name is None:
        return None
    get_prefix_length(name, style=style)
    index = index_of_extension(require_no_nul(name), style=style)
    if index == NOT_FOUND:
        return ""
    return name[index + 1 :]


def is_extension(
    name: str | None,
    extensions: str | Iterable[str] | None = None,
    *,
    style: PathStyle | None = None,
) -> bool:
    """Return ``True`` if the extension of *name* is one of *extensions*.

    An empty or missing *extensions* matches names without an extension.
    Comparison is case-sensitive.
    """
    if name is None:
        return False
    require_no_nul(name)
    if isinstance(extensions, str):
        extensions = (extensions,) if extensions else ()
    wanted = set(extensions or ())
    if not wanted:
        return index_of_extension(name, style=style) == NOT_FOUND
    return get_extension(name, style=style) in wanted


__all__ = [
    "NOT_FOUND",
    "get_base_name",
    "get_extension",
    "get_full_path",
    "get_full_path_no_end_separator",
    "get_name",
    "get_path",
    "get_path_no_end_separator",
    "index_of_extension",
    "index_of_last_separator",
    "is_extension",
    "remove_extension",
]

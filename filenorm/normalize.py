"""Collapsing of ``.``/``..`` segments and duplicate separators.

Normalization never touches the filesystem. A path whose ``..`` segments
would climb above its prefix has no normalized form and yields ``None``;
a malformed prefix raises :class:`~filenorm.errors.InvalidPrefixError`.

Examples (Unix separators)::

    /foo//               -> /foo/
    /foo/./              -> /foo/
    /foo/../bar          -> /bar
    /foo/../bar/../baz   -> /baz
    //server/foo/../bar  -> //server/bar
    //server/../bar      -> None
    C:\\foo\\..\\bar     -> C:/bar
    ~/foo/../bar/        -> ~/bar/
    ~/../bar             -> None
"""

from __future__ import annotations

import logging
import typing as t

from ._validators import require_no_nul
from .platform import PathStyle, flip_separator, resolve_style, to_separator
from .prefix import get_prefix_length

logger = logging.getLogger(__name__)

_DOT: t.Final[str] = "."


def _collapse_separators(chars: list[str], sep: str, prefix: int) -> None:
    # An empty prefix starts at 1 so a leading pair is compared, never indexed
    # before the start of the buffer.
    i = prefix if prefix != 0 else 1
    while i < len(chars):
        if chars[i] == sep and chars[i - 1] == sep:
            del chars[i - 1]
        else:
            i += 1


def _collapse_single_dots(chars: list[str], sep: str, prefix: int) -> bool:
    """Remove ``./`` segments; return ``True`` if the last one was removed."""
    ends_in_directory = False
    i = prefix + 1
    while i < len(chars):
        if (
            chars[i] == sep
            and chars[i - 1] == _DOT
            and (i == prefix + 1 or chars[i - 2] == sep)
        ):
            if i == len(chars) - 1:
                ends_in_directory = True
            del chars[i - 1 : i + 1]
        else:
            i += 1
    return ends_in_directory


def _collapse_double_dots(
    chars: list[str], sep: str, prefix: int
) -> tuple[bool, bool]:
    """Remove ``x/../`` pairs.

    Returns a ``(representable, ends_in_directory)`` pair; ``representable``
    is ``False`` when a ``..`` has no sibling left to cancel.
    """
    ends_in_directory = False
    i = prefix + 2
    while i < len(chars):
        if not (
            chars[i] == sep
            and chars[i - 1] == _DOT
            and chars[i - 2] == _DOT
            and (i == prefix + 2 or chars[i - 3] == sep)
        ):
            i += 1
            continue
        if i == prefix + 2:
            return False, ends_in_directory
        if i == len(chars) - 1:
            ends_in_directory = True
        for j in range(i - 4, prefix - 1, -1):
            if chars[j] == sep:
                # remove b/../ from a/b/../c
                del chars[j + 1 : i + 1]
                i = j + 2
                break
        else:
            # remove a/../ from a/../c
            del chars[prefix : i + 1]
            i = prefix + 2
    return True, ends_in_directory


def _do_normalize(
    name: str | None, separator: str, *, keep_separator: bool, style: PathStyle
) -> str | None:
    if name is None:
        return None
    require_no_nul(name)
    if not name:
        return name
    prefix = get_prefix_length(name, style=style)

    other = flip_separator(separator)
    chars = [separator if ch == other else ch for ch in name]

    # A trailing separator simplifies the scans below; it is removed again
    # unless the name ended in a directory.
    last_is_directory = True
    if chars[-1] != separator:
        chars.append(separator)
        last_is_directory = False

    _collapse_separators(chars, separator, prefix)
    if _collapse_single_dots(chars, separator, prefix):
        last_is_directory = True
    representable, ends_in_directory = _collapse_double_dots(chars, separator, prefix)
    if not representable:
        logger.debug("Path %r ascends above its prefix", name)
        return None
    if ends_in_directory:
        last_is_directory = True

    size = len(chars)
    if size <= 0:
        return ""
    if size <= prefix or (last_is_directory and keep_separator):
        return "".join(chars)
    return "".join(chars[:-1])


def _target_separator(unix_separator: bool | None, style: PathStyle) -> str:
    if unix_separator is None:
        return style.separator
    return to_separator(unix_separator=unix_separator)


@t.overload
def normalize(
    name: str,
    *,
    unix_separator: bool | None = None,
    keep_separator: bool = True,
    style: PathStyle | None = None,
) -> str | None: ...


@t.overload
def normalize(
    name: None,
    *,
    unix_separator: bool | None = None,
    keep_separator: bool = True,
    style: PathStyle | None = None,
) -> None: ...


def normalize(
    name: str | None,
    *,
    unix_separator: bool | None = None,
    keep_separator: bool = True,
    style: PathStyle | None = None,
) -> str | None:
    """Normalize *name*, removing double and single dot segments.

    Parameters
    ----------
    name : str | None
        The path to normalize. ``None`` is returned unchanged.
    unix_separator : bool | None, optional
        ``True`` to emit ``/``, ``False`` to emit ``\\``, ``None`` to emit the
        separator of *style*.
    keep_separator : bool, optional
        Retain a trailing separator when the input ends in a directory.
    style : PathStyle | None, optional
        Platform conventions; defaults to the system style.

    Returns
    -------
    str | None
        The normalized path, or ``None`` when ``..`` segments climb above the
        prefix.

    Raises
    ------
    IllegalCharacterError
        If *name* contains a NUL character.
    InvalidPrefixError
        If the prefix of *name* cannot be parsed.
    """
    resolved = resolve_style(style)
    return _do_normalize(
        name,
        _target_separator(unix_separator, resolved),
        keep_separator=keep_separator,
        style=resolved,
    )


def normalize_no_end_separator(
    name: str | None,
    *,
    unix_separator: bool | None = None,
    style: PathStyle | None = None,
) -> str | None:
    """Normalize *name* and drop any trailing separator.

    See :func:`normalize`; ``foo/bar/`` becomes ``foo/bar``.
    """
    return normalize(
        name, unix_separator=unix_separator, keep_separator=False, style=style
    )


__all__ = ["normalize", "normalize_no_end_separator"]

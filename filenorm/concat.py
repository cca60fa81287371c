"""Joining a base path with a relative or absolute addition."""

from __future__ import annotations

from .normalize import normalize
from .platform import UNIX_SEPARATOR, PathStyle, is_separator
from .prefix import get_prefix_length


def concat(
    base_path: str | None, name_to_add: str, *, style: PathStyle | None = None
) -> str | None:
    """Concatenate *name_to_add* onto *base_path* and normalize the result.

    An addition with a prefix of its own (``/b``, ``C:\\b``, ``~/b``) replaces
    the base entirely. The result uses the separator of *style*.

    ==================  ==============  ==============
    base_path           name_to_add     result
    ==================  ==============  ==============
    ``/foo/``           ``bar``         ``/foo/bar``
    ``/foo``            ``bar``         ``/foo/bar``
    ``/foo``            ``/bar``        ``/bar``
    ``/foo/a/``         ``../bar``      ``/foo/bar``
    ``/foo/``           ``../../bar``   ``None``
    ==================  ==============  ==============

    Returns
    -------
    str | None
        The joined path, or ``None`` when *base_path* is ``None`` and the
        addition is relative, or when the joined path climbs above its root.

    Raises
    ------
    InvalidPrefixError
        If either the addition or the joined path has an unparseable prefix.
    """
    prefix = get_prefix_length(name_to_add, style=style)
    if prefix > 0:
        return normalize(name_to_add, style=style)
    if base_path is None:
        return None
    if not base_path:
        return normalize(name_to_add, style=style)
    if is_separator(base_path[-1]):
        return normalize(base_path + name_to_add, style=style)
    return normalize(base_path + UNIX_SEPARATOR + name_to_add, style=style)


__all__ = ["concat"]

"""Equality and containment checks between path strings."""

from __future__ import annotations

import logging

from .case import CaseSensitivity
from .errors import InvalidPrefixError
from .normalize import normalize
from .platform import UNIX_SEPARATOR, PathStyle, to_separator

logger = logging.getLogger(__name__)


def _normalized_or_none(name: str, style: PathStyle | None) -> str | None:
    try:
        return normalize(name, style=style)
    except InvalidPrefixError:
        logger.debug("Cannot normalize %r for comparison", name)
        return None


def equals(
    name1: str | None,
    name2: str | None,
    *,
    normalize: bool = False,
    case: CaseSensitivity | None = CaseSensitivity.SENSITIVE,
    style: PathStyle | None = None,
) -> bool:
    """Return ``True`` if two file names are equal.

    Parameters
    ----------
    name1, name2 : str | None
        The names to compare. Two ``None`` values are equal; a single
        ``None`` never is.
    normalize : bool, optional
        Normalize both names first. A name that cannot be normalized (it
        climbs above its root or has an unparseable prefix) makes the names
        unequal.
    case : CaseSensitivity | None, optional
        The comparison policy; ``None`` means case-sensitive.
    style : PathStyle | None, optional
        Platform conventions for normalization and for resolving
        ``CaseSensitivity.SYSTEM``. Defaults to the system style.

    Raises
    ------
    IllegalCharacterError
        If *normalize* is set and either name contains a NUL character.
    """
    if name1 is None or name2 is None:
        return name1 is None and name2 is None
    if normalize:
        name1 = _normalized_or_none(name1, style)
        if name1 is None:
            return False
        name2 = _normalized_or_none(name2, style)
        if name2 is None:
            return False
    policy = CaseSensitivity.value_of(case, CaseSensitivity.SENSITIVE)
    return policy.check_equals(name1, name2, style)


def equals_on_system(
    name1: str | None, name2: str | None, *, style: PathStyle | None = None
) -> bool:
    """Compare two names using the case rules of the system."""
    return equals(name1, name2, case=CaseSensitivity.SYSTEM, style=style)


def equals_normalized(
    name1: str | None, name2: str | None, *, style: PathStyle | None = None
) -> bool:
    """Compare two names after normalizing them, case-sensitively."""
    return equals(name1, name2, normalize=True, style=style)


def equals_normalized_on_system(
    name1: str | None, name2: str | None, *, style: PathStyle | None = None
) -> bool:
    """Compare two normalized names using the case rules of the system."""
    return equals(
        name1, name2, normalize=True, case=CaseSensitivity.SYSTEM, style=style
    )


def directory_contains(
    canonical_parent: str | None,
    canonical_child: str | None,
    *,
    case: CaseSensitivity | None = CaseSensitivity.SYSTEM,
    style: PathStyle | None = None,
) -> bool:
    """Return ``True`` if *canonical_child* lies inside *canonical_parent*.

    Both arguments are expected to be canonical already; nothing is
    normalized here. A directory does not contain itself, and ``/a`` does
    not contain ``/ab``. The separator appended to the parent follows the
    style of the parent's first character.
    """
    if not canonical_parent or not canonical_child:
        return False
    policy = CaseSensitivity.value_of(case, CaseSensitivity.SYSTEM)
    if policy.check_equals(canonical_parent, canonical_child, style):
        return False
    separator = to_separator(unix_separator=canonical_parent[0] == UNIX_SEPARATOR)
    parent = canonical_parent
    if parent[-1] != separator:
        parent += separator
    return policy.check_starts_with(canonical_child, parent, style)


__all__ = [
    "directory_contains",
    "equals",
    "equals_normalized",
    "equals_normalized_on_system",
    "equals_on_system",
]

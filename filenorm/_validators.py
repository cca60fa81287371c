"""Shared validation helpers."""

from __future__ import annotations

import typing as t

from .errors import IllegalCharacterError

NUL: t.Final[str] = "\0"


def require_no_nul(path: str) -> str:
    """Return *path* unchanged, rejecting it if it contains a NUL character."""
    if NUL in path:
        raise IllegalCharacterError(path)
    return path

"""Callable path comparators for collaborators that filter file names."""

from __future__ import annotations

import typing as t

from .case import CaseSensitivity
from .compare import directory_contains, equals
from .components import get_extension
from .errors import AlternateDataStreamError, InvalidPrefixError
from .wildcard import wildcard_match

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .platform import PathStyle


class Comparator(t.Protocol):
    """Callable returning ``True`` when a path matches."""

    def __call__(self, value: str) -> bool:
        """Return ``True`` if *value* satisfies the comparison."""
        ...


class WildcardName:
    """Match if *value* matches the wildcard ``pattern``."""

    def __init__(
        self,
        pattern: str,
        case: CaseSensitivity = CaseSensitivity.SENSITIVE,
        style: PathStyle | None = None,
    ) -> None:
        self.pattern = pattern
        self.case = case
        self.style = style

    def __call__(self, value: str) -> bool:
        """Return ``True`` if *value* matches the pattern."""
        return wildcard_match(value, self.pattern, case=self.case, style=self.style)

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"WildcardName(pattern={self.pattern!r}, case={self.case})"


class HasExtension:
    """Match if the extension of *value* is one of ``extensions``.

    With no extensions, match names that have no extension at all. Names the
    extractor rejects (for example Windows stream names) never match; a NUL
    character still raises.
    """

    def __init__(self, *extensions: str, style: PathStyle | None = None) -> None:
        self.extensions = frozenset(extensions)
        self.style = style

    def __call__(self, value: str) -> bool:
        """Return ``True`` if *value* carries a wanted extension."""
        try:
            extension = get_extension(value, style=self.style)
        except (InvalidPrefixError, AlternateDataStreamError):
            return False
        if not self.extensions:
            return extension == ""
        return extension in self.extensions

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"HasExtension(extensions={sorted(self.extensions)!r})"


class SamePath:
    """Match if *value* names the same path as ``path``."""

    def __init__(
        self,
        path: str,
        *,
        normalize: bool = True,
        case: CaseSensitivity = CaseSensitivity.SYSTEM,
        style: PathStyle | None = None,
    ) -> None:
        self.path = path
        self.normalize = normalize
        self.case = case
        self.style = style

    def __call__(self, value: str) -> bool:
        """Return ``True`` if *value* equals ``path``."""
        return equals(
            value,
            self.path,
            normalize=self.normalize,
            case=self.case,
            style=self.style,
        )

    def __repr__(self) -> str:
        """Return a debug representation."""
        return (
            f"SamePath(path={self.path!r}, normalize={self.normalize}, "
            f"case={self.case})"
        )


class InsideDirectory:
    """Match if *value* lies strictly inside the directory ``parent``."""

    def __init__(
        self,
        parent: str,
        case: CaseSensitivity = CaseSensitivity.SYSTEM,
        style: PathStyle | None = None,
    ) -> None:
        self.parent = parent
        self.case = case
        self.style = style

    def __call__(self, value: str) -> bool:
        """Return ``True`` if ``parent`` contains *value*."""
        return directory_contains(
            self.parent, value, case=self.case, style=self.style
        )

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"InsideDirectory(parent={self.parent!r}, case={self.case})"


__all__ = [
    "Comparator",
    "HasExtension",
    "InsideDirectory",
    "SamePath",
    "WildcardName",
]

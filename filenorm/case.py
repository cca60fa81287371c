"""Case-sensitivity policies applied by every comparison in filenorm."""

from __future__ import annotations

import enum

from .platform import PathStyle, resolve_style


def _chars_equal_ignore_case(a: str, b: str) -> bool:
    return a == b or a.upper() == b.upper() or a.lower() == b.lower()


class CaseSensitivity(enum.Enum):
    """How file names are compared.

    ``SYSTEM`` is resolved against a :class:`~filenorm.platform.PathStyle`
    before use: insensitive on Windows, sensitive elsewhere. Insensitive
    comparison works character by character and never consults the locale.
    """

    SENSITIVE = "Sensitive"
    INSENSITIVE = "Insensitive"
    SYSTEM = "System"

    @classmethod
    def for_name(cls, name: str) -> CaseSensitivity:
        """Return the policy whose display name is *name*."""
        for member in cls:
            if member.value == name:
                return member
        msg = f"unknown case sensitivity: {name!r}"
        raise ValueError(msg)

    @classmethod
    def value_of(
        cls, policy: CaseSensitivity | None, default: CaseSensitivity
    ) -> CaseSensitivity:
        """Return *policy*, or *default* when it is ``None``."""
        return default if policy is None else policy

    def resolve(self, style: PathStyle | None = None) -> CaseSensitivity:
        """Return a concrete ``SENSITIVE`` or ``INSENSITIVE`` policy."""
        if self is not CaseSensitivity.SYSTEM:
            return self
        if resolve_style(style).is_case_sensitive:
            return CaseSensitivity.SENSITIVE
        return CaseSensitivity.INSENSITIVE

    def is_case_sensitive(self, style: PathStyle | None = None) -> bool:
        """Return ``True`` when the resolved policy is case-sensitive."""
        return self.resolve(style) is CaseSensitivity.SENSITIVE

    def check_region_matches(
        self, text: str, start: int, token: str, style: PathStyle | None = None
    ) -> bool:
        """Return ``True`` if *token* occurs in *text* at index *start*."""
        end = start + len(token)
        if start < 0 or end > len(text):
            return False
        if self.is_case_sensitive(style):
            return text.startswith(token, start)
        return all(
            _chars_equal_ignore_case(text[start + offset], ch)
            for offset, ch in enumerate(token)
        )

    def check_equals(
        self, a: str, b: str, style: PathStyle | None = None
    ) -> bool:
        """Compare two strings under this policy."""
        return len(a) == len(b) and self.check_region_matches(a, 0, b, style)

    def check_starts_with(
        self, text: str, start: str, style: PathStyle | None = None
    ) -> bool:
        """Return ``True`` if *text* begins with *start*."""
        return self.check_region_matches(text, 0, start, style)

    def check_ends_with(
        self, text: str, end: str, style: PathStyle | None = None
    ) -> bool:
        """Return ``True`` if *text* ends with *end*."""
        return self.check_region_matches(text, len(text) - len(end), end, style)

    def check_index_of(
        self, text: str, start: int, search: str, style: PathStyle | None = None
    ) -> int:
        """Return the first index of *search* in *text* at or after *start*.

        Returns ``-1`` when there is no such occurrence.
        """
        if self.is_case_sensitive(style):
            return text.find(search, max(start, 0))
        last = len(text) - len(search)
        for index in range(max(start, 0), last + 1):
            if self.check_region_matches(text, index, search, style):
                return index
        return -1

    def __str__(self) -> str:
        """Return the display name."""
        return self.value


__all__ = ["CaseSensitivity"]

"""Unit tests for segment normalization."""

from __future__ import annotations

import pytest

from filenorm.errors import IllegalCharacterError, InvalidPrefixError
from filenorm.normalize import normalize, normalize_no_end_separator
from filenorm.platform import PathStyle


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("", ""),
        ("a/b", "a/b"),
        ("a\\b/c.txt", "a/b/c.txt"),
        ("\\a\\b/c.txt", "/a/b/c.txt"),
        ("\\\\server\\a\\b/c.txt", "//server/a/b/c.txt"),
        ("~\\a\\b/c.txt", "~/a/b/c.txt"),
        ("~user\\a\\b/c.txt", "~user/a/b/c.txt"),
        ("a/../b", "b"),
        ("a/./b", "a/b"),
        ("a/b/../c", "a/c"),
        ("/a/b/../../c", "/c"),
        ("a//b", "a/b"),
        ("/a//b//", "/a/b/"),
        ("a/b/", "a/b/"),
        ("./a", "a"),
        ("./", ""),
        (".", ""),
        ("a/..", ""),
        ("foo/bar/..", "foo/"),
        ("/a/./b/.", "/a/b/"),
        ("/a/b/./", "/a/b/"),
        ("a/b/c/../../d", "a/d"),
        ("//server/a/../b", "//server/b"),
        ("//server/a/../b/", "//server/b/"),
        ("~/a/../b/", "~/b/"),
        ("~", "~/"),
        ("~user", "~user/"),
        ("/", "/"),
        ("...", "..."),
        ("a/.../b", "a/.../b"),
        (".a/b", ".a/b"),
        ("a./b", "a./b"),
    ],
)
def test_normalize_unix_separator(name: str, expected: str) -> None:
    """Dots and duplicate separators collapse; trailing directories stay."""
    assert normalize(name, unix_separator=True) == expected


@pytest.mark.parametrize(
    "name",
    [
        "..",
        "../a",
        "/../",
        "/../a",
        "a/../../b",
        "a/b/../../../c",
        "//server/../a",
        "~/../a",
        "~user/../a",
        "./..",
    ],
)
def test_ascending_above_root_is_unrepresentable(name: str) -> None:
    """Climbing above the prefix yields ``None``, not an empty string."""
    assert normalize(name, unix_separator=True) is None


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("C:\\a\\b/c.txt", "C:\\a\\b\\c.txt"),
        ("C:\\", "C:\\"),
        ("C:", "C:"),
        ("C:a\\..\\b", "C:b"),
        ("C:\\a\\..\\b\\", "C:\\b\\"),
        ("a/b/../c", "a\\c"),
        ("//server/a/b", "\\\\server\\a\\b"),
    ],
)
def test_normalize_windows_style(name: str, expected: str) -> None:
    """Windows style emits backslashes and keeps drive prefixes."""
    assert normalize(name, style=PathStyle.WINDOWS) == expected


@pytest.mark.parametrize("name", ["C:\\..\\a", "C:..\\a", "C:/../a"])
def test_drive_prefixes_cannot_be_climbed(name: str) -> None:
    """Drive prefixes are roots too."""
    assert normalize(name, style=PathStyle.WINDOWS) is None


def test_separator_choice_overrides_style() -> None:
    """``unix_separator`` wins over the style's native separator."""
    assert normalize("a\\b", unix_separator=True, style=PathStyle.WINDOWS) == "a/b"
    assert normalize("a/b", unix_separator=False, style=PathStyle.UNIX) == "a\\b"
    assert normalize("a\\b") == "a/b"


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("a/b/", "a/b"),
        ("/a//b//", "/a/b"),
        ("foo/bar/..", "foo"),
        ("/", "/"),
        ("~/", "~/"),
        ("~", "~/"),
        ("a/b/.", "a/b"),
    ],
)
def test_normalize_no_end_separator(name: str, expected: str) -> None:
    """The trailing separator is dropped unless it is part of the prefix."""
    assert normalize_no_end_separator(name, unix_separator=True) == expected
    assert normalize(name, keep_separator=False) == expected


def test_none_passes_through() -> None:
    """``None`` is not a path and is returned unchanged."""
    assert normalize(None) is None
    assert normalize_no_end_separator(None) is None


def test_nul_is_rejected_before_anything_else() -> None:
    """A NUL character is rejected even when the prefix is malformed."""
    with pytest.raises(IllegalCharacterError):
        normalize("a/\0/b")
    with pytest.raises(IllegalCharacterError):
        normalize(":\0")


@pytest.mark.parametrize("name", ["//server", ":a", "///a", "\\\\bad_host\\a"])
def test_malformed_prefix_is_rejected(name: str) -> None:
    """Malformed input raises instead of being guessed at."""
    with pytest.raises(InvalidPrefixError):
        normalize(name)


@pytest.mark.parametrize(
    "name",
    ["a/b/c/", "/a/b/", "//server/a/", "~/a/", "~user/", "C:/a/b/", "a/.../b"],
)
def test_normalize_is_idempotent(name: str) -> None:
    """Normalizing a normalized path changes nothing."""
    once = normalize(name)
    assert once is not None
    assert normalize(once) == once

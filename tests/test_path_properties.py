"""Property-based tests for normalization, decomposition and matching."""

from __future__ import annotations

from hypothesis import assume, given
from hypothesis import strategies as st

from filenorm import (
    CaseSensitivity,
    PathStyle,
    classify_prefix,
    equals,
    get_full_path,
    get_name,
    normalize,
    wildcard_match,
)

# Relative tails never contain ``~`` or ``:``: collapsing ``x/../`` in front of
# either would expose a home or drive marker and legitimately change the kind.
TAIL_ALPHABET = "ab./\\"

tails = st.text(alphabet=TAIL_ALPHABET, max_size=16)
unix_prefixes = st.sampled_from(["", "/", "\\", "~", "~/", "~user\\", "//server/"])
windows_prefixes = st.sampled_from(
    ["", "\\", "C:", "c:\\", "C:/", "~\\", "\\\\10.0.0.1\\", "\\\\::1\\"]
)


def _styled_paths() -> st.SearchStrategy[tuple[PathStyle, str]]:
    unix = st.tuples(st.just(PathStyle.UNIX), st.builds(str.__add__, unix_prefixes, tails))
    windows = st.tuples(
        st.just(PathStyle.WINDOWS), st.builds(str.__add__, windows_prefixes, tails)
    )
    return unix | windows


@given(_styled_paths())
def test_normalization_preserves_prefix_kind(case: tuple[PathStyle, str]) -> None:
    """Normalizing never changes what kind of root a path has."""
    style, name = case
    before = classify_prefix(name, style=style)
    assume(before.is_valid)
    result = normalize(name, style=style)
    assume(result is not None)
    assert classify_prefix(result, style=style).kind is before.kind


@given(_styled_paths())
def test_normalization_is_idempotent(case: tuple[PathStyle, str]) -> None:
    """A normalized path is its own normal form."""
    style, name = case
    assume(classify_prefix(name, style=style).is_valid)
    once = normalize(name, style=style)
    assume(once is not None)
    assert normalize(once, style=style) == once


@given(st.text(alphabet=TAIL_ALPHABET, max_size=16))
def test_full_path_and_name_rebuild_the_original(name: str) -> None:
    """The full path and the name are complementary slices."""
    assume(classify_prefix(name).is_valid)
    assert get_full_path(name) + get_name(name) == name


@given(st.text(max_size=24).filter(lambda s: "*" not in s and "?" not in s))
def test_literal_pattern_matches_itself(name: str) -> None:
    """Without wildcards a pattern matches exactly its own text."""
    assert wildcard_match(name, name)
    assert wildcard_match(name, "*")
    assert not wildcard_match(name + "x", name)


@given(st.text(alphabet="abc./", min_size=1, max_size=16), st.data())
def test_question_marks_match_any_single_character(name: str, data: st.DataObject) -> None:
    """Replacing characters by ``?`` keeps the pattern matching."""
    index = data.draw(st.integers(min_value=0, max_value=len(name) - 1))
    pattern = name[:index] + "?" + name[index + 1 :]
    assert wildcard_match(name, pattern)
    assert not wildcard_match(name, pattern + "?")


@given(st.text(alphabet="aAbB/", max_size=12))
def test_insensitive_equality_ignores_case(name: str) -> None:
    """Insensitive equality holds between a name and its swapped case."""
    assert equals(name, name.swapcase(), case=CaseSensitivity.INSENSITIVE)
    assert equals(name, name.swapcase()) is (name == name.swapcase())

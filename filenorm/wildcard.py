"""Glob-style matching of file names with ``?`` and ``*``.

``?`` matches exactly one character and ``*`` matches zero or more. There is
no escaping, and separators are ordinary characters, so ``a/*`` matches
``a/b/c.txt``. Matching backtracks over an explicit stack of
``(token_index, text_index)`` save points instead of recursing.
"""

from __future__ import annotations

import typing as t

from .case import CaseSensitivity
from .platform import PathStyle

ANY_CHAR: t.Final[str] = "?"
ANY_CHARS: t.Final[str] = "*"


def split_on_tokens(text: str) -> tuple[str, ...]:
    """Split a wildcard pattern into literal, ``?`` and ``*`` tokens.

    Consecutive ``*`` collapse into one token::

        split_on_tokens("a**b?c") == ("a", "*", "b", "?", "c")
    """
    if ANY_CHAR not in text and ANY_CHARS not in text:
        return (text,)

    tokens: list[str] = []
    buffer: list[str] = []
    previous = ""
    for ch in text:
        if ch in (ANY_CHAR, ANY_CHARS):
            if buffer:
                tokens.append("".join(buffer))
                buffer.clear()
            if ch == ANY_CHAR:
                tokens.append(ANY_CHAR)
            elif previous != ANY_CHARS:
                tokens.append(ANY_CHARS)
        else:
            buffer.append(ch)
        previous = ch
    if buffer:
        tokens.append("".join(buffer))
    return tuple(tokens)


def wildcard_match(
    name: str | None,
    pattern: str | None,
    *,
    case: CaseSensitivity | None = CaseSensitivity.SENSITIVE,
    style: PathStyle | None = None,
) -> bool:
    """Return ``True`` if *name* matches the wildcard *pattern*.

    ``None`` matches ``None``; a single ``None`` never matches.

    >>> wildcard_match("c.txt", "*.txt")
    True
    >>> wildcard_match("c.txt", "*.???")
    True
    >>> wildcard_match("c.txt", "*.????")
    False
    """
    if name is None and pattern is None:
        return True
    if name is None or pattern is None:
        return False
    policy = CaseSensitivity.value_of(case, CaseSensitivity.SENSITIVE).resolve(style)
    tokens = split_on_tokens(pattern)
    any_chars = False
    text_idx = 0
    token_idx = 0
    backtrack: list[tuple[int, int]] = []

    while True:
        if backtrack:
            token_idx, text_idx = backtrack.pop()
            any_chars = True

        while token_idx < len(tokens):
            token = tokens[token_idx]
            if token == ANY_CHAR:
                text_idx += 1
                if text_idx > len(name):
                    break
                any_chars = False
            elif token == ANY_CHARS:
                any_chars = True
                if token_idx == len(tokens) - 1:
                    text_idx = len(name)
            else:
                if any_chars:
                    text_idx = policy.check_index_of(name, text_idx, token)
                    if text_idx == -1:
                        break
                    repeat = policy.check_index_of(name, text_idx + 1, token)
                    if repeat >= 0:
                        backtrack.append((token_idx, repeat))
                elif not policy.check_region_matches(name, text_idx, token):
                    break
                text_idx += len(token)
                any_chars = False
            token_idx += 1

        if token_idx == len(tokens) and text_idx == len(name):
            return True
        if not backtrack:
            return False


def wildcard_match_on_system(
    name: str | None, pattern: str | None, *, style: PathStyle | None = None
) -> bool:
    """Match *name* against *pattern* using the case rules of the system."""
    return wildcard_match(name, pattern, case=CaseSensitivity.SYSTEM, style=style)


__all__ = [
    "ANY_CHAR",
    "ANY_CHARS",
    "split_on_tokens",
    "wildcard_match",
    "wildcard_match_on_system",
]

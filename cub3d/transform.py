"""String building helpers: duplication, slicing, joining, trimming and splitting.

Like the other string helpers, every input string ends at its first NUL
character, if it has one.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

from .strings import strlen

_BLANKS = " \t\n"


def _body(text: str) -> str:
    """The part of text before its first NUL character."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return text[: strlen(text)]


def strdup(text: str) -> str:
    """A copy of text up to its terminating NUL."""
    return _body(text)


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text beginning at index start.

    A start at or beyond the end of the text yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    body = _body(text)
    if start >= len(body):
        return ""
    return body[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """The concatenation of s1 and s2."""
    return _body(s1) + _body(s2)


def strjoin_three(s1: str, s2: str, s3: str) -> str:
    """The concatenation of s1, s2 and s3."""
    return _body(s1) + _body(s2) + _body(s3)


def strtrim(text: str, charset: str) -> str:
    """text with every leading and trailing character found in charset removed."""
    body = _body(text)
    chars = _body(charset)
    if not chars:
        return body
    return body.strip(chars)


def split(text: str, sep: str) -> list[str]:
    """The non-empty pieces of text between occurrences of the character sep."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in _body(text).split(sep) if piece]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string made of func(index, character) for every character of text."""
    return "".join(func(index, ch) for index, ch in enumerate(_body(text)))


def _is_terminator(item: Any) -> bool:
    return item == "\0" or (isinstance(item, int) and not isinstance(item, bool) and item == 0)


def striteri(text: MutableSequence, func: Callable[[int, Any], Any]) -> None:
    """Call func(index, character) for each character of a mutable sequence.

    Iteration stops at a NUL element. A return value other than None
    replaces the character in place.
    """
    if isinstance(text, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence of characters")
    for index, item in enumerate(list(text)):
        if _is_terminator(item):
            break
        replacement = func(index, item)
        if replacement is not None:
            text[index] = replacement


def first_word(text: str) -> str:
    """The first run of characters not separated by space, tab or newline."""
    body = _body(text).lstrip(_BLANKS)
    for index, ch in enumerate(body):
        if ch in _BLANKS:
            return body[:index]
    return body
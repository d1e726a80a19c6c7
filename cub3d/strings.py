"""C-style string searching, comparison and bounded copying on Python strings.

A string ends at its first NUL character, if it has one, just as a C string
would. Positions are returned as indices, and ``None`` stands for "not found".
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_NUL = "\0"


def _terminated(text: str) -> str:
    """The part of text before its first NUL character."""
    end = text.find(_NUL)
    return text if end < 0 else text[:end]


def _char(ch: CharLike) -> str:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ch
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected int or str, got {type(ch).__name__}")
    if not 0 <= ch <= 0x10FFFF:
        raise ValueError(f"character code out of range: {ch}")
    return chr(ch)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")


def strlen(text: str) -> int:
    """Number of characters before the terminating NUL (or the whole string)."""
    return len(_terminated(text))


def strchr(text: str, ch: CharLike) -> int | None:
    """Index of the first occurrence of ch, or None.

    Searching for NUL yields the index of the terminator.
    """
    target = _char(ch)
    body = _terminated(text)
    if target == _NUL:
        return len(body)
    index = body.find(target)
    return None if index < 0 else index


def strrchr(text: str, ch: CharLike) -> int | None:
    """Index of the last occurrence of ch, or None.

    Searching for NUL yields the index of the terminator.
    """
    target = _char(ch)
    body = _terminated(text)
    if target == _NUL:
        return len(body)
    index = body.rfind(target)
    return None if index < 0 else index


def _compare(a: str, b: str, limit: int | None) -> int:
    left = _terminated(a)
    right = _terminated(b)
    length = max(len(left), len(right)) + 1
    if limit is not None:
        length = min(length, limit)
    for i in range(length):
        lc = ord(left[i]) if i < len(left) else 0
        rc = ord(right[i]) if i < len(right) else 0
        if lc != rc or lc == 0:
            return lc - rc
    return 0


def strcmp(a: str, b: str) -> int:
    """Difference of the first differing characters' codes, or 0 if equal."""
    return _compare(a, b, None)


def strncmp(a: str, b: str, n: int) -> int:
    """Like strcmp, but compares at most n characters."""
    _check_size(n)
    return _compare(a, b, n)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of needle within the first length characters of haystack, or None.

    An empty needle is found at index 0.
    """
    _check_size(length)
    target = _terminated(needle)
    if not target:
        return 0
    index = _terminated(haystack)[:length].find(target)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters (terminator included).

    Returns the copied text and the full length of src; comparing the two
    tells whether the copy was truncated.
    """
    _check_size(size)
    source = _terminated(src)
    if size == 0:
        return "", len(source)
    return source[: size - 1], len(source)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters (terminator included).

    Returns the resulting text and the length the concatenation tried to
    create. When dest already fills the buffer it is returned unchanged and
    the length is size plus the length of src.
    """
    _check_size(size)
    target = _terminated(dest)
    source = _terminated(src)
    dest_len = min(len(target), size)
    if dest_len >= size:
        return target, size + len(source)
    room = size - 1 - dest_len
    return target + source[:room], dest_len + len(source)
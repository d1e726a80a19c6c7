"""Writing characters, strings and numbers to a stream or a file descriptor."""

from __future__ import annotations

import os
from typing import IO, Union

from .strings import strlen

Target = Union[int, IO[str]]


def _write(text: str, stream: Target) -> None:
    if isinstance(stream, bool):
        raise TypeError("stream must be a file object or a descriptor")
    if isinstance(stream, int):
        data = text.encode()
        while data:
            written = os.write(stream, data)
            data = data[written:]
    else:
        stream.write(text)


def putchar_fd(c: str, stream: Target) -> None:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(c, stream)


def putstr_fd(text: str, stream: Target) -> None:
    """Write text up to its terminating NUL."""
    _write(text[: strlen(text)], stream)


def putendl_fd(text: str, stream: Target) -> None:
    """Write text up to its terminating NUL, followed by a newline."""
    _write(text[: strlen(text)] + "\n", stream)


def putnbr_fd(n: int, stream: Target) -> None:
    """Write the decimal form of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    _write(f"{n:d}", stream)
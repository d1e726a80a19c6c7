"""Byte-buffer helpers operating on bytearray and other writable buffers."""

from __future__ import annotations

import sys

SIZE_MAX = sys.maxsize * 2 + 1


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer size {len(buf)}")


def bzero(buf, n: int) -> None:
    """Zero the first n bytes of buf in place."""
    _check_length(n, buf)
    buf[:n] = bytes(n)


def memset(buf, value: int, n: int):
    """Fill the first n bytes of buf with the low byte of value; returns buf."""
    _check_length(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def memcpy(dest, src, n: int):
    """Copy n bytes from src to the start of dest; returns dest."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest, src, n: int):
    """Copy n bytes from src to dest, safe when the two regions overlap; returns dest."""
    _check_length(n, dest, src)
    chunk = bytes(src[:n])
    dest[:n] = chunk
    return dest


def memchr(data, value: int, n: int) -> int | None:
    """Index of the first byte equal to value's low byte within n bytes, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Difference of the first differing bytes within n bytes, or 0 if equal."""
    _check_length(n, a, b)
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of count * size bytes.

    A zero count or size yields a one-byte buffer; a product that would not
    fit in a size_t raises OverflowError.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray(1)
    if count > SIZE_MAX // size:
        raise OverflowError("requested allocation size overflows")
    return bytearray(count * size)
"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterator
from typing import Any

from .strings import strlen

_PIECE = re.compile(r"%(.)|%|[^%]+", re.DOTALL)

_INT_MIN = -(1 << 31)
_UINT_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1


def _require_int(value: Any, conv: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conv} expects an int, got {type(value).__name__}")
    return value


def _signed(value: int) -> int:
    return (value - _INT_MIN) % (1 << 32) + _INT_MIN


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value[: strlen(value)]


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = _require_int(value, "p") & _POINTER_MASK
    return f"0x{address:x}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda v: str(_signed(_require_int(v, "d"))),
    "i": lambda v: str(_signed(_require_int(v, "i"))),
    "u": lambda v: str(_require_int(v, "u") & _UINT_MASK),
    "x": lambda v: f"{_require_int(v, 'x') & _UINT_MASK:x}",
    "X": lambda v: f"{_require_int(v, 'X') & _UINT_MASK:X}",
}


def _next_arg(args: Iterator[Any], conv: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conv}") from None


def format_printf(fmt: str, *args: Any) -> str:
    """Render fmt with args as printf would.

    An unknown conversion is dropped without consuming an argument, a lone
    '%' at the end is kept as is, and extra arguments are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    remaining = iter(args)
    pieces = []
    for match in _PIECE.finditer(fmt[: strlen(fmt)]):
        conv = match.group(1)
        if conv is None:
            pieces.append(match.group(0))
        elif conv == "%":
            pieces.append("%")
        elif conv in _CONVERSIONS:
            pieces.append(_CONVERSIONS[conv](_next_arg(remaining, conv)))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered format to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)
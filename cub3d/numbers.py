"""Conversions between text and 32-bit signed integers."""

from __future__ import annotations

from .chars import is_digit

_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))

_SPACE = " \t\n\v\f\r"


def _wrap_int(value: int) -> int:
    """Reduce value to a 32-bit signed integer, wrapping on overflow."""
    return (value - _INT_MIN) % _INT_MOD + _INT_MIN


def _skip_space(text: str) -> int:
    return len(text) - len(text.lstrip(_SPACE))


def atoi(text: str) -> int:
    """Parse a decimal integer after optional white space and one sign.

    Parsing stops at the first non-digit; the result wraps like a C int.
    """
    i = _skip_space(text)
    sign = 1
    if i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    result = 0
    for ch in text[i:]:
        if not is_digit(ch):
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return _wrap_int(_wrap_int(result) * sign)


def _check_base(base: str) -> int:
    for ch in base:
        if ch in "+-" or not 32 < ord(ch) <= 126:
            raise ValueError(f"invalid character {ch!r} in base")
    if len(set(base)) != len(base):
        raise ValueError("base has repeated characters")
    if len(base) < 2:
        raise ValueError("base needs at least two characters")
    return len(base)


def atoi_base(text: str, base: str) -> int:
    """Parse text as a number written with the digit characters of base.

    White space is skipped, then any run of signs (each '-' flips the sign).
    A base with fewer than two characters, a repeated character, a sign,
    white space or a non-printable character raises ValueError.
    """
    radix = _check_base(base)
    values = {ch: index for index, ch in enumerate(base)}
    i = _skip_space(text)
    sign = 1
    while i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -sign
        i += 1
    result = 0
    for ch in text[i:]:
        digit = values.get(ch)
        if digit is None:
            break
        result = result * radix + digit
    return _wrap_int(_wrap_int(result) * sign)


def itoa(n: int) -> str:
    """Decimal text of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return f"{n:d}"
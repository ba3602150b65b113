"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")


def isalpha(c: int) -> bool:
    """True for ASCII letters."""
    return ord("A") <= c <= ord("Z") or ord("a") <= c <= ord("z")


def isdigit(c: int) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= c <= ord("9")


def isalnum(c: int) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: int) -> bool:
    """True for values in the 7-bit ASCII range."""
    return 0 <= c <= 127


def isprint(c: int) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= c <= 126


def tolower(c: int) -> int:
    """Map an upper-case ASCII letter to lower case; return anything else unchanged."""
    if ord("A") <= c <= ord("Z"):
        return c + 32
    return c


def toupper(c: int) -> int:
    """Map a lower-case ASCII letter to upper case; return anything else unchanged."""
    if ord("a") <= c <= ord("z"):
        return c - 32
    return c


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, C style.

    Leading whitespace is skipped, one sign is accepted, parsing stops at the
    first non-digit, and the result wraps to a 32-bit signed integer.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    value = int(digits) if digits else 0
    return _wrap32(value * sign)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)
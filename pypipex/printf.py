"""A small formatter supporting the conversions ``%c %s %p %d %i %u %x %X %%``."""

from __future__ import annotations

import re
import sys
from typing import Any, Iterator, Optional, TextIO

_DIRECTIVE = re.compile(r"%([cspdiuxX%])")

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None

    if spec == "c":
        if isinstance(value, int):
            return chr(value & 0xFF)
        if isinstance(value, str) and len(value) == 1:
            return value
        raise TypeError(f"%c expects a character, got {value!r}")
    if spec == "s":
        if value is None:
            return NULL_STRING
        if not isinstance(value, str):
            raise TypeError(f"%s expects a string, got {type(value).__name__}")
        return value
    if spec == "p":
        address = 0 if value is None else _require_int(value, spec) & _ULONG_MASK
        return NULL_POINTER if address == 0 else f"0x{address:x}"
    number = _require_int(value, spec)
    if spec in "di":
        return str(_to_int32(number))
    unsigned = number & _UINT_MASK
    if spec == "u":
        return str(unsigned)
    if spec == "x":
        return f"{unsigned:x}"
    return f"{unsigned:X}"


def render(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with every directive replaced by the next argument.

    A ``%`` not followed by a known conversion is kept as it is. Surplus
    arguments are ignored; missing ones raise TypeError.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    values = iter(args)
    return _DIRECTIVE.sub(lambda match: _convert(match.group(1), values), fmt)


def print_formatted(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the rendered text to ``stream`` and return the number of characters written."""
    text = render(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)
"""Writing characters, strings and integers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from pypipex.chars import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str | int, stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream`` (standard output by default).

    An integer is taken as a character code and reduced to its low byte.
    """
    if isinstance(c, int):
        c = chr(c & 0xFF)
    elif not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``stream`` (standard output by default)."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    _target(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline."""
    put_str(text, stream)
    _target(stream).write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of a 32-bit signed integer.

    Raises OverflowError for values outside the 32-bit range.
    """
    put_str(itoa(n), stream)
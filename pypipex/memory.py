"""Byte-buffer primitives working on mutable ``bytearray`` objects."""

from __future__ import annotations

import sys

SIZE_MAX = sys.maxsize * 2 + 1


def _check_span(buf: bytes | bytearray, n: int, offset: int = 0) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if offset < 0:
        raise ValueError(f"offset must not be negative, got {offset}")
    if offset + n > len(buf):
        raise ValueError(
            f"span of {n} bytes at offset {offset} exceeds buffer of {len(buf)} bytes"
        )


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero, in place."""
    _check_span(buf, n)
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes.

    Raises OverflowError when the total would not fit in a ``size_t``.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size and nmemb > SIZE_MAX // size:
        raise OverflowError("requested allocation size overflows")
    return bytearray(nmemb * size)


def memchr(buf: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the offset of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_span(buf, n)
    offset = bytes(buf[:n]).find(c & 0xFF)
    return None if offset == -1 else offset


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values.

    Returns the difference of the first differing pair, or 0 when equal.
    """
    _check_span(a, n)
    _check_span(b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` into the start of ``dest`` and return ``dest``."""
    _check_span(dest, n)
    _check_span(src, n)
    dest[:n] = src[:n]
    return dest


def memmove(dest: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``dest`` from ``src_offset`` to ``dest_offset``.

    Overlapping regions are handled correctly. Returns ``dest``.
    """
    _check_span(dest, n, dest_offset)
    _check_span(dest, n, src_offset)
    chunk = bytes(dest[src_offset : src_offset + n])
    dest[dest_offset : dest_offset + n] = chunk
    return dest


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``; return ``buf``."""
    _check_span(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf
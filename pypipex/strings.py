"""String helpers with C-library semantics, expressed over Python ``str``."""

from __future__ import annotations

from typing import Callable, Optional

_NUL = "\0"


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_count(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")


def _char_at(text: str, index: int) -> int:
    """Code of the character at ``index``, or 0 past the end (the terminator)."""
    return ord(text[index]) if index < len(text) else 0


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _check_char(sep)
    return [piece for piece in text.split(sep) if piece]


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    index = text.find(c)
    if index == -1:
        return len(text) if c == _NUL else None
    return index


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index == -1 else index


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first pair of differing characters, or 0 when equal."""
    index = 0
    while index < len(s1) and _char_at(s1, index) == _char_at(s2, index):
        index += 1
    return _char_at(s1, index) - _char_at(s2, index)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    _check_count(n, "character count")
    if n == 0:
        return 0
    index = 0
    while (
        index < len(s1)
        and _char_at(s1, index) == _char_at(s2, index)
        and index + 1 < n
    ):
        index += 1
    return _char_at(s1, index) - _char_at(s2, index)


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` inside the first ``length`` characters of ``big``.

    An empty ``little`` matches at 0. Returns None when there is no match.
    """
    _check_count(length, "search length")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index == -1 else index


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``, which callers
    compare with ``size`` to detect truncation.
    """
    _check_count(size, "buffer size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the result would have had
    without truncation. When ``size`` does not exceed ``len(dst)`` nothing is
    appended and the length reported is ``len(src) + size``.
    """
    _check_count(size, "buffer size")
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Visit every character with ``func(index, char)``.

    ``func`` may return a replacement character; returning None keeps the
    original. The resulting string is returned.
    """
    result = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)


def strtrim(text: str, chars: str) -> str:
    """Strip every character of ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` starting at ``start``.

    A start beyond the end yields an empty string.
    """
    _check_count(start, "start index")
    _check_count(length, "length")
    if start > len(text):
        return ""
    return text[start : start + length]
"""String helpers: splitting, trimming, slicing, searching and comparing."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Any

_TERMINATOR = "\0"


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def split(s: str | None, sep: str) -> list[str]:
    """Return the non-empty pieces of ``s`` separated by the character ``sep``."""
    if s is None:
        return []
    if sep in ("", _TERMINATOR):
        return [s] if s else []
    _check_char(sep)
    return [word for word in s.split(sep) if word]


def strtrim(s: str | None, charset: str | None) -> str:
    """Strip every character found in ``charset`` from both ends of ``s``."""
    if not s or charset is None:
        return ""
    return s.strip(charset)


def substr(s: str | None, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if s is None:
        return ""
    return s[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of two strings."""
    return first + second


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Return the index of ``needle`` lying wholly within the first ``limit``
    characters of ``haystack``, or ``None``. An empty needle is found at 0."""
    if not needle:
        return 0
    if limit < 0:
        raise ValueError("limit must not be negative")
    index = haystack[:limit].find(needle)
    return None if index == -1 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return their code-point difference.

    The result is 0 when equal, negative when ``first`` sorts before
    ``second`` and positive otherwise. A shorter string compares as if it
    were followed by a NUL character.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in zip_longest(first[:n], second[:n], fillvalue=_TERMINATOR):
        if a != b:
            return ord(a) - ord(b)
        if a == _TERMINATOR:
            break
    return 0


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or ``None``.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    index = s.find(c)
    if index == -1:
        return len(s) if c == _TERMINATOR else None
    return index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or ``None``.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    index = s.rfind(c)
    if index == -1:
        return len(s) if c == _TERMINATOR else None
    return index


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(s: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call ``func(index, item)`` on each item of ``s`` in order.

    Whatever ``func`` returns other than ``None`` replaces the item in place.
    """
    for index, item in enumerate(s):
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement
"""Byte-buffer searching, comparing, filling and moving, and bounded string copies."""

from __future__ import annotations


def _check_count(n: int, *sizes: int) -> None:
    if n < 0:
        raise ValueError("count must not be negative")
    if any(n > size for size in sizes):
        raise ValueError("count exceeds buffer length")


def memchr(data: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` in ``data[:n]``, or ``None``."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index == -1 else index


def memcmp(
    first: bytes | bytearray | memoryview,
    second: bytes | bytearray | memoryview,
    n: int,
) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair."""
    _check_count(n, len(first), len(second))
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` (low eight bits) and return it."""
    _check_count(n, len(buf))
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes from offset ``src`` to offset ``dst`` within ``buf``.

    Overlapping regions are handled correctly. Returns ``buf``.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buf) - dst, len(buf) - src)
    buf[dst:dst + n] = buf[src:src + n]
    return buf


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots including the terminator.

    Returns the copied text and the full length of ``src``; a result length
    at or above ``size`` means the copy was truncated.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had. When ``size`` is smaller than ``dst``, ``dst`` is left alone
    and the length reported is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    if size < len(dst):
        return dst, len(src) + size
    room = max(0, size - 1 - len(dst))
    return dst + src[:room], len(src) + len(dst)
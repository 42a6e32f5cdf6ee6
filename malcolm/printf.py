"""Formatted output with a small set of conversions, and plain writers for text streams."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, TextIO

from malcolm.chars import itoa

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


class FormatError(ValueError):
    """Raised for a bad format string or an argument that does not fit it."""


def to_base(n: int, digits: str) -> str:
    """Write the integer ``n`` using ``digits`` as the symbols of the base.

    Negative numbers get a leading ``-``. The base is ``len(digits)`` and
    must be at least 2.
    """
    if len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    base = len(digits)
    sign = "-" if n < 0 else ""
    n = abs(n)
    out = []
    while True:
        n, rem = divmod(n, base)
        out.append(digits[rem])
        if n == 0:
            break
    return sign + "".join(reversed(out))


def _require_int(spec: str, value: Any) -> int:
    if not isinstance(value, int):
        raise FormatError(f"'%{spec}' expects an int, got {type(value).__name__}")
    return value


def _as_int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"'%c' expects a single character, got {value!r}")
        return value
    return chr(_require_int("c", value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise FormatError(f"'%s' expects a str, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = value
    else:
        address = id(value)
    return "0x" + to_base(address & _UINT64, HEX_LOWER)


def _signed(spec: str) -> Callable[[Any], str]:
    def convert(value: Any) -> str:
        return to_base(_as_int32(_require_int(spec, value)), DECIMAL)
    return convert


def _unsigned(spec: str, digits: str) -> Callable[[Any], str]:
    def convert(value: Any) -> str:
        return to_base(_require_int(spec, value) & _UINT32, digits)
    return convert


_HANDLERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed("d"),
    "i": _signed("i"),
    "u": _unsigned("u", DECIMAL),
    "x": _unsigned("x", HEX_LOWER),
    "X": _unsigned("X", HEX_UPPER),
}


def format(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args``.

    Supported conversions are ``%c %s %p %d %i %u %x %X`` and ``%%``.
    Integers for ``%d``/``%i`` wrap to 32-bit signed values and for
    ``%u``/``%x``/``%X`` to 32-bit unsigned values; ``%p`` shows a 64-bit
    address in hexadecimal. Extra arguments are ignored.
    """
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format string ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
            continue
        handler = _HANDLERS.get(spec)
        if handler is None:
            raise FormatError(f"unknown conversion '%{spec}'")
        try:
            value = next(values)
        except StopIteration:
            raise FormatError(f"no argument left for '%{spec}'") from None
        pieces.append(handler(value))
    return "".join(pieces)


def printf(fmt: str, *args: Any, out: TextIO | None = None) -> int:
    """Write the expansion of ``fmt`` to ``out`` (standard output by default).

    Returns the number of characters written.
    """
    text = format(fmt, *args)
    stream = sys.stdout if out is None else out
    stream.write(text)
    return len(text)


def put_char(c: str, out: TextIO) -> None:
    """Write a single character to ``out``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    out.write(c)


def put_str(s: str, out: TextIO) -> None:
    """Write ``s`` to ``out``."""
    out.write(s)


def put_endl(s: str, out: TextIO) -> None:
    """Write ``s`` followed by a newline to ``out``."""
    out.write(s)
    out.write("\n")


def put_number(n: int, out: TextIO) -> None:
    """Write the decimal text of ``n`` to ``out``."""
    out.write(itoa(n))
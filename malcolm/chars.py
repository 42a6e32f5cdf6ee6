"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

from typing import overload

_SPACES = frozenset(" \t\n\v\f\r")


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return 65 <= code <= 90


def _is_lower(code: int) -> bool:
    return 97 <= code <= 122


def isalpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def isdigit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def isalnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


@overload
def tolower(c: int) -> int: ...
@overload
def tolower(c: str) -> str: ...
def tolower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if _is_upper(code):
        code += 32
    return chr(code) if isinstance(c, str) else code


@overload
def toupper(c: int) -> int: ...
@overload
def toupper(c: str) -> str: ...
def toupper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if _is_lower(code):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def atoi(s: str) -> int:
    """Read a decimal integer from the start of ``s``.

    Leading whitespace is skipped, one optional sign is accepted and reading
    stops at the first non-digit. A string with no digits yields 0.
    """
    rest = s.lstrip("".join(_SPACES))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        value = value * 10 + (ord(char) - 48)
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    if not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)
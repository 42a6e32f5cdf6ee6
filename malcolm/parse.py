"""Command-line argument validation: IPv4 and MAC address parsing."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

USAGE = "Usage: {prog} <source_ip> <source_mac> <target_ip> <target_mac>"

_HEX_FIELD = r"\s*([0-9A-Fa-f]{1,2})"
_MAC_RE = re.compile(":".join([_HEX_FIELD] * 6) + r"\s*", re.ASCII)
_IP_RE = re.compile(r"(\d{1,3})\.(\d{1,3})\.(\d{1,3})\.(\d{1,3})\s*", re.ASCII)


class ParseError(ValueError):
    """Raised when the command line or an address in it is invalid."""


@dataclass(frozen=True)
class MalcolmConfig:
    """The addresses given on the command line, as text and as wire bytes."""

    source_ip: str
    source_mac: str
    target_ip: str
    target_mac: str
    source_ip_bytes: bytes
    source_mac_bytes: bytes
    target_ip_bytes: bytes
    target_mac_bytes: bytes


def parse_mac(s: str) -> bytes:
    """Parse a colon-separated MAC address into six bytes.

    Each field holds one or two hex digits. The all-zero and broadcast
    addresses are rejected.
    """
    match = _MAC_RE.fullmatch(s) if isinstance(s, str) else None
    if match is None:
        raise ParseError(f"Invalid MAC format: {s}")
    mac = bytes(int(field, 16) for field in match.groups())
    if mac in (bytes(6), b"\xff" * 6):
        raise ParseError(f"Invalid MAC format: {s}")
    return mac


def _octet(field: str, original: str) -> int:
    if int(field) > 255:
        raise ParseError(f"Invalid IP format: {original}")
    if len(field) > 1 and field.startswith("0"):
        try:
            return int(field, 8)
        except ValueError:
            raise ParseError(f"Invalid IP format: {original}") from None
    return int(field)


def parse_ip(s: str) -> bytes:
    """Parse a dotted-quad IPv4 address into four bytes in network order.

    A field with a leading zero is read as octal. The addresses 0.0.0.0 and
    255.255.255.255 are rejected.
    """
    match = _IP_RE.fullmatch(s) if isinstance(s, str) else None
    if match is None:
        raise ParseError(f"Invalid IP format: {s}")
    address = bytes(_octet(field, s) for field in match.groups())
    if address in (bytes(4), b"\xff" * 4):
        raise ParseError(f"Invalid IP format: {s}")
    return address


def parse_args(argv: Sequence[str]) -> MalcolmConfig:
    """Build the configuration from a full argument vector, program name first."""
    if len(argv) != 5:
        prog = argv[0] if argv else "malcolm"
        raise ParseError(USAGE.format(prog=prog))
    _, source_ip, source_mac, target_ip, target_mac = argv
    source_ip_bytes = parse_ip(source_ip)
    target_ip_bytes = parse_ip(target_ip)
    source_mac_bytes = parse_mac(source_mac)
    target_mac_bytes = parse_mac(target_mac)
    return MalcolmConfig(
        source_ip=source_ip,
        source_mac=source_mac,
        target_ip=target_ip,
        target_mac=target_mac,
        source_ip_bytes=source_ip_bytes,
        source_mac_bytes=source_mac_bytes,
        target_ip_bytes=target_ip_bytes,
        target_mac_bytes=target_mac_bytes,
    )
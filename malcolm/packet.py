"""Ethernet-framed ARP packets: decoding, encoding and a readable dump."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from malcolm.parse import MalcolmConfig

ETH_ALEN = 6
ETH_P_IP = 0x0800
ETH_P_ARP = 0x0806
ARPHRD_ETHER = 1
ARPOP_REQUEST = 1
ARPOP_REPLY = 2

_FORMAT = struct.Struct("!6s6sHHHBBH6s4s6s4s")
FRAME_SIZE = _FORMAT.size


def format_mac(mac: bytes) -> str:
    """Render six bytes as lower-case, zero-padded, colon-separated hex."""
    return ":".join(f"{byte:02x}" for byte in mac)


def format_ip(ip: bytes) -> str:
    """Render four bytes as a dotted-quad address."""
    return ".".join(str(byte) for byte in ip)


def _opcode_name(opcode: int) -> str:
    if opcode == ARPOP_REQUEST:
        return "request"
    if opcode == ARPOP_REPLY:
        return "reply"
    return "other"


@dataclass(frozen=True)
class ArpPacket:
    """An ARP message together with its Ethernet header."""

    dest_mac: bytes
    source_mac: bytes
    sender_mac: bytes
    sender_ip: bytes
    target_mac: bytes
    target_ip: bytes
    opcode: int = ARPOP_REQUEST
    ether_type: int = ETH_P_ARP
    hardware_type: int = ARPHRD_ETHER
    protocol_type: int = ETH_P_IP
    hw_size: int = ETH_ALEN
    proto_size: int = 4

    @classmethod
    def from_bytes(cls, data: bytes) -> ArpPacket:
        """Decode a frame; bytes past the ARP payload are ignored."""
        if len(data) < FRAME_SIZE:
            raise ValueError(f"frame too short for ARP: {len(data)} bytes")
        (dest_mac, source_mac, ether_type, hardware_type, protocol_type,
         hw_size, proto_size, opcode, sender_mac, sender_ip,
         target_mac, target_ip) = _FORMAT.unpack_from(data)
        return cls(
            dest_mac=dest_mac,
            source_mac=source_mac,
            sender_mac=sender_mac,
            sender_ip=sender_ip,
            target_mac=target_mac,
            target_ip=target_ip,
            opcode=opcode,
            ether_type=ether_type,
            hardware_type=hardware_type,
            protocol_type=protocol_type,
            hw_size=hw_size,
            proto_size=proto_size,
        )

    def to_bytes(self) -> bytes:
        """Encode the frame in network byte order."""
        return _FORMAT.pack(
            self.dest_mac, self.source_mac, self.ether_type,
            self.hardware_type, self.protocol_type, self.hw_size,
            self.proto_size, self.opcode, self.sender_mac, self.sender_ip,
            self.target_mac, self.target_ip,
        )

    def describe(self) -> str:
        """Return a multi-line dump of every header field."""
        return (
            "\n--- ETHERNET HEADER ---\n"
            f"Destination MAC: {format_mac(self.dest_mac)}\n"
            f"Source MAC:      {format_mac(self.source_mac)}\n"
            f"EtherType:       0x{self.ether_type:04x}\n"
            "\n--- ARP HEADER ---\n"
            f"Hardware type:   {self.hardware_type}\n"
            f"Protocol type:   0x{self.protocol_type:04x}\n"
            f"HW size:         {self.hw_size}\n"
            f"Proto size:      {self.proto_size}\n"
            f"Opcode:          {self.opcode} ({_opcode_name(self.opcode)})\n"
            f"Sender MAC:      {format_mac(self.sender_mac)}\n"
            f"Sender IP:       {format_ip(self.sender_ip)}\n"
            f"Target MAC:      {format_mac(self.target_mac)}\n"
            f"Target IP:       {format_ip(self.target_ip)}\n"
            "------------------------\n\n"
        )


def build_reply(config: MalcolmConfig) -> ArpPacket:
    """Build the reply claiming the source IP lives at the source MAC."""
    return ArpPacket(
        dest_mac=config.target_mac_bytes,
        source_mac=config.source_mac_bytes,
        sender_mac=config.source_mac_bytes,
        sender_ip=config.source_ip_bytes,
        target_mac=config.target_mac_bytes,
        target_ip=config.target_ip_bytes,
        opcode=ARPOP_REPLY,
    )
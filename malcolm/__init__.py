"""ARP reply spoofing tool, with address parsing, ARP packet handling and small text, memory and formatting helpers."""

__version__ = "0.1.0"
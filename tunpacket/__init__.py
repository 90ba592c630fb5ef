"""Packet views, Internet checksums, sockaddr records, address enumerations and netsh helpers."""

__version__ = "0.1.0"
__all__ = ["checksum", "ip", "tcp", "udp", "icmp", "netsh", "addrenums", "sockaddr"]
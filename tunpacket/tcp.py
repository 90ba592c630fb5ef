"""View over a raw TCP segment."""

from __future__ import annotations

import struct
from enum import IntFlag
from ipaddress import IPv4Address, IPv6Address

from .checksum import checksum as internet_checksum
from .checksum import sum16
from .ip import InvalidChecksumError, IPProtocol

TCP_HEADER_SIZE = 20


class TCPFlag(IntFlag):
    FIN = 1 << 0
    SYN = 1 << 1
    RST = 1 << 2
    PSH = 1 << 3
    ACK = 1 << 4
    URG = 1 << 5
    ECE = 1 << 6
    CWR = 1 << 7
    NS = 1 << 8


def _address_bytes(address) -> bytes:
    if isinstance(address, (IPv4Address, IPv6Address)):
        return address.packed
    return bytes(address)


class TCPPacket:
    """A mutable view over a TCP segment held in a buffer."""

    def __init__(self, data) -> None:
        self._buf = memoryview(data).cast("B")

    def __len__(self) -> int:
        return len(self._buf)

    def __bytes__(self) -> bytes:
        return bytes(self._buf)

    @property
    def source_port(self) -> int:
        return struct.unpack_from(">H", self._buf, 0)[0]

    @source_port.setter
    def source_port(self, port: int) -> None:
        struct.pack_into(">H", self._buf, 0, port)

    @property
    def destination_port(self) -> int:
        return struct.unpack_from(">H", self._buf, 2)[0]

    @destination_port.setter
    def destination_port(self, port: int) -> None:
        struct.pack_into(">H", self._buf, 2, port)

    @property
    def flags(self) -> TCPFlag:
        """Control flags; the NS bit is folded into the low bit."""
        return TCPFlag(self._buf[13] | (self._buf[12] & 0x1))

    @property
    def checksum(self) -> int:
        return struct.unpack_from(">H", self._buf, 16)[0]

    @checksum.setter
    def checksum(self, value: int) -> None:
        struct.pack_into(">H", self._buf, 16, value & 0xFFFF)

    def reset_checksum(self, pseudo_sum: int) -> None:
        """Recompute the checksum in place from a pseudo-header sum."""
        self._buf[16:18] = b"\x00\x00"
        self._buf[16:18] = internet_checksum(pseudo_sum, self._buf)

    def valid(self) -> bool:
        return len(self._buf) >= TCP_HEADER_SIZE

    def verify(self, source_address, target_address) -> None:
        """Raise InvalidChecksumError if the checksum does not match the addresses."""
        expected = bytes(self._buf[16:18])
        segment = bytearray(self._buf)
        segment[16:18] = b"\x00\x00"
        total = (
            sum16(_address_bytes(source_address))
            + sum16(_address_bytes(target_address))
            + IPProtocol.TCP
            + len(segment)
        )
        if internet_checksum(total & 0xFFFFFFFF, segment) != expected:
            raise InvalidChecksumError()
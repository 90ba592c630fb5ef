"""View over a raw UDP datagram."""

from __future__ import annotations

import struct

from .checksum import checksum as internet_checksum
from .ip import InvalidLengthError

UDP_HEADER_SIZE = 8


class UDPPacket:
    """A mutable view over a UDP datagram held in a buffer."""

    def __init__(self, data) -> None:
        self._buf = memoryview(data).cast("B")

    def __len__(self) -> int:
        return len(self._buf)

    def __bytes__(self) -> bytes:
        return bytes(self._buf)

    @property
    def length(self) -> int:
        return struct.unpack_from(">H", self._buf, 4)[0]

    @length.setter
    def length(self, value: int) -> None:
        struct.pack_into(">H", self._buf, 4, value & 0xFFFF)

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
    def payload(self) -> memoryview:
        """The bytes after the header up to the length field, as a view."""
        end = self.length
        if end < UDP_HEADER_SIZE or end > len(self._buf):
            raise InvalidLengthError()
        return self._buf[UDP_HEADER_SIZE:end]

    @property
    def checksum(self) -> int:
        return struct.unpack_from(">H", self._buf, 6)[0]

    @checksum.setter
    def checksum(self, value: int) -> None:
        struct.pack_into(">H", self._buf, 6, value & 0xFFFF)

    def reset_checksum(self, pseudo_sum: int) -> None:
        """Recompute the checksum in place from a pseudo-header sum."""
        self._buf[6:8] = b"\x00\x00"
        self._buf[6:8] = internet_checksum(pseudo_sum, self._buf)

    def valid(self) -> bool:
        return (
            len(self._buf) >= UDP_HEADER_SIZE
            and (len(self._buf) & 0xFFFF) >= self.length
        )
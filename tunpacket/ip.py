"""Views over raw IPv4 and IPv6 packets."""

from __future__ import annotations

import struct
from enum import IntEnum
from ipaddress import IPv4Address, IPv6Address

from .checksum import checksum as internet_checksum
from .checksum import sum16

FLAG_DONT_FRAGMENT = 1 << 1
FLAG_MORE_FRAGMENT = 1 << 2

IPV4_HEADER_SIZE = 20
IPV4_VERSION = 4
IPV4_OPTIONS_OFFSET = 20
IPV4_PACKET_MIN_LENGTH = IPV4_OPTIONS_OFFSET

IPV6_ADDRESS_SIZE = 16
IPV6_PAYLOAD_LENGTH_OFFSET = 4
IPV6_NEXT_HEADER_OFFSET = 6
IPV6_FIXED_HEADER_SIZE = 40
IPV6_MINIMUM_SIZE = IPV6_FIXED_HEADER_SIZE
IPV6_VERSION = 6
IPV6_MINIMUM_MTU = 1280

_HOP_LIMIT = 7
_V6_SRC = 8
_V6_DST = _V6_SRC + IPV6_ADDRESS_SIZE


class IPProtocol(IntEnum):
    """IP protocol numbers handled by the packet views."""

    ICMP = 0x01
    TCP = 0x06
    UDP = 0x11
    ICMPV6 = 0x3A


class PacketError(ValueError):
    """Base class for malformed packets."""


class InvalidLengthError(PacketError):
    def __init__(self, message: str = "invalid packet length") -> None:
        super().__init__(message)


class InvalidIPVersionError(PacketError):
    def __init__(self, message: str = "invalid ip version") -> None:
        super().__init__(message)


class InvalidChecksumError(PacketError):
    def __init__(self, message: str = "invalid checksum") -> None:
        super().__init__(message)


class IPv4Packet:
    """A mutable view over an IPv4 packet held in a buffer."""

    def __init__(self, data) -> None:
        self._buf = memoryview(data).cast("B")

    def __len__(self) -> int:
        return len(self._buf)

    def __bytes__(self) -> bytes:
        return bytes(self._buf)

    @property
    def total_length(self) -> int:
        return struct.unpack_from(">H", self._buf, 2)[0]

    @total_length.setter
    def total_length(self, value: int) -> None:
        struct.pack_into(">H", self._buf, 2, value & 0xFFFF)

    @property
    def header_length(self) -> int:
        return (self._buf[0] & 0x0F) * 4

    @header_length.setter
    def header_length(self, value: int) -> None:
        self._buf[0] = (self._buf[0] & 0xF0) | ((value // 4) & 0xFF)

    @property
    def type_of_service(self) -> int:
        return self._buf[1]

    @type_of_service.setter
    def type_of_service(self, value: int) -> None:
        self._buf[1] = value

    @property
    def identification(self) -> int:
        return struct.unpack_from(">H", self._buf, 4)[0]

    @identification.setter
    def identification(self, value: int) -> None:
        struct.pack_into(">H", self._buf, 4, value & 0xFFFF)

    @property
    def fragment_offset(self) -> int:
        return ((((self._buf[6] & 0x7) << 8) | self._buf[7]) * 8) & 0xFFFF

    @fragment_offset.setter
    def fragment_offset(self, value: int) -> None:
        flags = self.flags
        struct.pack_into(">H", self._buf, 6, (value // 8) & 0xFFFF)
        self.flags = flags

    @property
    def flags(self) -> int:
        return self._buf[6] >> 5

    @flags.setter
    def flags(self, value: int) -> None:
        self._buf[6] = (self._buf[6] & 0x1F) | ((value << 5) & 0xFF)

    @property
    def data_length(self) -> int:
        return (self.total_length - self.header_length) & 0xFFFF

    @property
    def payload(self) -> memoryview:
        """The bytes between the header and the total length, as a view."""
        start, end = self.header_length, self.total_length
        if end < start or end > len(self._buf):
            raise InvalidLengthError()
        return self._buf[start:end]

    @property
    def protocol(self) -> int:
        return self._buf[9]

    @protocol.setter
    def protocol(self, value: int) -> None:
        self._buf[9] = value

    @property
    def source_ip(self) -> IPv4Address:
        return IPv4Address(bytes(self._buf[12:16]))

    @source_ip.setter
    def source_ip(self, address) -> None:
        if isinstance(address, IPv4Address):
            self._buf[12:16] = address.packed

    @property
    def destination_ip(self) -> IPv4Address:
        return IPv4Address(bytes(self._buf[16:20]))

    @destination_ip.setter
    def destination_ip(self, address) -> None:
        if isinstance(address, IPv4Address):
            self._buf[16:20] = address.packed

    @property
    def checksum(self) -> int:
        return struct.unpack_from(">H", self._buf, 10)[0]

    @checksum.setter
    def checksum(self, value: int) -> None:
        struct.pack_into(">H", self._buf, 10, value & 0xFFFF)

    @property
    def time_to_live(self) -> int:
        return self._buf[8]

    @time_to_live.setter
    def time_to_live(self, value: int) -> None:
        self._buf[8] = value

    def dec_time_to_live(self) -> None:
        self._buf[8] = (self._buf[8] - 1) & 0xFF

    def reset_checksum(self) -> int:
        """Recompute the header checksum in place and return it."""
        self._buf[10:12] = b"\x00\x00"
        self._buf[10:12] = internet_checksum(0, self._buf[: self.header_length])
        return self.checksum

    def pseudo_sum(self) -> int:
        """Partial sum of the pseudo-header used by TCP and UDP checksums."""
        total = sum16(self._buf[12:20]) + self.protocol + self.data_length
        return total & 0xFFFFFFFF

    def valid(self) -> bool:
        return (
            len(self._buf) >= IPV4_HEADER_SIZE
            and self.total_length >= self.header_length
            and (len(self._buf) & 0xFFFF) >= self.total_length
        )

    def verify(self) -> None:
        """Raise a PacketError if the packet is malformed or its checksum is wrong."""
        if len(self._buf) < IPV4_PACKET_MIN_LENGTH:
            raise InvalidLengthError()
        expected = bytes(self._buf[10:12])
        header_length = (self._buf[0] & 0x0F) * 4
        packet_length = struct.unpack_from(">H", self._buf, 2)[0]
        if self._buf[0] >> 4 != IPV4_VERSION:
            raise InvalidIPVersionError()
        if (len(self._buf) & 0xFFFF) < packet_length or packet_length < header_length:
            raise InvalidLengthError()
        header = bytearray(self._buf[:header_length])
        header[10:12] = b"\x00\x00"
        if internet_checksum(0, header) != expected:
            raise InvalidChecksumError()


class IPv6Packet:
    """A mutable view over an IPv6 packet held in a buffer."""

    def __init__(self, data) -> None:
        self._buf = memoryview(data).cast("B")

    def __len__(self) -> int:
        return len(self._buf)

    def __bytes__(self) -> bytes:
        return bytes(self._buf)

    @property
    def payload_length(self) -> int:
        return struct.unpack_from(">H", self._buf, IPV6_PAYLOAD_LENGTH_OFFSET)[0]

    @payload_length.setter
    def payload_length(self, value: int) -> None:
        struct.pack_into(">H", self._buf, IPV6_PAYLOAD_LENGTH_OFFSET, value & 0xFFFF)

    @property
    def hop_limit(self) -> int:
        return self._buf[_HOP_LIMIT]

    @hop_limit.setter
    def hop_limit(self, value: int) -> None:
        self._buf[_HOP_LIMIT] = value

    @property
    def next_header(self) -> int:
        return self._buf[IPV6_NEXT_HEADER_OFFSET]

    @next_header.setter
    def next_header(self, value: int) -> None:
        self._buf[IPV6_NEXT_HEADER_OFFSET] = value

    @property
    def protocol(self) -> int:
        return self.next_header

    @protocol.setter
    def protocol(self, value: int) -> None:
        self.next_header = value

    @property
    def payload(self) -> memoryview:
        """The payload after the fixed header, as a view."""
        end = IPV6_MINIMUM_SIZE + self.payload_length
        if end > len(self._buf):
            raise InvalidLengthError()
        return self._buf[IPV6_MINIMUM_SIZE:end]

    @property
    def source_ip(self) -> IPv6Address:
        return IPv6Address(bytes(self._buf[_V6_SRC:_V6_DST]))

    @source_ip.setter
    def source_ip(self, address) -> None:
        if isinstance(address, IPv6Address):
            self._buf[_V6_SRC:_V6_DST] = address.packed

    @property
    def destination_ip(self) -> IPv6Address:
        return IPv6Address(bytes(self._buf[_V6_DST:IPV6_FIXED_HEADER_SIZE]))

    @destination_ip.setter
    def destination_ip(self, address) -> None:
        if isinstance(address, IPv6Address):
            self._buf[_V6_DST:IPV6_FIXED_HEADER_SIZE] = address.packed

    @property
    def checksum(self) -> int:
        """IPv6 has no header checksum; always 0."""
        return 0

    def tos(self) -> tuple[int, int]:
        """Return the traffic class and the flow label."""
        word = struct.unpack_from(">I", self._buf, 0)[0]
        return (word >> 20) & 0xFF, word & 0xFFFFF

    def set_tos(self, traffic_class: int, flow_label: int) -> None:
        """Write version 6, the traffic class and the flow label."""
        word = (6 << 28) | ((traffic_class & 0xFF) << 20) | (flow_label & 0xFFFFF)
        struct.pack_into(">I", self._buf, 0, word)

    def dec_time_to_live(self) -> None:
        self._buf[_HOP_LIMIT] = (self._buf[_HOP_LIMIT] - 1) & 0xFF

    def reset_checksum(self) -> int:
        """Return the header checksum; IPv6 has none, so the buffer is left as it is."""
        return self.checksum

    def pseudo_sum(self) -> int:
        """Partial sum of the pseudo-header used by upper-layer checksums."""
        total = (
            sum16(self._buf[_V6_SRC:IPV6_FIXED_HEADER_SIZE])
            + self.protocol
            + self.payload_length
        )
        return total & 0xFFFFFFFF

    def valid(self) -> bool:
        return (
            len(self._buf) >= IPV6_MINIMUM_SIZE
            and len(self._buf) >= self.payload_length + IPV6_MINIMUM_SIZE
        )


def ip_version(data) -> int | None:
    """Return the IP version nibble of ``data``, or None if it is empty."""
    if len(data) < 1:
        return None
    return data[0] >> 4
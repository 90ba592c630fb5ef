"""Views over raw ICMP and ICMPv6 messages."""

from __future__ import annotations

import struct
from enum import IntEnum

from .checksum import checksum as internet_checksum

ICMP_TYPE_PING_REQUEST = 0x8
ICMP_TYPE_PING_RESPONSE = 0x0

ICMPV6_HEADER_SIZE = 4
ICMPV6_MINIMUM_SIZE = 8
ICMPV6_PAYLOAD_OFFSET = 8
ICMPV6_ECHO_MINIMUM_SIZE = 8
ICMPV6_ERROR_HEADER_SIZE = 8
ICMPV6_DST_UNREACHABLE_MINIMUM_SIZE = ICMPV6_MINIMUM_SIZE
ICMPV6_PACKET_TOO_BIG_MINIMUM_SIZE = ICMPV6_MINIMUM_SIZE
ICMPV6_CHECKSUM_OFFSET = 2
NDP_HOP_LIMIT = 255

_POINTER_OFFSET = 4
_MTU_OFFSET = 4
_IDENT_OFFSET = 4
_SEQUENCE_OFFSET = 6

# Codes for destination unreachable messages.
ICMPV6_NETWORK_UNREACHABLE = 0
ICMPV6_PROHIBITED = 1
ICMPV6_BEYOND_SCOPE = 2
ICMPV6_ADDRESS_UNREACHABLE = 3
ICMPV6_PORT_UNREACHABLE = 4
ICMPV6_POLICY = 5
ICMPV6_REJECT_ROUTE = 6

# Codes for time exceeded messages.
ICMPV6_HOP_LIMIT_EXCEEDED = 0
ICMPV6_REASSEMBLY_TIMEOUT = 1

# Codes for parameter problem messages.
ICMPV6_ERRONEOUS_HEADER = 0
ICMPV6_UNKNOWN_HEADER = 1
ICMPV6_UNKNOWN_OPTION = 2

ICMPV6_UNUSED_CODE = 0


class ICMPPacket:
    """A mutable view over an ICMPv4 message held in a buffer."""

    def __init__(self, data) -> None:
        self._buf = memoryview(data).cast("B")

    def __len__(self) -> int:
        return len(self._buf)

    def __bytes__(self) -> bytes:
        return bytes(self._buf)

    @property
    def type(self) -> int:
        return self._buf[0]

    @type.setter
    def type(self, value: int) -> None:
        self._buf[0] = value

    @property
    def code(self) -> int:
        return self._buf[1]

    @property
    def checksum(self) -> int:
        return struct.unpack_from(">H", self._buf, 2)[0]

    @checksum.setter
    def checksum(self, value: int) -> None:
        struct.pack_into(">H", self._buf, 2, value & 0xFFFF)

    def reset_checksum(self) -> None:
        """Recompute the checksum over the whole message in place."""
        self._buf[2:4] = b"\x00\x00"
        self._buf[2:4] = internet_checksum(0, self._buf)


class ICMPv6Type(IntEnum):
    """ICMPv6 message types; values outside the list are kept as-is."""

    DST_UNREACHABLE = 1
    PACKET_TOO_BIG = 2
    TIME_EXCEEDED = 3
    PARAM_PROBLEM = 4
    ECHO_REQUEST = 128
    ECHO_REPLY = 129
    MULTICAST_LISTENER_QUERY = 130
    MULTICAST_LISTENER_REPORT = 131
    MULTICAST_LISTENER_DONE = 132
    ROUTER_SOLICIT = 133
    ROUTER_ADVERT = 134
    NEIGHBOR_SOLICIT = 135
    NEIGHBOR_ADVERT = 136
    REDIRECT_MSG = 137

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and 0 <= value <= 0xFF:
            member = int.__new__(cls, value)
            member._name_ = f"TYPE_{value}"
            member._value_ = value
            return member
        return None

    def is_error(self) -> bool:
        """Error messages have the high bit of the type clear."""
        return self & 0x80 == 0


class ICMPv6Packet:
    """A mutable view over an ICMPv6 message held in a buffer."""

    def __init__(self, data) -> None:
        self._buf = memoryview(data).cast("B")

    def __len__(self) -> int:
        return len(self._buf)

    def __bytes__(self) -> bytes:
        return bytes(self._buf)

    @property
    def type(self) -> ICMPv6Type:
        return ICMPv6Type(self._buf[0])

    @type.setter
    def type(self, value: int) -> None:
        self._buf[0] = int(value)

    @property
    def code(self) -> int:
        return self._buf[1]

    @code.setter
    def code(self, value: int) -> None:
        self._buf[1] = value

    @property
    def type_specific(self) -> int:
        return struct.unpack_from(">I", self._buf, _POINTER_OFFSET)[0]

    @type_specific.setter
    def type_specific(self, value: int) -> None:
        struct.pack_into(">I", self._buf, _POINTER_OFFSET, value & 0xFFFFFFFF)

    @property
    def checksum(self) -> int:
        return struct.unpack_from(">H", self._buf, ICMPV6_CHECKSUM_OFFSET)[0]

    @checksum.setter
    def checksum(self, value: int) -> None:
        struct.pack_into(">H", self._buf, ICMPV6_CHECKSUM_OFFSET, value & 0xFFFF)

    @property
    def mtu(self) -> int:
        return struct.unpack_from(">I", self._buf, _MTU_OFFSET)[0]

    @mtu.setter
    def mtu(self, value: int) -> None:
        struct.pack_into(">I", self._buf, _MTU_OFFSET, value & 0xFFFFFFFF)

    @property
    def ident(self) -> int:
        return struct.unpack_from(">H", self._buf, _IDENT_OFFSET)[0]

    @ident.setter
    def ident(self, value: int) -> None:
        struct.pack_into(">H", self._buf, _IDENT_OFFSET, value & 0xFFFF)

    @property
    def sequence(self) -> int:
        return struct.unpack_from(">H", self._buf, _SEQUENCE_OFFSET)[0]

    @sequence.setter
    def sequence(self, value: int) -> None:
        struct.pack_into(">H", self._buf, _SEQUENCE_OFFSET, value & 0xFFFF)

    @property
    def message_body(self) -> memoryview:
        """Everything after the four-byte header, as a view."""
        return self._buf[ICMPV6_HEADER_SIZE:]

    @property
    def payload(self) -> memoryview:
        """Everything after the eight-byte header, as a view."""
        return self._buf[ICMPV6_PAYLOAD_OFFSET:]

    def reset_checksum(self, pseudo_sum: int) -> None:
        """Recompute the checksum in place from a pseudo-header sum."""
        self._buf[2:4] = b"\x00\x00"
        self._buf[2:4] = internet_checksum(pseudo_sum, self._buf)
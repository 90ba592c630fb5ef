"""Socket address and address-prefix records in the Windows binary layout."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from ipaddress import (
    IPv4Address,
    IPv4Interface,
    IPv4Network,
    IPv6Address,
    IPv6Interface,
    IPv6Network,
    ip_address,
    ip_interface,
)
from typing import Optional, Union

RAW_SOCKADDR_INET_SIZE = 28
RAW_SOCKADDR_INET_DATA_OFFSET = 2
IP_ADDRESS_PREFIX_SIZE = 32
IP_ADDRESS_PREFIX_LENGTH_OFFSET = 28

Address = Union[IPv4Address, IPv6Address]
Prefix = Union[IPv4Interface, IPv6Interface]


class AddressFamily(IntEnum):
    """Windows protocol family numbers."""

    UNSPEC = 0
    INET = 2
    INET6 = 23


def _family(value: int) -> Union[AddressFamily, int]:
    try:
        return AddressFamily(value)
    except ValueError:
        return value


def _scope_from_zone(address: IPv6Address) -> int:
    zone = address.scope_id
    if zone and zone.isdigit():
        scope = int(zone)
        if scope <= 0xFFFFFFFF:
            return scope
    return 0


@dataclass(frozen=True)
class RawSockaddrInet:
    """An IPv4 or IPv6 socket address, or a bare address family."""

    family: Union[AddressFamily, int] = AddressFamily.UNSPEC
    raw_address: bytes = b""
    raw_port: int = 0
    scope_id: int = 0
    flowinfo: int = 0

    @classmethod
    def from_addr_port(cls, address, port: int) -> "RawSockaddrInet":
        """Build from an IPv4 or IPv6 address and a port.

        For IPv6 a numeric zone becomes the scope id; any other zone gives 0.
        """
        if isinstance(address, str):
            address = ip_address(address)
        if not 0 <= port <= 0xFFFF:
            raise ValueError(f"port out of range: {port}")
        if isinstance(address, IPv4Address):
            return cls(AddressFamily.INET, address.packed, port)
        if isinstance(address, IPv6Address):
            return cls(
                AddressFamily.INET6,
                address.packed,
                port,
                scope_id=_scope_from_zone(address),
            )
        raise ValueError(f"invalid parameter: {address!r}")

    @classmethod
    def from_addr(cls, address) -> "RawSockaddrInet":
        """Build from an address with port 0."""
        return cls.from_addr_port(address, 0)

    def addr(self) -> Optional[Address]:
        """The address, or None if the family is neither IPv4 nor IPv6."""
        if self.family == AddressFamily.INET:
            return IPv4Address(self.raw_address)
        if self.family == AddressFamily.INET6:
            address = IPv6Address(self.raw_address)
            if self.scope_id:
                address = IPv6Address(f"{address}%{self.scope_id}")
            return address
        return None

    def port(self) -> int:
        """The port, or 0 if the family is neither IPv4 nor IPv6."""
        if self.family in (AddressFamily.INET, AddressFamily.INET6):
            return self.raw_port
        return 0

    def addr_port(self) -> tuple[Optional[Address], int]:
        return self.addr(), self.port()

    def pack(self) -> bytes:
        """Encode as the 28-byte SOCKADDR_INET union."""
        head = struct.pack("<H", int(self.family))
        if self.family == AddressFamily.INET:
            body = struct.pack(">H", self.raw_port) + self.raw_address + bytes(8)
        elif self.family == AddressFamily.INET6:
            body = (
                struct.pack(">H", self.raw_port)
                + struct.pack("<I", self.flowinfo)
                + self.raw_address
                + struct.pack("<I", self.scope_id)
            )
        else:
            body = b""
        return (head + body).ljust(RAW_SOCKADDR_INET_SIZE, b"\x00")

    @classmethod
    def unpack(cls, data) -> "RawSockaddrInet":
        """Decode the 28-byte SOCKADDR_INET union."""
        data = bytes(data)
        if len(data) < RAW_SOCKADDR_INET_SIZE:
            raise ValueError(
                f"need {RAW_SOCKADDR_INET_SIZE} bytes, got {len(data)}"
            )
        family = _family(struct.unpack_from("<H", data, 0)[0])
        if family == AddressFamily.INET:
            (port,) = struct.unpack_from(">H", data, 2)
            return cls(family, data[4:8], port)
        if family == AddressFamily.INET6:
            (port,) = struct.unpack_from(">H", data, 2)
            (flowinfo,) = struct.unpack_from("<I", data, 4)
            (scope_id,) = struct.unpack_from("<I", data, 24)
            return cls(family, data[8:24], port, scope_id, flowinfo)
        return cls(family)


@dataclass(frozen=True)
class IPAddressPrefix:
    """An address together with a prefix length."""

    raw_prefix: RawSockaddrInet = RawSockaddrInet()
    prefix_length: int = 0

    @classmethod
    def from_prefix(cls, prefix) -> "IPAddressPrefix":
        """Build from a network, an interface or a string such as '10.0.0.1/24'."""
        if isinstance(prefix, str):
            prefix = ip_interface(prefix)
        if isinstance(prefix, (IPv4Interface, IPv6Interface)):
            address, bits = prefix.ip, prefix.network.prefixlen
        elif isinstance(prefix, (IPv4Network, IPv6Network)):
            address, bits = prefix.network_address, prefix.prefixlen
        else:
            raise ValueError(f"invalid parameter: {prefix!r}")
        return cls(RawSockaddrInet.from_addr(address), bits & 0xFF)

    def prefix(self) -> Optional[Prefix]:
        """The address with its prefix length, host bits kept.

        None if the family is unknown or the length does not fit the family.
        """
        raw = self.raw_prefix
        try:
            if raw.family == AddressFamily.INET:
                return IPv4Interface((IPv4Address(raw.raw_address), self.prefix_length))
            if raw.family == AddressFamily.INET6:
                return IPv6Interface((IPv6Address(raw.raw_address), self.prefix_length))
        except ValueError:
            return None
        return None

    def pack(self) -> bytes:
        """Encode as the 32-byte IP_ADDRESS_PREFIX record."""
        return self.raw_prefix.pack() + bytes([self.prefix_length]) + bytes(3)

    @classmethod
    def unpack(cls, data) -> "IPAddressPrefix":
        """Decode the 32-byte IP_ADDRESS_PREFIX record."""
        data = bytes(data)
        if len(data) < IP_ADDRESS_PREFIX_SIZE:
            raise ValueError(f"need {IP_ADDRESS_PREFIX_SIZE} bytes, got {len(data)}")
        raw = RawSockaddrInet.unpack(data[:RAW_SOCKADDR_INET_SIZE])
        return cls(raw, data[IP_ADDRESS_PREFIX_LENGTH_OFFSET])


@dataclass(frozen=True)
class RouteData:
    """A route to add: destination prefix, next hop and metric."""

    destination: Union[IPv4Network, IPv6Network, IPv4Interface, IPv6Interface]
    next_hop: Address
    metric: int = 0
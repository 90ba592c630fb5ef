"""Enumerations describing addresses, routes and DNS settings of interfaces."""

from __future__ import annotations

from enum import IntEnum, IntFlag

DNS_INTERFACE_SETTINGS_VERSION1 = 1
DNS_INTERFACE_SETTINGS_VERSION2 = 2
DNS_INTERFACE_SETTINGS_VERSION3 = 3


class DadState(IntEnum):
    """Duplicate address detection state of an address."""

    INVALID = 0
    TENTATIVE = 1
    DUPLICATE = 2
    DEPRECATED = 3
    PREFERRED = 4


class PrefixOrigin(IntEnum):
    """Where an address prefix came from."""

    OTHER = 0
    MANUAL = 1
    WELL_KNOWN = 2
    DHCP = 3
    ROUTER_ADVERTISEMENT = 4
    UNCHANGED = 1 << 4


class LinkLocalAddressBehavior(IntEnum):
    """When link-local addresses are used."""

    ALWAYS_OFF = 0
    DELAYED = 1
    ALWAYS_ON = 2
    UNCHANGED = -1


class OffloadRod(IntFlag):
    """Offload capabilities of an IP interface."""

    CHECKSUM_SUPPORTED = 1 << 0
    OPTIONS_SUPPORTED = 1 << 1
    DATAGRAM_CHECKSUM_SUPPORTED = 1 << 2
    STREAM_CHECKSUM_SUPPORTED = 1 << 3
    STREAM_OPTIONS_SUPPORTED = 1 << 4
    FAST_PATH_COMPATIBLE = 1 << 5
    LARGE_SEND_OFFLOAD_SUPPORTED = 1 << 6
    GIANT_SEND_OFFLOAD_SUPPORTED = 1 << 7


class RouteOrigin(IntEnum):
    """Where an IP route came from."""

    MANUAL = 0
    WELL_KNOWN = 1
    DHCP = 2
    ROUTER_ADVERTISEMENT = 3
    SIX_TO_FOUR = 4


class RouteProtocol(IntEnum):
    """Routing mechanism a route was added with."""

    OTHER = 1
    LOCAL = 2
    NET_MGMT = 3
    ICMP = 4
    EGP = 5
    GGP = 6
    HELLO = 7
    RIP = 8
    IS_IS = 9
    ES_IS = 10
    CISCO = 11
    BBN = 12
    OSPF = 13
    BGP = 14
    IDPR = 15
    EIGRP = 16
    DVMRP = 17
    RPL = 18
    DHCP = 19
    NT_AUTOSTATIC = 10002
    NT_STATIC = 10006
    NT_STATIC_NON_DOD = 10007


class RouterDiscoveryBehavior(IntEnum):
    """Router discovery behaviour of an interface."""

    DISABLED = 0
    ENABLED = 1
    DHCP = 2
    UNCHANGED = -1


class SuffixOrigin(IntEnum):
    """Where an address suffix came from."""

    OTHER = 0
    MANUAL = 1
    WELL_KNOWN = 2
    DHCP = 3
    LINK_LAYER_ADDRESS = 4
    RANDOM = 5
    UNCHANGED = 1 << 4


class MibNotificationType(IntEnum):
    """Kind of change reported to a change callback."""

    PARAMETER_NOTIFICATION = 0
    ADD_INSTANCE = 1
    DELETE_INSTANCE = 2
    INITIAL_NOTIFICATION = 3


class ScopeLevel(IntEnum):
    """Scope levels of IPv6 addresses."""

    INTERFACE = 1
    LINK = 2
    SUBNET = 3
    ADMIN = 4
    SITE = 5
    ORGANIZATION = 8
    GLOBAL = 14
    COUNT = 16


class DnsInterfaceSettingsFlag(IntFlag):
    """Which fields of a DNS interface settings record are in effect."""

    IPV6 = 0x0001
    NAMESERVER = 0x0002
    SEARCH_LIST = 0x0004
    REGISTRATION_ENABLED = 0x0008
    REGISTER_ADAPTER_NAME = 0x0010
    DOMAIN = 0x0020
    HOSTNAME = 0x0040
    ENABLE_LLMNR = 0x0080
    QUERY_ADAPTER_NAME = 0x0100
    PROFILE_NAMESERVER = 0x0200
    DISABLE_UNCONSTRAINED_QUERIES = 0x0400
    SUPPLEMENTAL_SEARCH_LIST = 0x0800
    DOH = 0x1000
    DOH_PROFILE = 0x2000
# tunpacket

Mutable views over raw packet bytes, such as frames read from a TUN device.
There are views for IPv4, IPv6, TCP, UDP, ICMP and ICMPv6, with helpers for
the Internet checksum. The package also has socket-address records in the
Windows binary layout, enumerations for addresses, routes and DNS settings,
and helpers that build and run `netsh` commands for DNS servers.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Checksums

`tunpacket.checksum` provides:

- `sum16(data)` adds up `data` as big-endian 16-bit words (a trailing odd byte
  counts as a high byte), wrapping at 32 bits.
- `checksum(initial, data)` returns the two-byte one's-complement checksum of
  `data`, starting from the partial sum `initial` (for example a pseudo-header
  sum).
- `set_ipv4(packet)` sets the version nibble of a mutable buffer to 4.

```python
from tunpacket.checksum import sum16, checksum

sum16(b"\x45\x00\x00\x1c")
checksum(0, header_bytes)   # bytes of length 2
```

## Packet views

Each view wraps a buffer (use a `bytearray` to be able to write) and reads and
writes it in place. Header fields are properties; most of them can also be
assigned. `bytes(view)` and `len(view)` give the underlying data.

```python
from tunpacket.ip import IPv4Packet, IPProtocol, ip_version
from tunpacket.tcp import TCPPacket
from tunpacket.udp import UDPPacket

frame = bytearray(raw)
if ip_version(frame) == 4:
    ip = IPv4Packet(frame)
    ip.verify()                     # raises InvalidLengthError, InvalidIPVersionError
                                    # or InvalidChecksumError
    if ip.protocol == IPProtocol.UDP:
        udp = UDPPacket(ip.payload)
        print(udp.source_port, udp.destination_port)
    ip.dec_time_to_live()
    ip.reset_checksum()
```

`ip_version(data)` returns the version nibble, or `None` for empty data.

A TCP or UDP checksum is recomputed from the IP header's pseudo-header sum:

```python
tcp = TCPPacket(ip.payload)
tcp.reset_checksum(ip.pseudo_sum())
tcp.verify(ip.source_ip, ip.destination_ip)   # raises InvalidChecksumError on mismatch
```

Notes:

- `tunpacket.ip`: `IPv4Packet` and `IPv6Packet` expose source and destination
  addresses as `ipaddress` objects, plus `valid()`, `pseudo_sum()` and
  `dec_time_to_live()`. `IPv4Packet` also has `flags`, `fragment_offset`,
  `identification`, `time_to_live` and more; `IPv6Packet` has `hop_limit`,
  `next_header`, `tos()` and `set_tos(traffic_class, flow_label)`. IPv6 has no
  header checksum, so its `checksum` is always 0 and `reset_checksum()` changes
  nothing. `payload` raises `InvalidLengthError` when the length fields do not
  fit the buffer. All errors derive from `PacketError`, a `ValueError`.
- `tunpacket.tcp`: `TCPPacket` with ports, `flags` (a `TCPFlag`), `checksum`,
  `valid()`, `reset_checksum()` and `verify()`.
- `tunpacket.udp`: `UDPPacket` with ports, `length`, `payload`, `checksum`,
  `valid()` and `reset_checksum()`.
- `tunpacket.icmp`: `ICMPPacket` (`type`, `code`, `checksum`,
  `reset_checksum()` over the whole message), `ICMPv6Packet` (`type`, `code`,
  `type_specific`, `mtu`, `ident`, `sequence`, `message_body`, `payload`,
  `reset_checksum(pseudo_sum)`) and `ICMPv6Type`, whose `is_error()` is true for
  types with the high bit clear.

## Socket addresses and routes

`tunpacket.sockaddr` holds:

- `AddressFamily` (`UNSPEC`, `INET` = 2, `INET6` = 23).
- `RawSockaddrInet`, built with `from_addr_port(address, port)` or
  `from_addr(address)`; `addr()`, `port()` and `addr_port()` read it back.
  `pack()` and `unpack(data)` convert to and from the 28-byte SOCKADDR_INET
  layout. A numeric IPv6 zone becomes the scope id.
- `IPAddressPrefix`, built with `from_prefix(prefix)` from a string such as
  `"10.0.0.1/24"` or an `ipaddress` network or interface; `prefix()` gives it
  back as an interface, and `pack()` / `unpack(data)` use the 32-byte
  IP_ADDRESS_PREFIX layout.
- `RouteData`, a frozen record of `destination`, `next_hop` and `metric`.

```python
from tunpacket.sockaddr import RawSockaddrInet, IPAddressPrefix

raw = RawSockaddrInet.from_addr_port("192.0.2.1", 53)
assert RawSockaddrInet.unpack(raw.pack()) == raw

prefix = IPAddressPrefix.from_prefix("2001:db8::1/64")
print(prefix.prefix())
```

`tunpacket.addrenums` holds `DadState`, `PrefixOrigin`,
`LinkLocalAddressBehavior`, `OffloadRod`, `RouteOrigin`, `RouteProtocol`,
`RouterDiscoveryBehavior`, `SuffixOrigin`, `MibNotificationType`,
`ScopeLevel` and `DnsInterfaceSettingsFlag`.

## netsh DNS helpers

`tunpacket.netsh`:

- `dns_commands(family, interface_index, servers)` builds the commands that
  clear an interface's DNS servers and add those of the given family (2 for
  IPv4, 23 for IPv6); any other family raises `ValueError`.
- `disable_registration_command(interface_index)` builds the command that turns
  off DNS registration.
- `clean_output(output)` strips prompts and the "no DNS servers" notice.
- `run_netsh(commands)` feeds the commands to `netsh.exe` under `%SystemRoot%`
  and raises `NetshError` if it fails or prints anything.

`run_netsh` only works on Windows.

## What this package does not do

It does not configure interfaces, addresses or routes itself: it has no calls
into the operating system's interface or routing tables, no change
notifications, and no enumerations of interface types or states. Apart from
`run_netsh`, everything here works on bytes and values in memory.
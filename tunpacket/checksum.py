"""Internet checksum helpers shared by the packet views."""

from __future__ import annotations

import struct

_UINT32_MASK = 0xFFFFFFFF


def sum16(data) -> int:
    """Add up ``data`` as big-endian 16-bit words, wrapping at 32 bits.

    A trailing odd byte counts as the high byte of a final word.
    """
    view = memoryview(data).cast("B")
    length = len(view)
    total = 0
    if length & 1:
        length -= 1
        total = view[length] << 8
    total += sum(struct.unpack_from(f">{length // 2}H", view))
    return total & _UINT32_MASK


def checksum(initial: int, data) -> bytes:
    """Return the two-byte one's complement checksum of ``data``.

    ``initial`` is a partial sum to start from, such as a pseudo-header sum.
    """
    total = (initial + sum16(data)) & _UINT32_MASK
    total = (total >> 16) + (total & 0xFFFF)
    total += total >> 16
    return (~total & 0xFFFF).to_bytes(2, "big")


def set_ipv4(packet) -> None:
    """Set the version nibble of ``packet`` to 4, keeping the low nibble."""
    packet[0] = (packet[0] & 0x0F) | (4 << 4)
"""Adapter: IP addresses to network-order bytes.

WHY: The original use case for proquints is reading IPv4 addresses aloud
(``127.0.0.1`` is ``lusab-babad``). IPv6 addresses are 16 bytes and encode
to eight syllables.

HOW: Addresses are normalised through the ``ipaddress`` module, whose
``packed`` attribute is already in network (big-endian) octet order.

RULES:
- Accepts address objects or their textual form ("10.0.0.1", "::1")
- IPv4 → 4 bytes, IPv6 → 16 bytes
- A value of the wrong family raises ipaddress.AddressValueError
"""

from __future__ import annotations

import ipaddress
from typing import Union

IPv4Like = Union[ipaddress.IPv4Address, str, int]
IPv6Like = Union[ipaddress.IPv6Address, str, int]


def ipv4_to_bytes(address: IPv4Like) -> bytes:
    if not isinstance(address, ipaddress.IPv4Address):
        address = ipaddress.IPv4Address(address)
    return address.packed


def ipv6_to_bytes(address: IPv6Like) -> bytes:
    if not isinstance(address, ipaddress.IPv6Address):
        address = ipaddress.IPv6Address(address)
    return address.packed

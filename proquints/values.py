"""Typed entry points: encode integers and addresses directly.

WHY: Most callers hold an int or an IP address, not a byte string. These
helpers pick the right adapter so callers do not have to think about width
or byte order.

HOW: Each encode_* function runs one adapter and hands the bytes to the
core encoder. proquint() dispatches over the types whose width is implied
by the type itself.

RULES:
- Plain ``int`` is rejected by proquint(): its width is ambiguous, use
  encode_u16/u32/u64/usize instead
- Every function accepts the same ``separator`` keyword as encode()
"""

from __future__ import annotations

import ipaddress
from typing import Optional, Union

from proquints.adapters import (
    ipv4_to_bytes,
    ipv6_to_bytes,
    raw_bytes,
    u16_to_bytes,
    u32_to_bytes,
    u64_to_bytes,
    usize_to_bytes,
)
from proquints.adapters.addresses import IPv4Like, IPv6Like
from proquints.core.encoder import encode

ProquintValue = Union[bytes, bytearray, memoryview, ipaddress.IPv4Address, ipaddress.IPv6Address]


def encode_u16(value: int, separator: Optional[str] = None) -> str:
    return encode(u16_to_bytes(value), separator)


def encode_u32(value: int, separator: Optional[str] = None) -> str:
    return encode(u32_to_bytes(value), separator)


def encode_u64(value: int, separator: Optional[str] = None) -> str:
    return encode(u64_to_bytes(value), separator)


def encode_usize(value: int, separator: Optional[str] = None) -> str:
    """Encode a platform-width integer. Output length varies by platform."""
    return encode(usize_to_bytes(value), separator)


def encode_ipv4(address: IPv4Like, separator: Optional[str] = None) -> str:
    return encode(ipv4_to_bytes(address), separator)


def encode_ipv6(address: IPv6Like, separator: Optional[str] = None) -> str:
    return encode(ipv6_to_bytes(address), separator)


def proquint(value: ProquintValue, separator: Optional[str] = None) -> str:
    """Encode any value whose byte width is implied by its type.

    Args:
        value: Bytes-like data, an IPv4Address, or an IPv6Address.
        separator: Character between syllables (default ``"-"``).

    Raises:
        TypeError: For ``int``, ``str``, and any other unsupported type.
    """
    if isinstance(value, ipaddress.IPv4Address):
        return encode(ipv4_to_bytes(value), separator)
    if isinstance(value, ipaddress.IPv6Address):
        return encode(ipv6_to_bytes(value), separator)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return encode(raw_bytes(value), separator)
    if isinstance(value, int):
        raise TypeError(
            "Integer width is ambiguous; use encode_u16, encode_u32, "
            "encode_u64, or encode_usize"
        )
    raise TypeError("Cannot encode value of type {}".format(type(value).__name__))

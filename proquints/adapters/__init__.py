"""Type adapters: typed values to big-endian byte sequences.

WHY: The encoder only understands even-length bytes. Adapters convert the
small, fixed set of value types proquints are used for into those bytes so
that every caller gets the same byte order and width.

HOW: One named function per supported type. ADAPTERS maps a short type name
(used by the CLI ``--type`` flag) to that function:
``data = ADAPTERS["ipv4"]("127.0.0.1")``.

RULES:
- Adapters are pure byte-order conversions: no encoding logic, no I/O
- The set of types is closed; add a type by adding a function and one
  registry line
- raw_bytes passes input through unchanged, still subject to the encoder's
  even-length precondition
"""

from __future__ import annotations

from typing import Callable, Dict, Union

from proquints.adapters.addresses import ipv4_to_bytes, ipv6_to_bytes
from proquints.adapters.integers import (
    USIZE_WIDTH,
    u16_to_bytes,
    u32_to_bytes,
    u64_to_bytes,
    usize_to_bytes,
)


def raw_bytes(data: Union[bytes, bytearray, memoryview]) -> bytes:
    return bytes(data)


ADAPTERS: Dict[str, Callable[..., bytes]] = {
    "bytes": raw_bytes,
    "u16": u16_to_bytes,
    "u32": u32_to_bytes,
    "u64": u64_to_bytes,
    "usize": usize_to_bytes,
    "ipv4": ipv4_to_bytes,
    "ipv6": ipv6_to_bytes,
}

__all__ = [
    "ADAPTERS",
    "USIZE_WIDTH",
    "ipv4_to_bytes",
    "ipv6_to_bytes",
    "raw_bytes",
    "u16_to_bytes",
    "u32_to_bytes",
    "u64_to_bytes",
    "usize_to_bytes",
]

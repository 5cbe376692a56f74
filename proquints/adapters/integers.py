"""Adapter: unsigned integers to big-endian bytes.

WHY: Proquints are defined over bytes, but most identifiers callers want to
encode (ports, counters, database keys, hashes truncated to 64 bits) are
integers. Each integer width needs a fixed byte length so the same value
always yields the same number of syllables.

HOW: ``int.to_bytes`` with ``byteorder="big"`` and ``signed=False``. Values
that do not fit the width, or are negative, raise OverflowError from
``int.to_bytes`` itself.

RULES:
- Big-endian (most significant byte first), matching network order
- u16 → 2 bytes, u32 → 4, u64 → 8, usize → USIZE_WIDTH
- usize output depends on the interpreter's native pointer width, so it is
  not portable between 32- and 64-bit platforms
"""

from __future__ import annotations

import struct

USIZE_WIDTH = struct.calcsize("N")
"""Width in bytes of the platform's native ``size_t``."""


def _unsigned_to_bytes(value: int, width: int) -> bytes:
    return value.to_bytes(width, byteorder="big", signed=False)


def u16_to_bytes(value: int) -> bytes:
    return _unsigned_to_bytes(value, 2)


def u32_to_bytes(value: int) -> bytes:
    return _unsigned_to_bytes(value, 4)


def u64_to_bytes(value: int) -> bytes:
    return _unsigned_to_bytes(value, 8)


def usize_to_bytes(value: int) -> bytes:
    """Convert a platform-width unsigned integer to ``USIZE_WIDTH`` bytes.

    The same value encodes to a different number of syllables on 32-bit and
    64-bit interpreters. Prefer u32_to_bytes or u64_to_bytes for identifiers
    that leave the process.
    """
    return _unsigned_to_bytes(value, USIZE_WIDTH)

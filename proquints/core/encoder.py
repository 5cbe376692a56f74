"""Proquint encoder: even-length bytes to pronounceable syllables.

WHY: Binary identifiers (addresses, keys, counters) are hard to read aloud,
compare by eye, or type from memory. A proquint maps every 16 bits to one
five-letter consonant-vowel syllable, so ``127.0.0.1`` becomes
``lusab-babad``.

HOW: The input is read as consecutive big-endian 16-bit blocks. Each block
is split into 4+2+4+2+4 bits and every field indexes the consonant or vowel
table. Syllables are written straight into an ASCII output buffer with a
separator between them. ``encode()`` allocates that buffer; ``encode_into()``
writes into one the caller owns.

RULES:
- Input length must be even and non-zero (OddLengthError otherwise)
- Explicit buffers must hold at least output_length(len(data)) bytes
  (BufferTooSmallError otherwise); nothing is written on failure
- Separator is exactly one ASCII character; no trailing separator
- Output is always ASCII, so decoding it can never fail
- Stateless and re-entrant: safe to call from any number of threads
"""

from __future__ import annotations

from typing import Optional, Union

from proquints.core.alphabet import CONSONANTS, VOWELS
from proquints.errors import BufferTooSmallError, InvalidSeparatorError, OddLengthError

BytesLike = Union[bytes, bytearray, memoryview]

DEFAULT_SEPARATOR = "-"
"""Separator used by encode() when none is given."""

SYLLABLE_LENGTH = 5


def output_length(input_length: int) -> int:
    """Return the number of characters produced for ``input_length`` bytes.

    WHY: Callers of encode_into() need to size their buffer up front.

    HOW: Every 2-byte block becomes 5 characters plus a separator, minus the
    separator after the final syllable.

    RULES:
    - Zero, negative, and odd lengths raise OddLengthError; there is no
      meaningful output size for them
    """
    if input_length <= 0 or input_length % 2:
        raise OddLengthError(input_length)
    return (input_length // 2) * 6 - 1


def _separator_byte(separator: str) -> int:
    if not isinstance(separator, str) or len(separator) != 1 or not separator.isascii():
        raise InvalidSeparatorError(separator)
    return ord(separator)


def _write_block(block: int, out: memoryview, offset: int) -> None:
    out[offset] = CONSONANTS[(block >> 12) & 0xF]
    out[offset + 1] = VOWELS[(block >> 10) & 0x3]
    out[offset + 2] = CONSONANTS[(block >> 6) & 0xF]
    out[offset + 3] = VOWELS[(block >> 4) & 0x3]
    out[offset + 4] = CONSONANTS[block & 0xF]


def encode_block(block: int) -> str:
    """Return the five-letter syllable for a single 16-bit value."""
    if not 0 <= block <= 0xFFFF:
        raise ValueError("Block must be a 16-bit unsigned value, got {}".format(block))
    out = bytearray(SYLLABLE_LENGTH)
    _write_block(block, memoryview(out), 0)
    return out.decode("ascii")


def _byte_view(data: BytesLike) -> memoryview:
    view = memoryview(data)
    if view.c_contiguous:
        return view.cast("B")
    # Strided or multi-dimensional input: copy into one contiguous block
    return memoryview(view.tobytes())


def _output_view(buffer: Union[bytearray, memoryview]) -> memoryview:
    view = memoryview(buffer)
    if view.readonly:
        raise TypeError("Output buffer must be writable")
    if view.ndim == 1 and view.format == "B":
        return view
    if view.c_contiguous:
        return view.cast("B")
    raise TypeError("Output buffer must be one-dimensional bytes or C-contiguous")


def encode_into(
    data: BytesLike,
    buffer: Union[bytearray, memoryview],
    separator: Optional[str] = None,
) -> memoryview:
    """Encode ``data`` into a caller-supplied buffer.

    WHY: Callers encoding many values can reuse one buffer instead of
    allocating a new string per call.

    HOW: Validates every precondition first, then writes syllables and
    separators left to right starting at offset 0 of ``buffer``.

    RULES:
    - ``buffer`` must be writable and at least output_length(len(data)) long
    - ``buffer`` may be a strided one-dimensional byte view; other
      non-contiguous layouts raise TypeError
    - Bytes past the written prefix are left untouched
    - The returned view aliases ``buffer``; it changes if the buffer does

    Args:
        data: Even-length bytes-like input, contiguous or not.
        buffer: Writable destination, e.g. a ``bytearray``.
        separator: Single ASCII character placed between syllables
                   (default ``"-"``).

    Returns:
        A memoryview over the written prefix of ``buffer``.
    """
    if separator is None:
        separator = DEFAULT_SEPARATOR
    sep = _separator_byte(separator)
    src = _byte_view(data)
    required = output_length(len(src))

    out = _output_view(buffer)
    if len(out) < required:
        raise BufferTooSmallError(required, len(out))

    pos = 0
    for i in range(0, len(src), 2):
        _write_block((src[i] << 8) | src[i + 1], out, pos)
        pos += SYLLABLE_LENGTH
        if pos < required:
            out[pos] = sep
            pos += 1

    return out[:required]


def encode(data: BytesLike, separator: Optional[str] = None) -> str:
    """Encode ``data`` as a proquint string.

    Args:
        data: Even-length bytes-like input.
        separator: Character between syllables (default ``"-"``).

    Returns:
        The proquint, e.g. ``"lusab-babad"`` for ``b"\\x7f\\x00\\x00\\x01"``.
    """
    src = _byte_view(data)
    buf = bytearray(output_length(len(src)))
    encode_into(src, buf, separator)
    return buf.decode("ascii")

"""proquints: PRO-nounceable QUINT-uplets for binary identifiers.

WHY: Addresses, keys, and counters are easier to read aloud, remember, and
compare when written as pronounceable syllables. A proquint encodes every
16 bits as one consonant-vowel-consonant-vowel-consonant syllable:
``127.0.0.1`` → ``lusab-babad``.

HOW: Two layers. The core encoder maps even-length bytes to syllables using
two fixed symbol tables. Adapters convert typed values (u16/u32/u64/usize
integers, IPv4/IPv6 addresses) to big-endian bytes first.

RULES:
- Encoding only: no decoding, no syntax validation
- Symbol table ordering is the wire format and never changes
- Precondition faults raise ProquintError subclasses (also ValueError)
"""

__version__ = "0.1.0"

from proquints.core.encoder import (
    DEFAULT_SEPARATOR,
    encode,
    encode_block,
    encode_into,
    output_length,
)
from proquints.errors import (
    BufferTooSmallError,
    InvalidSeparatorError,
    OddLengthError,
    ProquintError,
)
from proquints.values import (
    encode_ipv4,
    encode_ipv6,
    encode_u16,
    encode_u32,
    encode_u64,
    encode_usize,
    proquint,
)

__all__ = [
    "BufferTooSmallError",
    "DEFAULT_SEPARATOR",
    "InvalidSeparatorError",
    "OddLengthError",
    "ProquintError",
    "encode",
    "encode_block",
    "encode_into",
    "encode_ipv4",
    "encode_ipv6",
    "encode_u16",
    "encode_u32",
    "encode_u64",
    "encode_usize",
    "output_length",
    "proquint",
]

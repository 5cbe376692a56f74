"""Exception types raised when an encode call's preconditions are violated.

WHY: Encoding has no recoverable failure mode: a wrong-length input or an
undersized buffer is a bug in the caller. Typed exceptions let callers and
tests tell the fault classes apart without parsing messages.

HOW: A small hierarchy rooted at ProquintError. Every class also derives
from ValueError, so existing ``except ValueError`` handlers keep working.

RULES:
- Raised unconditionally (never via ``assert``, which ``python -O`` strips)
- Raised before any output byte is written
- Messages include the offending length or value
"""


class ProquintError(ValueError):
    """Base class for all proquint precondition faults."""


class OddLengthError(ProquintError):
    """Raised when the input length is odd or zero.

    WHY: Each syllable encodes exactly one 16-bit block. An odd trailing byte
    cannot be represented, and silently dropping it would hide data loss.

    RULES:
    - Zero-length input is rejected the same way as odd length
    """

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            "Proquint input must be a non-empty, even number of bytes, got {}".format(length)
        )


class BufferTooSmallError(ProquintError):
    """Raised when an explicit output buffer cannot hold the encoded result."""

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(
            "Output buffer too small: need {} bytes, got {}".format(required, available)
        )


class InvalidSeparatorError(ProquintError):
    """Raised when the separator is not exactly one ASCII character."""

    def __init__(self, separator: object) -> None:
        self.separator = separator
        super().__init__(
            "Separator must be a single ASCII character, got {!r}".format(separator)
        )

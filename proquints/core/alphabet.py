"""Consonant and vowel symbol tables.

The ordering of both tables is part of the proquint wire format: index ``i``
of CONSONANTS encodes the 4-bit value ``i`` and index ``i`` of VOWELS the
2-bit value ``i``. Never reorder or extend them.
"""

from __future__ import annotations

CONSONANTS: bytes = b"bdfghjklmnprstvz"
"""16 consonants, indexed by a 4-bit value."""

VOWELS: bytes = b"aiou"
"""4 vowels, indexed by a 2-bit value."""

CONSONANT_CHARS = frozenset(CONSONANTS.decode("ascii"))
VOWEL_CHARS = frozenset(VOWELS.decode("ascii"))

"""Core encoding modules.

WHY: The core package holds the part of proquints that defines the wire
format: the symbol tables and the block-to-syllable encoder. Everything
else (typed adapters, CLI) is a thin layer over it.

HOW: alphabet.py defines the immutable consonant/vowel tables, encoder.py
turns even-length bytes into syllables using them.

RULES:
- Core modules know nothing about integers, addresses, or the CLI
- Symbol table ordering never changes
"""

from proquints.core.encoder import (
    DEFAULT_SEPARATOR,
    encode,
    encode_block,
    encode_into,
    output_length,
)

__all__ = [
    "DEFAULT_SEPARATOR",
    "encode",
    "encode_block",
    "encode_into",
    "output_length",
]

"""Shared test fixtures for the proquints test suite.

WHY: Several test modules check the same reference vectors from the
proquint proposal. Keeping them in one place means every module tests
against the same authoritative data.

HOW: KNOWN_VECTORS holds (dotted-quad, proquint) pairs. Fixtures expose
them as address objects and as raw 4-byte inputs.

RULES:
- Vectors are the IPv4 examples from the proquint proposal, unmodified.
- Expected output always uses the default "-" separator.
"""

import ipaddress
from typing import List, Tuple

import pytest


KNOWN_VECTORS: List[Tuple[str, str]] = [
    ("127.0.0.1",      "lusab-babad"),
    ("63.84.220.193",  "gutih-tugad"),
    ("63.118.7.35",    "gutuk-bisog"),
    ("140.98.193.141", "mudof-sakat"),
    ("64.255.6.200",   "haguz-biram"),
    ("128.30.52.45",   "mabiv-gibot"),
    ("147.67.119.2",   "natag-lisaf"),
    ("212.58.253.68",  "tibup-zujah"),
    ("216.35.68.215",  "tobog-higil"),
    ("216.68.232.21",  "todah-vobij"),
    ("198.81.129.136", "sinid-makam"),
    ("12.110.110.204", "budov-kuras"),
]


@pytest.fixture
def known_vectors():
    """(dotted-quad, expected proquint) pairs."""
    return list(KNOWN_VECTORS)


@pytest.fixture
def known_byte_vectors():
    """(4-byte input, expected proquint) pairs."""
    return [(ipaddress.IPv4Address(addr).packed, quint) for addr, quint in KNOWN_VECTORS]


@pytest.fixture
def localhost_bytes():
    return bytes([127, 0, 0, 1])

"""Command-line interface for proquints.

WHY: Operators want to turn an address or an ID from a log line into its
proquint (and back into something they can say on a call) without writing
Python. The CLI wraps the adapters and the encoder behind one command.

HOW: argparse accepts one or more values (or reads them from stdin, one per
line), a value type, and output options. Each value is parsed from text,
converted to bytes by the matching adapter, and encoded. Results go to
stdout as plain lines or as one JSON document; errors go to stderr.

RULES:
- Positional: zero or more values; with none, values are read from stdin
  (blank lines and lines starting with "#" are skipped)
- --type: auto (default), hex, or any ADAPTERS key except "bytes"
- auto: IPv4/IPv6 literals are addresses, everything else is hex
- Integer types accept decimal, 0x, 0o, and 0b literals
- --json output validates against proquints_cli_output_schema.json
- Exit code 0 on success, 1 on any invalid value (nothing printed to stdout)
- Defaults come from proquints.config (PROQUINTS_* environment variables)
"""

from __future__ import annotations

import argparse
import ipaddress
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence, Tuple

from proquints import __version__
from proquints.adapters import ADAPTERS
from proquints.config import (
    AUTO_TYPE,
    DEFAULT_TYPE,
    DEFAULT_UPPERCASE,
    HEX_TYPE,
    load_separator,
)
from proquints.core.encoder import encode

logger = logging.getLogger(__name__)

_INTEGER_TYPES = frozenset({"u16", "u32", "u64", "usize"})
_ADDRESS_TYPES = frozenset({"ipv4", "ipv6"})

VALUE_TYPES: List[str] = [AUTO_TYPE, HEX_TYPE] + sorted(_INTEGER_TYPES | _ADDRESS_TYPES)


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _parse_hex(text: str) -> bytes:
    digits = text[2:] if text.lower().startswith("0x") else text
    digits = digits.replace(":", "").replace("_", "")
    try:
        return bytes.fromhex(digits)
    except ValueError:
        raise ValueError("Not a valid hex string: {!r}".format(text)) from None


def _detect_type(text: str) -> str:
    try:
        address = ipaddress.ip_address(text)
    except ValueError:
        return HEX_TYPE
    return "ipv4" if address.version == 4 else "ipv6"


def value_to_bytes(text: str, value_type: str) -> Tuple[str, bytes]:
    """Convert one textual value into bytes ready for encoding.

    WHY: Values on the command line are always strings. Each type has its
    own literal syntax, and "auto" has to guess between address and hex.

    HOW: Resolves "auto" to a concrete type, parses the literal, and runs
    the registered adapter.

    RULES:
    - Returns the resolved type so output can report it
    - Integer overflow and malformed literals raise ValueError
    - Encoder preconditions (even length) are not checked here

    Args:
        text: The value exactly as given by the user (stripped).
        value_type: One of VALUE_TYPES.

    Returns:
        Tuple of (resolved_type, data).
    """
    if value_type == AUTO_TYPE:
        value_type = _detect_type(text)

    if value_type == HEX_TYPE:
        return value_type, _parse_hex(text)

    if value_type in _INTEGER_TYPES:
        try:
            number = int(text, 0)
        except ValueError:
            raise ValueError("Not a valid integer: {!r}".format(text)) from None
        try:
            return value_type, ADAPTERS[value_type](number)
        except OverflowError:
            raise ValueError("{} does not fit in {}".format(text, value_type)) from None

    if value_type in _ADDRESS_TYPES:
        return value_type, ADAPTERS[value_type](text)

    raise ValueError("Unknown value type: {!r}".format(value_type))


def _read_stdin_values() -> List[str]:
    values: List[str] = []
    for line in sys.stdin:
        line = line.strip()
        if line and not line.startswith("#"):
            values.append(line)
    return values


def _encode_values(
    values: Sequence[str],
    value_type: str,
    separator: str,
    uppercase: bool,
) -> List[Dict[str, Any]]:
    results: List[Dict[str, Any]] = []
    for text in values:
        resolved, data = value_to_bytes(text, value_type)
        logger.debug("Parsed %r as %s (%d bytes)", text, resolved, len(data))
        quint = encode(data, separator)
        if uppercase:
            quint = quint.upper()
        results.append({
            "input": text,
            "type": resolved,
            "bytes": data.hex(),
            "proquint": quint,
        })
    return results


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Kept separate from main() so tests can inspect defaults and choices.
    """
    parser = argparse.ArgumentParser(
        prog="proquints",
        description="Encode integers, IP addresses, and hex bytes as "
                    "pronounceable proquint identifiers.",
    )

    parser.add_argument(
        "values",
        nargs="*",
        help="Values to encode. Reads one value per line from stdin if omitted.",
    )

    parser.add_argument(
        "-t", "--type",
        dest="value_type",
        default=DEFAULT_TYPE,
        choices=VALUE_TYPES,
        help="How to interpret each value (default: %(default)s).",
    )

    parser.add_argument(
        "-s", "--separator",
        default=None,
        help="Single character placed between syllables "
             "(default: $PROQUINTS_SEPARATOR or '-').",
    )

    parser.add_argument(
        "--upper",
        action=argparse.BooleanOptionalAction,
        default=DEFAULT_UPPERCASE,
        help="Print proquints in upper case (default: %(default)s).",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as a JSON document instead of one per line.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log parsing details to stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    # argparse does not check defaults against choices
    if args.value_type not in VALUE_TYPES:
        _status("Error: Unknown value type '{}'. Available types: {}".format(
            args.value_type, ", ".join(VALUE_TYPES)
        ))
        return 1

    try:
        separator = args.separator if args.separator is not None else load_separator()
        values = args.values if args.values else _read_stdin_values()
        results = _encode_values(values, args.value_type, separator, args.upper)
    except ValueError as e:
        # Covers malformed literals, bad configuration, and encoder faults
        _status("Error: {}".format(e))
        return 1

    if not values:
        _status("Error: No values given.")
        return 1

    if args.json:
        print(json.dumps({"results": results}, indent=2))
    else:
        for result in results:
            print(result["proquint"])

    return 0

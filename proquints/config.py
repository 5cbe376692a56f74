"""CLI defaults with .env and environment overrides.

WHY: Users who always want a different separator or value type should not
have to repeat the flag on every invocation. Keeping the defaults here,
instead of inside argparse calls, makes them easy to find and override.

HOW: python-dotenv loads a .env file from the working directory on import.
Each default is a module constant read from the environment, falling back
to the library's own default.

RULES:
- Only the CLI imports this module; library functions never read the
  environment
- PROQUINTS_SEPARATOR must be a single ASCII character
- PROQUINTS_DEFAULT_TYPE must be one of cli.VALUE_TYPES
- Booleans accept "true"/"false" (case-insensitive)
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from proquints.core.encoder import DEFAULT_SEPARATOR

# Load .env from the directory the CLI is run from
load_dotenv()

# ---------------------------------------------------------------------------
# Value types accepted by --type
# ---------------------------------------------------------------------------

AUTO_TYPE = "auto"
HEX_TYPE = "hex"

DEFAULT_TYPE = os.getenv("PROQUINTS_DEFAULT_TYPE", AUTO_TYPE).strip().lower()
DEFAULT_UPPERCASE = os.getenv("PROQUINTS_UPPERCASE", "false").strip().lower() == "true"


def load_separator() -> str:
    """Return the configured CLI separator.

    WHY: A multi-character or non-ASCII separator would break the one
    syllable-per-six-characters layout, so bad configuration should fail
    with a message naming the variable rather than deep inside encode().

    RULES:
    - Unset or empty falls back to "-"
    - Raises ValueError for anything other than one ASCII character
    """
    value = os.getenv("PROQUINTS_SEPARATOR", "")
    if not value:
        return DEFAULT_SEPARATOR
    if len(value) != 1 or not value.isascii():
        raise ValueError(
            "PROQUINTS_SEPARATOR must be a single ASCII character, got {!r}".format(value)
        )
    return value

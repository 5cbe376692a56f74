"""Package entry point for ``python -m proquints``.

Delegates to the CLI's main() and exits with its return code.
"""

import sys

from proquints.cli import main

if __name__ == "__main__":
    sys.exit(main())

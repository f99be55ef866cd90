"""CLI entry point for packet2drawio.

Allows running the converter from a checkout with ``python . <input>``.
"""

import sys

from packet2drawio.cli import main

if __name__ == "__main__":
    sys.exit(main())

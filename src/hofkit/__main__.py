"""Entry point for ``python -m hofkit``."""

import sys

from hofkit.cli import main

if __name__ == "__main__":
    sys.exit(main())

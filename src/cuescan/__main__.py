"""Entry point for ``python -m cuescan``."""

import sys

from cuescan.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())

"""Entry point for ``python -m codefence``."""

import sys

from codefence.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())

"""Allow ``python -m tfmdoc``."""

import sys

from tfmdoc.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())

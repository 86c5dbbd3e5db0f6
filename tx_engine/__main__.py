"""Allow ``python -m tx_engine``."""

import sys

from tx_engine.cli import main

if __name__ == "__main__":
    sys.exit(main())

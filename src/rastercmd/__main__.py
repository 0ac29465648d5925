"""Entry point for running rastercmd as a module."""

import sys

from rastercmd.cli.encode import main

if __name__ == "__main__":
    sys.exit(main())

"""Entry point for running the analyzer as a module.

Usage: python -m phasor_scope.cli
"""

import sys

from phasor_scope.cli import main

if __name__ == "__main__":
    sys.exit(main())

"""
stackmodel CLI entry point.

Usage:
    python -m stackmodel [FILE] [--settings PATH] [--indent N]
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())

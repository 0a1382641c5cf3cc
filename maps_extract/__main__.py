"""
Package entry point.

Allows running: python -m maps_extract "restaurants in New York"
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python
"""
Google Maps Business Extractor - CLI

Collect the businesses matching a search query into an Excel workbook.

Usage:
    python extract.py "restaurants in New York"
    python extract.py "plumbers" --location-bias "Chicago, IL" --radius 5000
    python extract.py "cafes in Paris" --max-results 60 -o cafes.xlsx

Requires GOOGLE_MAPS_API_KEY to be set (or --api-key).
"""

import sys
from maps_extract.cli import main

if __name__ == "__main__":
    sys.exit(main())

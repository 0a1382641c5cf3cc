"""
Command Line Interface

Entry point for running an extraction from the command line.

Usage:
    python -m maps_extract "restaurants in New York"
    python -m maps_extract "plumbers" --location-bias "Chicago, IL" --radius 5000
    python -m maps_extract "cafes in Paris" --max-results 60 -o cafes.xlsx
"""

import argparse
import logging
import os
import sys

from .config import DEFAULT_MAX_RESULTS, MAX_RESULTS_CAP
from .exceptions import MapsExtractorError
from .extractor import MapsExtractor


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Google Maps Business Extractor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m maps_extract "restaurants in New York"
  python -m maps_extract "plumbers" --location-bias "Chicago, IL" --radius 5000
  python -m maps_extract "cafes in Paris" --max-results 60 -o cafes.xlsx
  python -m maps_extract "dentists" --api-key YOUR_KEY -q

The API key defaults to the GOOGLE_MAPS_API_KEY environment variable.
        """
    )

    # Required arguments
    parser.add_argument(
        "query",
        help="Search query (e.g., 'restaurants in New York')"
    )

    # Optional arguments
    parser.add_argument(
        "-l", "--location-bias",
        help="Location to bias results toward (city, ZIP code, address)"
    )
    parser.add_argument(
        "-r", "--radius",
        type=float,
        help="Bias radius in meters, used with --location-bias (1-50000)"
    )
    parser.add_argument(
        "-n", "--max-results",
        type=int,
        default=DEFAULT_MAX_RESULTS,
        help=f"Maximum number of places (default: {DEFAULT_MAX_RESULTS}, max: {MAX_RESULTS_CAP})"
    )
    parser.add_argument(
        "-o", "--output",
        help="Output .xlsx file path (default: generated maps-extract-<time>.xlsx)"
    )
    parser.add_argument(
        "--api-key",
        help="Google Maps API key (overrides GOOGLE_MAPS_API_KEY)"
    )
    parser.add_argument(
        "--page-delay",
        type=float,
        help="Seconds to wait before requesting the next results page"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress progress output"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        with MapsExtractor(api_key=args.api_key, page_delay=args.page_delay) as extractor:
            result = extractor.extract(
                args.query,
                location_bias=args.location_bias,
                radius=args.radius,
                max_results=args.max_results,
            )

        output = args.output or result.filename
        output_dir = os.path.dirname(output)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(output, "wb") as f:
            f.write(result.workbook)

        if not args.quiet:
            print(f"\nDone! Collected {result.record_count} businesses.")
            print(f"  Excel output: {output}")

        return 0

    except MapsExtractorError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())

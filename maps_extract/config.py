"""
Default configuration for the Google Maps Business Extractor.

Module-level defaults used by the extraction pipeline. The API key and the
tunable values can be overridden through environment variables or through
ExtractorConfig / MapsExtractor() constructor args.
"""

import os

# Google Maps web services
GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
TEXT_SEARCH_URL = "https://maps.googleapis.com/maps/api/place/textsearch/json"
PLACE_DETAILS_URL = "https://maps.googleapis.com/maps/api/place/details/json"

# Credential shared by all three endpoints
API_KEY_ENV_VAR = "GOOGLE_MAPS_API_KEY"

# Fields requested from the place details endpoint
DETAIL_FIELDS = (
    "name",
    "formatted_address",
    "formatted_phone_number",
    "international_phone_number",
    "website",
    "rating",
    "user_ratings_total",
    "types",
    "geometry",
    "opening_hours",
    "business_status",
)

# Statuses that mean "no data" rather than failure
SEARCH_OK_STATUSES = ("OK", "ZERO_RESULTS")
DETAILS_OK_STATUSES = ("OK", "ZERO_RESULTS", "NOT_FOUND")

# Result limits
MAX_RESULTS_CAP = 120
DEFAULT_MAX_RESULTS = 40

# Search radius bounds (meters)
MIN_RADIUS = 1
MAX_RADIUS = 50000

# Rate Limiting (seconds)
# next_page_token needs time to become valid upstream
DELAY_BETWEEN_PAGES = float(os.environ.get("GMAPS_PAGE_DELAY", "2.0"))

# HTTP
REQUEST_TIMEOUT = float(os.environ.get("GMAPS_REQUEST_TIMEOUT", "30.0"))

# API Server
API_HOST = os.environ.get("GMAPS_API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("GMAPS_API_PORT", "8000"))

# Workbook Output
SHEET_NAME = "Businesses"
FILENAME_PREFIX = "maps-extract"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# (header, record key, column width)
WORKBOOK_COLUMNS = [
    ("Name", "name", 35),
    ("Phone", "phone", 18),
    ("Address", "address", 50),
    ("Latitude", "latitude", 15),
    ("Longitude", "longitude", 15),
    ("Rating", "rating", 10),
    ("Reviews", "reviews", 10),
    ("Website", "website", 40),
    ("Status", "status", 16),
    ("Open Now", "open_now", 12),
    ("Types", "types", 40),
    ("Place ID", "place_id", 44),
]


def get_api_key():
    """Get the Google Maps API key from the environment, or None."""
    return os.environ.get(API_KEY_ENV_VAR) or None

"""
Google Maps Business Extractor

Turns a Google Maps style search query into an Excel workbook of businesses
with phone numbers, addresses, coordinates, ratings and opening status.

Quick start (library usage):
    from maps_extract import MapsExtractor

    with MapsExtractor(api_key="...") as extractor:
        result = extractor.extract("restaurants in New York", max_results=20)
        for place in result:
            print(place.name, place.phone)

Or run the HTTP API:
    maps-extract-server
"""

from .config_manager import ExtractorConfig
from .exceptions import (
    MapsExtractorError,
    ConfigurationError,
    ValidationError,
    UpstreamError,
    PlaceDetailsError,
)
from .extractor import MapsExtractor, ExtractionResult
from .models import GeocodeResult, PlaceSummary, PlaceDetail, ExtractionRequest

__version__ = "1.0.0"
__all__ = [
    "MapsExtractor",
    "ExtractionResult",
    "ExtractorConfig",
    "GeocodeResult",
    "PlaceSummary",
    "PlaceDetail",
    "ExtractionRequest",
    "MapsExtractorError",
    "ConfigurationError",
    "ValidationError",
    "UpstreamError",
    "PlaceDetailsError",
]

"""
MapsExtractor - High-level API for Google Maps business extraction.

Provides the main user-facing class for the library. Owns the HTTP client
and configuration, and runs the extraction pipeline:
location bias -> text search -> per-place details -> workbook.

Usage:
    from maps_extract import MapsExtractor

    with MapsExtractor(api_key="...") as extractor:
        result = extractor.extract("restaurants in New York", max_results=20)
        with open(result.filename, "wb") as f:
            f.write(result.workbook)
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .config_manager import ExtractorConfig
from .extraction import fetch_places, enrich_places
from .geo import geocode_location
from .models import ExtractionRequest, PlaceDetail
from .workbook import build_workbook, workbook_to_bytes, generate_filename

logger = logging.getLogger(__name__)


class ExtractionResult:
    """Result object returned by extract().

    Attributes:
        records: Enriched places, in search order.
        workbook: The .xlsx file contents.
        filename: Suggested download filename.
        request: The normalized request that produced this result.
    """

    def __init__(
        self,
        records: List[PlaceDetail],
        workbook: bytes,
        filename: str,
        request: ExtractionRequest,
    ):
        self.records = records
        self.workbook = workbook
        self.filename = filename
        self.request = request

    @property
    def record_count(self) -> int:
        return len(self.records)

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def __getitem__(self, index):
        return self.records[index]

    def to_dict(self) -> Dict[str, Any]:
        """Return the metadata of the result (without the workbook bytes)."""
        return {
            "query": self.request.query,
            "record_count": self.record_count,
            "filename": self.filename,
            "place_ids": [r.place_id for r in self.records],
        }

    def __repr__(self):
        return f"<ExtractionResult: {self.record_count} places for '{self.request.query}'>"


class MapsExtractor:
    """High-level interface for Google Maps business extraction.

    One HTTP client is shared by all calls of an extractor and closed by
    shutdown() or on leaving the `with` block. Every call to extract() is
    independent; nothing is cached between calls.

    Args:
        api_key: Google Maps API key. Falls back to GOOGLE_MAPS_API_KEY.
        config: Full configuration object. Overrides api_key if given.
        transport: Optional httpx transport (e.g. a mock in tests).
        page_delay: Override for the pause between search pages (seconds).

    Example:
        with MapsExtractor() as ext:
            result = ext.extract("plumbers in Chicago", location_bias="60601")
            print(f"Found {len(result)} businesses")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        config: Optional[ExtractorConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
        page_delay: Optional[float] = None,
    ):
        self._config = config or ExtractorConfig(api_key=api_key)
        if page_delay is not None:
            self._config.delay_between_pages = page_delay

        self._client = httpx.Client(
            timeout=self._config.request_timeout,
            transport=transport,
        )

    @property
    def config(self) -> ExtractorConfig:
        return self._config

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
        return False

    def shutdown(self):
        """Close the HTTP client."""
        self._client.close()

    def build_request(
        self,
        query: Optional[str],
        location_bias: Optional[str] = None,
        radius: Optional[float] = None,
        max_results: Optional[int] = None,
    ) -> ExtractionRequest:
        """Validate and normalize caller input using this extractor's limits."""
        return ExtractionRequest.create(
            query,
            location_bias=location_bias,
            radius=radius,
            max_results=max_results,
            default_max_results=self._config.default_max_results,
            max_results_cap=self._config.max_results_cap,
        )

    def extract(
        self,
        query: Optional[str],
        location_bias: Optional[str] = None,
        radius: Optional[float] = None,
        max_results: Optional[int] = None,
    ) -> ExtractionResult:
        """Run the full pipeline and build the workbook.

        Args:
            query: Text search query (e.g., "restaurants in New York").
            location_bias: Optional free-text location to bias results toward.
            radius: Optional bias radius in meters, clamped to [1, 50000].
            max_results: Result cap, clamped to [1, 120] (default 40).

        Returns:
            ExtractionResult with the enriched records and the workbook.

        Raises:
            ConfigurationError: No API key is configured.
            ValidationError: The query is empty.
            UpstreamError: Geocoding or search failed.
        """
        api_key = self._config.require_api_key()
        request = self.build_request(query, location_bias, radius, max_results)

        if self._config.verbose:
            logger.info(
                "Extracting %r (bias=%r, radius=%s, max_results=%d)",
                request.query, request.location_bias, request.radius, request.max_results,
            )

        location = None
        if request.location_bias:
            location = geocode_location(self._client, request.location_bias, api_key)

        places = fetch_places(
            self._client,
            api_key,
            request.query,
            location=location,
            radius=request.radius,
            max_results=request.max_results,
            page_delay=self._config.delay_between_pages,
        )

        records = enrich_places(self._client, api_key, places)

        workbook = workbook_to_bytes(build_workbook(records))
        filename = generate_filename()

        if self._config.verbose:
            logger.info("Built %s with %d records", filename, len(records))

        return ExtractionResult(records, workbook, filename, request)

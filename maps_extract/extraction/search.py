"""
Search Execution

Runs a Places text search and follows next_page_token continuation tokens
until the result cap is reached or no more pages are available.
"""

import logging
import time
from typing import Dict, List, Optional

import httpx

from ..config import (
    TEXT_SEARCH_URL,
    SEARCH_OK_STATUSES,
    MIN_RADIUS,
    MAX_RADIUS,
    DEFAULT_MAX_RESULTS,
    DELAY_BETWEEN_PAGES,
)
from ..exceptions import UpstreamError
from ..models import GeocodeResult, PlaceSummary

logger = logging.getLogger(__name__)


def clamp_radius(radius: float) -> float:
    """Clamp a search radius into the range the API accepts (meters)."""
    return min(max(radius, MIN_RADIUS), MAX_RADIUS)


def build_search_params(
    query: str,
    api_key: str,
    location: Optional[GeocodeResult] = None,
    radius: Optional[float] = None,
    page_token: Optional[str] = None,
) -> Dict[str, str]:
    """
    Build query parameters for a text search request.

    location and radius are bias parameters; radius is only sent together
    with a location.

    Args:
        query: What to search for (e.g., "restaurants in New York")
        api_key: Google Maps API key
        location: Bias coordinates
        radius: Bias radius in meters
        page_token: Continuation token from the previous page

    Returns:
        Dictionary of query parameters
    """
    params = {
        "query": query,
        "key": api_key,
    }

    if location is not None:
        params["location"] = location.as_param()
        if radius is not None:
            params["radius"] = f"{clamp_radius(radius):g}"

    if page_token:
        params["pagetoken"] = page_token

    return params


def execute_search(client: httpx.Client, params: Dict[str, str]) -> Dict:
    """
    Execute a single text search request.

    Args:
        client: HTTP client used for the request
        params: Query parameters from build_search_params()

    Returns:
        Decoded JSON response

    Raises:
        UpstreamError: On a non-2xx response or a non-success API status
    """
    response = client.get(TEXT_SEARCH_URL, params=params)

    if not response.is_success:
        raise UpstreamError("Failed to query Google Places search endpoint")

    data = response.json()
    status = data.get("status")

    if status not in SEARCH_OK_STATUSES:
        if data.get("error_message"):
            raise UpstreamError(data["error_message"])
        raise UpstreamError(f"Google Places API returned status: {status}")

    return data


def fetch_places(
    client: httpx.Client,
    api_key: str,
    query: str,
    location: Optional[GeocodeResult] = None,
    radius: Optional[float] = None,
    max_results: int = DEFAULT_MAX_RESULTS,
    page_delay: float = DELAY_BETWEEN_PAGES,
) -> List[PlaceSummary]:
    """
    Collect text search results across pages.

    Args:
        client: HTTP client used for the requests
        api_key: Google Maps API key
        query: What to search for
        location: Optional bias coordinates
        radius: Optional bias radius in meters
        max_results: Result cap
        page_delay: Pause before each continuation request (seconds)

    Returns:
        PlaceSummary list in upstream order, at most max_results long.
        Duplicate place ids across pages are kept.
    """
    collected: List[PlaceSummary] = []
    next_page_token: Optional[str] = None
    page = 0

    while True:
        if next_page_token:
            # Tokens are not valid immediately after they are issued
            time.sleep(page_delay)

        params = build_search_params(query, api_key, location, radius, next_page_token)
        data = execute_search(client, params)
        page += 1

        new_results = [PlaceSummary.from_api(r) for r in data.get("results") or []]
        collected = (collected + new_results)[:max_results]

        logger.debug(
            "Search page %d: %d results (%d collected, status=%s)",
            page, len(new_results), len(collected), data.get("status"),
        )

        next_page_token = data.get("next_page_token")
        if not next_page_token or len(collected) >= max_results:
            break

    logger.info("Search for %r returned %d places over %d page(s)", query, len(collected), page)
    return collected

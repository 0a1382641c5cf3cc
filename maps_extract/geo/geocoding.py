"""
Google Geocoding Integration

Resolves a free-text location into coordinates used to bias a text search.
"""

import logging
from typing import Optional

import httpx

from ..config import GEOCODE_URL
from ..exceptions import UpstreamError
from ..models import GeocodeResult

logger = logging.getLogger(__name__)


def geocode_location(
    client: httpx.Client,
    address: str,
    api_key: str,
) -> Optional[GeocodeResult]:
    """
    Look up the coordinates of a location.

    Args:
        client: HTTP client used for the request
        address: Free-text location (e.g., "Brooklyn, NY", "10001")
        api_key: Google Maps API key

    Returns:
        GeocodeResult of the first match, or None if nothing matched

    Raises:
        UpstreamError: If the geocoding endpoint returns a non-2xx response
    """
    params = {
        "address": address,
        "key": api_key,
    }

    response = client.get(GEOCODE_URL, params=params)

    if not response.is_success:
        raise UpstreamError("Failed to resolve location bias")

    data = response.json()
    results = data.get("results") or []

    # Anything other than a match means "no bias", not an error
    if data.get("status") != "OK" or not results:
        logger.info("No geocoding match for %r (status=%s)", address, data.get("status"))
        return None

    location = (results[0].get("geometry") or {}).get("location")
    if not location or location.get("lat") is None or location.get("lng") is None:
        return None

    result = GeocodeResult(lat=location["lat"], lng=location["lng"])
    logger.debug("Location bias %r resolved to %s", address, result.as_param())
    return result

"""
Business Enrichment

Fetches contact and status details for each search hit.
"""

import logging
from typing import List, Optional

import httpx

from ..config import PLACE_DETAILS_URL, DETAIL_FIELDS, DETAILS_OK_STATUSES
from ..exceptions import PlaceDetailsError
from ..models import PlaceDetail, PlaceSummary

logger = logging.getLogger(__name__)


def fetch_place_details(
    client: httpx.Client,
    api_key: str,
    place_id: str,
) -> Optional[PlaceDetail]:
    """
    Fetch detailed information about a place.

    Args:
        client: HTTP client used for the request
        api_key: Google Maps API key
        place_id: Google Maps place ID

    Returns:
        PlaceDetail, or None if the API has no details for this place

    Raises:
        PlaceDetailsError: On a non-2xx response or a non-success API status
    """
    params = {
        "place_id": place_id,
        "key": api_key,
        "fields": ",".join(DETAIL_FIELDS),
    }

    response = client.get(PLACE_DETAILS_URL, params=params)

    if not response.is_success:
        raise PlaceDetailsError("Failed to fetch place details")

    data = response.json()
    if not isinstance(data, dict):
        raise PlaceDetailsError("Malformed place details response")

    status = data.get("status")

    if status not in DETAILS_OK_STATUSES:
        if data.get("error_message"):
            raise PlaceDetailsError(data["error_message"])
        raise PlaceDetailsError(f"Place details lookup failed: {status}")

    result = data.get("result")
    if not result:
        return None
    if not isinstance(result, dict):
        raise PlaceDetailsError("Malformed place details result")

    return PlaceDetail.from_api(place_id, result)


def enrich_places(
    client: httpx.Client,
    api_key: str,
    places: List[PlaceSummary],
) -> List[PlaceDetail]:
    """
    Enrich search hits one at a time.

    A failed lookup only drops that place: the error is logged and the
    loop moves on to the next summary.

    Args:
        client: HTTP client used for the requests
        api_key: Google Maps API key
        places: Search hits in output order

    Returns:
        Enriched records, in the same order as their summaries
    """
    total = len(places)
    enriched: List[PlaceDetail] = []
    skipped = 0
    failed = 0

    for i, place in enumerate(places):
        try:
            details = fetch_place_details(client, api_key, place.place_id)
        except Exception as e:
            logger.warning("Failed to enrich place %s: %s", place.place_id, e)
            failed += 1
            continue

        if details is None:
            logger.debug("[%d/%d] No details for %s", i + 1, total, place.place_id)
            skipped += 1
            continue

        enriched.append(details)
        logger.debug("[%d/%d] Details fetched for %s", i + 1, total, place.place_id)

    logger.info(
        "Enriched %d/%d places (%d without details, %d failed)",
        len(enriched), total, skipped, failed,
    )
    return enriched

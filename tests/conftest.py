from typing import Any, Dict, List, Optional

import httpx
import pytest

from maps_extract import MapsExtractor


def search_hit(place_id: str, name: str = None, address: str = None) -> Dict[str, Any]:
    return {
        "place_id": place_id,
        "name": name or f"Place {place_id}",
        "formatted_address": address or f"{place_id} Main St, New York, NY",
        "rating": 4.1,
    }


def search_page(hits: List[Dict], token: Optional[str] = None, status: str = "OK") -> Dict[str, Any]:
    page = {"status": status, "results": hits}
    if token:
        page["next_page_token"] = token
    return page


def details_result(place_id: str, **overrides) -> Dict[str, Any]:
    result = {
        "name": f"Place {place_id}",
        "formatted_address": f"{place_id} Main St, New York, NY",
        "formatted_phone_number": "(212) 555-0100",
        "international_phone_number": "+1 212-555-0100",
        "website": f"https://{place_id}.example.com",
        "rating": 4.5,
        "user_ratings_total": 120,
        "types": ["restaurant", "food"],
        "geometry": {"location": {"lat": 40.7128, "lng": -74.006}},
        "opening_hours": {"open_now": True},
        "business_status": "OPERATIONAL",
    }
    result.update(overrides)
    return result


class FakeGoogleMaps:
    """In-memory stand-in for the Geocoding, Text Search and Place Details APIs.

    Search pages are served in order. Details are looked up by place_id and
    default to NOT_FOUND. A details entry may be an exception instance, which
    is raised as a transport failure.
    """

    def __init__(self):
        self.geocode: Any = {"status": "ZERO_RESULTS", "results": []}
        self.geocode_status_code = 200
        self.search_pages: List[Any] = []
        self.details: Dict[str, Any] = {}
        self.requests: List[httpx.Request] = []

    def add_details(self, place_id: str, **overrides):
        self.details[place_id] = {"status": "OK", "result": details_result(place_id, **overrides)}

    def requests_to(self, path_suffix: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith(path_suffix)]

    @property
    def search_requests(self) -> List[httpx.Request]:
        return self.requests_to("/textsearch/json")

    @property
    def details_requests(self) -> List[httpx.Request]:
        return self.requests_to("/details/json")

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path.endswith("/geocode/json"):
            return httpx.Response(self.geocode_status_code, json=self.geocode)

        if path.endswith("/textsearch/json"):
            page = self.search_pages.pop(0)
            if isinstance(page, httpx.Response):
                return page
            return httpx.Response(200, json=page)

        if path.endswith("/details/json"):
            entry = self.details.get(request.url.params["place_id"], {"status": "NOT_FOUND"})
            if isinstance(entry, Exception):
                raise entry
            if isinstance(entry, httpx.Response):
                return entry
            return httpx.Response(200, json=entry)

        return httpx.Response(404)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_maps():
    return FakeGoogleMaps()


@pytest.fixture
def client(fake_maps):
    with httpx.Client(transport=fake_maps.transport) as c:
        yield c


@pytest.fixture
def extractor(fake_maps):
    with MapsExtractor(api_key="test-key", transport=fake_maps.transport, page_delay=0) as ext:
        yield ext

from io import BytesIO

import pytest
from openpyxl import load_workbook

from conftest import search_hit, search_page
from maps_extract import (
    ConfigurationError,
    ExtractorConfig,
    MapsExtractor,
    UpstreamError,
    ValidationError,
)
from maps_extract.models import ExtractionRequest


def test_two_place_scenario(fake_maps, extractor):
    fake_maps.search_pages = [search_page([search_hit("a", "Alpha"), search_hit("b", "Beta")])]
    fake_maps.add_details("a", name="Alpha")
    fake_maps.add_details("b", name="Beta")

    result = extractor.extract("restaurants in New York", max_results=2)

    assert result.record_count == 2
    assert [r.place_id for r in result] == ["a", "b"]
    assert result.filename.startswith("maps-extract-") and result.filename.endswith(".xlsx")

    sheet = load_workbook(BytesIO(result.workbook)).active
    assert sheet.max_row == 3
    assert sheet["A1"].value == "Name"
    assert sheet["L1"].value == "Place ID"
    assert [sheet["A2"].value, sheet["A3"].value] == ["Alpha", "Beta"]
    assert fake_maps.requests_to("/geocode/json") == []


def test_record_count_never_exceeds_max_results(fake_maps, extractor):
    fake_maps.search_pages = [
        search_page([search_hit(str(i)) for i in range(20)], token="tok-1"),
        search_page([search_hit(str(i)) for i in range(20, 40)]),
    ]
    for i in range(40):
        fake_maps.add_details(str(i))

    result = extractor.extract("dentists", max_results=30)

    assert len(result) == 30
    assert len(fake_maps.details_requests) == 30


def test_records_trace_back_to_search_hits(fake_maps, extractor):
    fake_maps.search_pages = [search_page([search_hit("a"), search_hit("b"), search_hit("c")])]
    fake_maps.add_details("a")
    fake_maps.details["b"] = {"status": "UNKNOWN_ERROR"}
    fake_maps.add_details("c")

    result = extractor.extract("bakeries")

    assert [r.place_id for r in result] == ["a", "c"]
    assert result.to_dict()["place_ids"] == ["a", "c"]


def test_location_bias_is_geocoded_and_applied(fake_maps, extractor):
    fake_maps.geocode = {"status": "OK", "results": [{"geometry": {"location": {"lat": 41.88, "lng": -87.63}}}]}
    fake_maps.search_pages = [search_page([])]

    result = extractor.extract("plumbers", location_bias="  Chicago, IL ", radius=90000)

    assert len(result) == 0
    assert fake_maps.requests_to("/geocode/json")[0].url.params["address"] == "Chicago, IL"
    params = fake_maps.search_requests[0].url.params
    assert params["location"] == "41.88,-87.63"
    assert params["radius"] == "50000"


def test_unmatched_bias_searches_without_location(fake_maps, extractor):
    fake_maps.geocode = {"status": "ZERO_RESULTS", "results": []}
    fake_maps.search_pages = [search_page([])]

    extractor.extract("plumbers", location_bias="Atlantis", radius=1000)

    params = fake_maps.search_requests[0].url.params
    assert "location" not in params
    assert "radius" not in params


def test_search_failure_produces_no_result(fake_maps, extractor):
    fake_maps.search_pages = [{"status": "REQUEST_DENIED", "error_message": "Key denied", "results": []}]

    with pytest.raises(UpstreamError, match="Key denied"):
        extractor.extract("cafes")

    assert fake_maps.details_requests == []


def test_geocode_failure_is_fatal(fake_maps, extractor):
    fake_maps.geocode_status_code = 500

    with pytest.raises(UpstreamError, match="Failed to resolve location bias"):
        extractor.extract("cafes", location_bias="Paris")

    assert fake_maps.search_requests == []


def test_missing_api_key_fails_before_any_request(fake_maps):
    config = ExtractorConfig(api_key="", delay_between_pages=0)

    with MapsExtractor(config=config, transport=fake_maps.transport) as extractor:
        with pytest.raises(ConfigurationError, match="GOOGLE_MAPS_API_KEY"):
            extractor.extract("restaurants in New York")

    assert fake_maps.requests == []


@pytest.mark.parametrize("query", ["", "   ", None])
def test_empty_query_fails_before_any_request(fake_maps, extractor, query):
    with pytest.raises(ValidationError, match="Query is required."):
        extractor.extract(query)

    assert fake_maps.requests == []


@pytest.mark.parametrize(
    "given, expected",
    [(None, 40), (0, 1), (-5, 1), (1, 1), (75, 75), (120, 120), (500, 120)],
)
def test_max_results_is_clamped(given, expected):
    assert ExtractionRequest.create("cafes", max_results=given).max_results == expected


def test_request_normalization():
    request = ExtractionRequest.create("  cafes in Rome ", location_bias="   ", radius=300)

    assert request.query == "cafes in Rome"
    assert request.location_bias is None
    assert request.radius == 300

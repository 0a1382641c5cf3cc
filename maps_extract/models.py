"""
Data Models

Plain records passed between the pipeline stages. Everything here lives for
a single extraction request only.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .config import DEFAULT_MAX_RESULTS, MAX_RESULTS_CAP
from .exceptions import ValidationError


@dataclass
class GeocodeResult:
    """Coordinates of the first match of a location lookup."""
    lat: float
    lng: float

    def as_param(self) -> str:
        return f"{self.lat},{self.lng}"


@dataclass
class PlaceSummary:
    """One text search hit, before enrichment."""
    place_id: str
    name: str
    address: str

    @classmethod
    def from_api(cls, result: Dict[str, Any]) -> "PlaceSummary":
        return cls(
            place_id=result.get("place_id"),
            name=result.get("name"),
            address=result.get("formatted_address"),
        )


@dataclass
class PlaceDetail:
    """A place enriched with contact and status fields.

    Optional fields stay None when the details endpoint does not return them;
    the workbook renders them as empty cells.
    """
    place_id: str
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None  # local format
    international_phone: Optional[str] = None
    website: Optional[str] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None
    types: List[str] = field(default_factory=list)
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    open_now: Optional[bool] = None
    business_status: Optional[str] = None

    @classmethod
    def from_api(cls, place_id: str, result: Dict[str, Any]) -> "PlaceDetail":
        """
        Build a detail record from a place details `result` object.

        The identifier always comes from the search summary, so every record
        can be traced back to a search hit.

        Args:
            place_id: Identifier of the summary that was enriched
            result: The `result` object of the details response

        Returns:
            PlaceDetail
        """
        location = (result.get("geometry") or {}).get("location") or {}
        opening_hours = result.get("opening_hours") or {}

        return cls(
            place_id=place_id,
            name=result.get("name"),
            address=result.get("formatted_address"),
            phone=result.get("formatted_phone_number"),
            international_phone=result.get("international_phone_number"),
            website=result.get("website"),
            rating=result.get("rating"),
            review_count=result.get("user_ratings_total"),
            types=list(result.get("types") or []),
            latitude=location.get("lat"),
            longitude=location.get("lng"),
            open_now=opening_hours.get("open_now"),
            business_status=result.get("business_status"),
        )


def clamp_max_results(
    max_results: Optional[int],
    default: int = DEFAULT_MAX_RESULTS,
    cap: int = MAX_RESULTS_CAP,
) -> int:
    """Clamp max_results into [1, cap], using default when not given."""
    if max_results is None:
        max_results = default
    return min(max(int(max_results), 1), cap)


@dataclass
class ExtractionRequest:
    """Validated input of one extraction run."""
    query: str
    location_bias: Optional[str] = None
    radius: Optional[float] = None
    max_results: int = DEFAULT_MAX_RESULTS

    @classmethod
    def create(
        cls,
        query: Optional[str],
        location_bias: Optional[str] = None,
        radius: Optional[float] = None,
        max_results: Optional[int] = None,
        default_max_results: int = DEFAULT_MAX_RESULTS,
        max_results_cap: int = MAX_RESULTS_CAP,
    ) -> "ExtractionRequest":
        """
        Normalize raw caller input.

        Trims the query and location bias, and clamps max_results.

        Raises:
            ValidationError: If the query is missing or blank
        """
        query = (query or "").strip()
        if not query:
            raise ValidationError("Query is required.")

        location_bias = (location_bias or "").strip() or None

        return cls(
            query=query,
            location_bias=location_bias,
            radius=radius,
            max_results=clamp_max_results(max_results, default_max_results, max_results_cap),
        )

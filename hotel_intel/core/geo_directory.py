"""Place lookups against the Google Places directory."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from hotel_intel.core.errors import NotFound, ValidationError
from hotel_intel.core.models import Hotel, Location, PlaceDetails
from hotel_intel.etl.transform import to_hotel, to_place_details
from hotel_intel.vendors import google_places

logger = logging.getLogger(__name__)

LODGING_TYPE = "lodging"

# Amenity categories and the Places type each one is searched with.
CATEGORY_PLACE_TYPES = {
    "food": "restaurant",
    "cafe": "cafe",
    "attraction": "tourist_attraction",
}


class GeoDirectory:
    """Read-only wrapper around text search, nearby search and place details.

    Transport and API failures surface as `GooglePlacesError`
    (an `UpstreamUnavailable`) and are never swallowed here.
    """

    def __init__(self, api_key: str, timeout: float = 10.0) -> None:
        self._api_key = api_key
        self._timeout = timeout

    def resolve(self, name: str) -> Hotel:
        """Resolve a hotel name to the first matching lodging result."""
        payload = google_places.text_search(
            query=name, api_key=self._api_key, place_type=LODGING_TYPE, timeout=self._timeout
        )
        results = payload.get("results") or []
        if not results:
            raise NotFound("Hotel not found")
        hotel = to_hotel(results[0])
        logger.info("Resolved %r to place_id=%s at %s", name, hotel.external_id, hotel.location.as_param())
        return hotel

    def nearby_lodging(self, location: Location, radius_meters: int) -> List[Dict[str, Any]]:
        return self._nearby(location, radius_meters, LODGING_TYPE)

    def nearby_of_category(self, location: Location, radius_meters: int, category: str) -> List[Dict[str, Any]]:
        place_type = CATEGORY_PLACE_TYPES.get(category)
        if place_type is None:
            raise ValidationError(f"Unknown amenity category: {category}")
        return self._nearby(location, radius_meters, place_type)

    def details(self, external_id: str) -> PlaceDetails:
        result = google_places.place_details(place_id=external_id, api_key=self._api_key, timeout=self._timeout)
        if not result:
            raise NotFound(f"No details found for place_id={external_id}")
        return to_place_details(result)

    def _nearby(self, location: Location, radius_meters: int, place_type: str) -> List[Dict[str, Any]]:
        payload = google_places.nearby_search(
            location=location.as_param(),
            radius=radius_meters,
            place_type=place_type,
            api_key=self._api_key,
            timeout=self._timeout,
        )
        results = payload.get("results") or []
        logger.debug("Nearby %s search returned %d results", place_type, len(results))
        return results

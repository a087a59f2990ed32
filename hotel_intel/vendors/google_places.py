"""Client utilities for the Google Places API."""

import logging
from typing import Any, Dict, Iterable, Optional

import requests

from hotel_intel.core.errors import UpstreamUnavailable

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
_BASE_URL = "https://maps.googleapis.com/maps/api/place"
_DEFAULT_TIMEOUT = 10

DETAIL_FIELDS = ("name", "rating", "reviews", "formatted_address")


class GooglePlacesError(UpstreamUnavailable):
    """Raised when the Places API is unreachable or returns a non-successful response."""


def _get(endpoint: str, params: Dict[str, Any], ok_statuses: Iterable[str], timeout: float) -> Dict[str, Any]:
    try:
        response = _SESSION.get(f"{_BASE_URL}/{endpoint}/json", params=params, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as exc:
        logger.error("%s request failed: %s", endpoint, exc)
        raise GooglePlacesError(f"Places {endpoint} request failed: {exc}") from exc

    status = payload.get("status")
    if status not in set(ok_statuses):
        logger.error("%s failed: status=%s, error_message=%s", endpoint, status, payload.get("error_message"))
        raise GooglePlacesError(payload.get("error_message") or status or "unknown Places API error")
    return payload


def text_search(
    query: str,
    api_key: str,
    place_type: Optional[str] = None,
    timeout: float = _DEFAULT_TIMEOUT,
) -> Dict[str, Any]:
    params = {"query": query, "key": api_key}
    if place_type:
        params["type"] = place_type
    return _get("textsearch", params, {"OK", "ZERO_RESULTS"}, timeout)


def nearby_search(
    location: str,
    radius: int,
    place_type: str,
    api_key: str,
    timeout: float = _DEFAULT_TIMEOUT,
) -> Dict[str, Any]:
    """Run a Nearby Search around `location` (a `lat,lng` string) for one place type."""
    params = {"location": location, "radius": radius, "type": place_type, "key": api_key}
    return _get("nearbysearch", params, {"OK", "ZERO_RESULTS"}, timeout)


def place_details(place_id: str, api_key: str, timeout: float = _DEFAULT_TIMEOUT) -> Dict[str, Any]:
    params = {"place_id": place_id, "key": api_key, "fields": ",".join(DETAIL_FIELDS)}
    # NOT_FOUND is a lookup miss, not an outage; callers see it as an empty result.
    payload = _get("details", params, {"OK", "ZERO_RESULTS", "NOT_FOUND"}, timeout)
    return payload.get("result") or {}

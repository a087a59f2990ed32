"""Utilities for transforming Google Places responses into pipeline models."""

import logging
from typing import Any, Dict, Iterable, List, Optional

from hotel_intel.core.errors import UpstreamUnavailable
from hotel_intel.core.models import (
    MAX_REVIEWS,
    UNRATED,
    Amenity,
    Competitor,
    Hotel,
    Location,
    PlaceDetails,
    Review,
)

logger = logging.getLogger(__name__)


def _safe_float(value: Any) -> Optional[float]:
    try:
        if value is None:
            return None
        return float(value)
    except (TypeError, ValueError):
        return None


def _safe_int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def parse_location(result: Dict[str, Any]) -> Location:
    geometry = (result.get("geometry") or {}).get("location") or {}
    latitude = _safe_float(geometry.get("lat"))
    longitude = _safe_float(geometry.get("lng"))
    if latitude is None or longitude is None:
        raise UpstreamUnavailable(f"Place {result.get('place_id') or result.get('name')!r} has no coordinates")
    return Location(latitude=latitude, longitude=longitude)


def to_hotel(result: Dict[str, Any]) -> Hotel:
    return Hotel(
        name=result.get("name", ""),
        external_id=result.get("place_id", ""),
        location=parse_location(result),
    )


def to_competitor(result: Dict[str, Any]) -> Competitor:
    rating = _safe_float(result.get("rating"))
    # A zero rating is treated like a missing one.
    return Competitor(
        name=result.get("name", ""),
        external_id=result.get("place_id", ""),
        rating=rating if rating else UNRATED,
        rating_count=_safe_int(result.get("user_ratings_total")),
    )


def to_amenity(result: Dict[str, Any]) -> Amenity:
    return Amenity(
        name=result.get("name", ""),
        rating=_safe_float(result.get("rating")),
        rating_count=_safe_int(result.get("user_ratings_total")),
        address=result.get("vicinity") or result.get("formatted_address") or "",
    )


def to_reviews(raw_reviews: Optional[Iterable[Dict[str, Any]]], limit: int = MAX_REVIEWS) -> List[Review]:
    reviews: List[Review] = []
    for raw in raw_reviews or []:
        if len(reviews) >= limit:
            break
        reviews.append(
            Review(
                text=raw.get("text") or "",
                rating=_safe_float(raw.get("rating")),
                author=raw.get("author_name"),
            )
        )
    return reviews


def to_place_details(result: Dict[str, Any]) -> PlaceDetails:
    return PlaceDetails(
        address=result.get("formatted_address"),
        rating=_safe_float(result.get("rating")),
        reviews=to_reviews(result.get("reviews")),
    )

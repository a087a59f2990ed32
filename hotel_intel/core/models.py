"""Data models shared by the hotel analysis pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

UNRATED = "N/A"

MAX_COMPETITORS = 5
MAX_REVIEWS = 3
MAX_OPPORTUNITIES = 5
MAX_AMENITIES_PER_CATEGORY = 5


@dataclass(frozen=True, slots=True)
class Location:
    latitude: float
    longitude: float

    def to_dict(self) -> Dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}

    def as_param(self) -> str:
        """Render as the `lat,lng` string the Places API expects."""
        return f"{self.latitude},{self.longitude}"


@dataclass(frozen=True, slots=True)
class Hotel:
    name: str
    external_id: str
    location: Location

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "placeId": self.external_id, "location": self.location.to_dict()}


@dataclass(slots=True)
class Review:
    text: str
    rating: Optional[float] = None
    author: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "rating": self.rating, "author_name": self.author}


@dataclass(frozen=True, slots=True)
class PlaceDetails:
    """Subset of a Place Details response used for competitor enrichment."""

    address: Optional[str]
    rating: Optional[float]
    reviews: List[Review] = field(default_factory=list)


@dataclass(slots=True)
class Competitor:
    """Nearby lodging compared against the subject hotel.

    Built as a skeleton by the competitor finder, then enriched in place:
    details (address, latest reviews), review summary, opportunities.
    """

    name: str
    external_id: str
    rating: Union[float, str] = UNRATED
    rating_count: int = 0
    address: Optional[str] = None
    latest_reviews: List[Review] = field(default_factory=list)
    review_summary: Optional[str] = None
    opportunities: Optional[List[str]] = None

    @property
    def is_enriched(self) -> bool:
        return self.review_summary is not None and self.opportunities is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "placeId": self.external_id,
            "rating": self.rating,
            "userRatingsTotal": self.rating_count,
            "address": self.address,
            "latestReviews": [review.to_dict() for review in self.latest_reviews],
            "reviewSummary": self.review_summary,
            "opportunities": list(self.opportunities or []),
        }


@dataclass(frozen=True, slots=True)
class Amenity:
    name: str
    rating: Optional[float] = None
    rating_count: int = 0
    address: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "rating": self.rating,
            "userRatingsTotal": self.rating_count,
            "address": self.address,
        }


AmenityBucket = Dict[str, List[Amenity]]


@dataclass(frozen=True, slots=True)
class AmenityHighlight:
    category: str
    top_amenity: Amenity
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "topAmenity": {
                "name": self.top_amenity.name,
                "rating": self.top_amenity.rating,
                "address": self.top_amenity.address,
            },
            "count": self.count,
        }


@dataclass(slots=True)
class AmenityAnalysis:
    highlights: List[AmenityHighlight] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "highlights": [highlight.to_dict() for highlight in self.highlights],
            "recommendations": list(self.recommendations),
        }


@dataclass(slots=True)
class Report:
    """Full output of one pipeline run; extended reports also carry amenities."""

    hotel: Hotel
    competitors: List[Competitor]
    amenities: Optional[AmenityBucket] = None
    amenity_analysis: Optional[AmenityAnalysis] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "hotel": self.hotel.to_dict(),
            "competitors": [competitor.to_dict() for competitor in self.competitors],
        }
        if self.amenities is not None:
            payload["nearbyAmenities"] = {
                category: [amenity.to_dict() for amenity in amenities]
                for category, amenities in self.amenities.items()
            }
            analysis = self.amenity_analysis or AmenityAnalysis()
            payload["amenitiesAnalysis"] = analysis.to_dict()
        return payload

"""Neighborhood amenity scanning and analysis."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from hotel_intel.core.geo_directory import CATEGORY_PLACE_TYPES, GeoDirectory
from hotel_intel.core.models import (
    MAX_AMENITIES_PER_CATEGORY,
    Amenity,
    AmenityAnalysis,
    AmenityBucket,
    AmenityHighlight,
    Location,
)
from hotel_intel.etl.transform import to_amenity

logger = logging.getLogger(__name__)

AMENITY_CATEGORIES = tuple(CATEGORY_PLACE_TYPES)
AMENITY_RADIUS_METERS = 500

HIGHLIGHT_MIN_RATING = 4.0
LIMITED_CATEGORY_COUNT = 3

CATEGORY_LABELS = {
    "food": "dining",
    "cafe": "cafe",
    "attraction": "attraction",
}


class AmenityScanner:
    """Fetch up to five amenities per category around a location.

    Categories are independent lookups; with `max_workers > 1` they run
    concurrently. Any category failure fails the whole scan.
    """

    def __init__(
        self,
        directory: GeoDirectory,
        categories: Sequence[str] = AMENITY_CATEGORIES,
        radius_meters: int = AMENITY_RADIUS_METERS,
        max_workers: int = 1,
    ) -> None:
        self._directory = directory
        self._categories = tuple(categories)
        self._radius_meters = radius_meters
        self._max_workers = max(1, max_workers)

    def scan(self, location: Location) -> AmenityBucket:
        if self._max_workers == 1:
            results = [self._scan_category(location, category) for category in self._categories]
        else:
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                results = list(executor.map(lambda category: self._scan_category(location, category), self._categories))
        return dict(zip(self._categories, results))

    def _scan_category(self, location: Location, category: str) -> List[Amenity]:
        raw = self._directory.nearby_of_category(location, self._radius_meters, category)
        amenities = [to_amenity(result) for result in raw[:MAX_AMENITIES_PER_CATEGORY]]
        logger.info("Found %d %s amenities within %dm", len(amenities), category, self._radius_meters)
        return amenities


def rank_by_rating(amenities: Sequence[Amenity]) -> List[Amenity]:
    """Sort by rating descending, unrated last; ties keep their original order."""
    return sorted(amenities, key=lambda amenity: (amenity.rating is None, -(amenity.rating or 0.0)))


def _format_rating(rating: Optional[float]) -> str:
    return "unrated" if rating is None else f"{rating:g}"


class AmenityAnalyzer:
    """Derive per-category highlights and recommendation text from a scan.

    Both recommendation rules are checked for every category and each one
    that matches contributes its own sentence.
    """

    def __init__(
        self,
        highlight_min_rating: float = HIGHLIGHT_MIN_RATING,
        limited_count: int = LIMITED_CATEGORY_COUNT,
    ) -> None:
        self.highlight_min_rating = highlight_min_rating
        self.limited_count = limited_count

    def analyze(self, bucket: AmenityBucket) -> AmenityAnalysis:
        analysis = AmenityAnalysis()
        for category, amenities in bucket.items():
            if not amenities:
                continue
            top = rank_by_rating(amenities)[0]
            count = len(amenities)
            analysis.highlights.append(AmenityHighlight(category=category, top_amenity=top, count=count))
            analysis.recommendations.extend(self._recommend(category, top, count))
        return analysis

    def _recommend(self, category: str, top: Amenity, count: int) -> List[str]:
        label = CATEGORY_LABELS.get(category, category)
        recommendations = []
        well_stocked = count >= self.limited_count
        if well_stocked and top.rating is not None and top.rating >= self.highlight_min_rating:
            recommendations.append(
                f"Highlight nearby {label} options, led by {top.name} (rated {_format_rating(top.rating)})."
            )
        if count < self.limited_count:
            recommendations.append(
                f"Limited {label} options nearby ({count}); consider enhancing {label} offerings "
                "or promoting in-hotel equivalents."
            )
        return recommendations

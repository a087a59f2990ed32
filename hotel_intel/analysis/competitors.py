"""Nearby lodging discovery."""

import logging
from typing import List

from hotel_intel.core.geo_directory import GeoDirectory
from hotel_intel.core.models import MAX_COMPETITORS, Competitor, Location
from hotel_intel.etl.transform import to_competitor

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_METERS = 2000


class CompetitorFinder:
    def __init__(self, directory: GeoDirectory, radius_meters: int = DEFAULT_RADIUS_METERS) -> None:
        self._directory = directory
        self._radius_meters = radius_meters

    def find_competitors(self, location: Location) -> List[Competitor]:
        """Return up to five competitor skeletons in provider relevance order."""
        candidates = self._directory.nearby_lodging(location, self._radius_meters)
        competitors = [to_competitor(raw) for raw in candidates[:MAX_COMPETITORS]]
        logger.info("Selected %d of %d nearby lodging candidates", len(competitors), len(candidates))
        return competitors

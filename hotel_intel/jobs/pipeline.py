"""Competitive-intelligence pipeline: hotel name in, comparison report out."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from hotel_intel.analysis.amenities import AmenityAnalyzer, AmenityScanner
from hotel_intel.analysis.competitors import CompetitorFinder
from hotel_intel.analysis.opportunities import OpportunityGenerator
from hotel_intel.analysis.reviews import summarize
from hotel_intel.core.config import Settings, get_settings
from hotel_intel.core.errors import ValidationError
from hotel_intel.core.geo_directory import GeoDirectory
from hotel_intel.core.models import Competitor, Hotel, Report

logger = logging.getLogger(__name__)


class PipelineOrchestrator:
    """Compose lookups and analysis steps into basic or extended reports.

    Any stage failure propagates and aborts the request; competitors are
    never returned partially enriched. Each competitor is enriched on a
    single worker in the order details, summary, opportunities.
    """

    def __init__(
        self,
        directory: GeoDirectory,
        generator: OpportunityGenerator,
        competitor_finder: Optional[CompetitorFinder] = None,
        amenity_scanner: Optional[AmenityScanner] = None,
        amenity_analyzer: Optional[AmenityAnalyzer] = None,
        enrichment_workers: int = 1,
    ) -> None:
        self.directory = directory
        self.generator = generator
        self.competitor_finder = competitor_finder or CompetitorFinder(directory)
        self.amenity_scanner = amenity_scanner or AmenityScanner(directory)
        self.amenity_analyzer = amenity_analyzer or AmenityAnalyzer()
        self.enrichment_workers = max(1, enrichment_workers)

    def basic_report(self, hotel_name: str) -> Report:
        started = time.monotonic()
        hotel = self._resolve(hotel_name)
        competitors = self.competitor_finder.find_competitors(hotel.location)
        self._enrich_all(competitors)
        logger.info("Basic report for %r ready in %.2fs", hotel.name, time.monotonic() - started)
        return Report(hotel=hotel, competitors=competitors)

    def extended_report(self, hotel_name: str) -> Report:
        started = time.monotonic()
        hotel = self._resolve(hotel_name)
        with ThreadPoolExecutor(max_workers=2) as executor:
            competitors_future = executor.submit(self.competitor_finder.find_competitors, hotel.location)
            amenities_future = executor.submit(self.amenity_scanner.scan, hotel.location)
            competitors = competitors_future.result()
            amenities = amenities_future.result()
        analysis = self.amenity_analyzer.analyze(amenities)
        self._enrich_all(competitors)
        logger.info("Extended report for %r ready in %.2fs", hotel.name, time.monotonic() - started)
        return Report(hotel=hotel, competitors=competitors, amenities=amenities, amenity_analysis=analysis)

    def enrich_competitor(self, competitor: Competitor) -> Competitor:
        details = self.directory.details(competitor.external_id)
        competitor.address = details.address
        competitor.latest_reviews = list(details.reviews)

        competitor.review_summary = summarize(competitor.latest_reviews)
        competitor.opportunities = self.generator.generate(competitor.review_summary)
        logger.info(
            "Enriched %s: %d reviews, %d opportunities",
            competitor.name,
            len(competitor.latest_reviews),
            len(competitor.opportunities),
        )
        return competitor

    def _resolve(self, hotel_name: str) -> Hotel:
        name = (hotel_name or "").strip()
        if not name:
            raise ValidationError("Please provide a hotel name.")
        logger.info("Analyzing hotel %r", name)
        return self.directory.resolve(name)

    def _enrich_all(self, competitors: List[Competitor]) -> None:
        if self.enrichment_workers == 1 or len(competitors) <= 1:
            for competitor in competitors:
                self.enrich_competitor(competitor)
            return
        with ThreadPoolExecutor(max_workers=self.enrichment_workers) as executor:
            # map() re-raises the first failure in competitor order.
            list(executor.map(self.enrich_competitor, competitors))


def build_orchestrator(settings: Optional[Settings] = None) -> PipelineOrchestrator:
    """Wire a per-request orchestrator from application settings."""
    settings = settings or get_settings()
    directory = GeoDirectory(api_key=settings.places_api_key, timeout=settings.request_timeout)
    generator = OpportunityGenerator(api_key=settings.openai_api_key, model=settings.openai_model)
    return PipelineOrchestrator(
        directory=directory,
        generator=generator,
        competitor_finder=CompetitorFinder(directory, radius_meters=settings.competitor_radius_meters),
        amenity_scanner=AmenityScanner(directory, max_workers=3),
        enrichment_workers=settings.enrichment_workers,
    )

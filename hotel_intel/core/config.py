"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    places_api_key: str
    openai_api_key: str
    authorized_api_key: str
    openai_model: str = "gpt-4o-mini"
    port: int = 3000
    request_timeout: float = 10.0
    competitor_radius_meters: int = 2000
    enrichment_workers: int = 1


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    places_api_key = os.getenv("PLACES_API_KEY", "")
    openai_api_key = os.getenv("OPENAI_API_KEY", "")
    authorized_api_key = os.getenv("AUTHORIZED_API_KEY", "")
    openai_model = os.getenv("OPENAI_MODEL", "").strip() or "gpt-4o-mini"
    port = int(os.getenv("PORT", "3000"))
    request_timeout = float(os.getenv("PLACES_REQUEST_TIMEOUT", "10"))
    competitor_radius_meters = int(os.getenv("COMPETITOR_RADIUS_METERS", "2000"))
    enrichment_workers = max(1, int(os.getenv("ENRICHMENT_WORKERS", "1")))

    if not places_api_key:
        logger.warning("PLACES_API_KEY is not configured; Google Places requests will fail.")
    if not openai_api_key:
        logger.warning("OPENAI_API_KEY is not configured; opportunity generation will fail.")
    if not authorized_api_key:
        logger.warning("AUTHORIZED_API_KEY is not configured; all analysis requests will be rejected.")

    return Settings(
        places_api_key=places_api_key,
        openai_api_key=openai_api_key,
        authorized_api_key=authorized_api_key,
        openai_model=openai_model,
        port=port,
        request_timeout=request_timeout,
        competitor_radius_meters=competitor_radius_meters,
        enrichment_workers=enrichment_workers,
    )

import sys
from pathlib import Path

import pytest

# Ensure the `hotel_intel` package is importable when running pytest from the repo root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def place():
    """Factory for raw Places search results."""

    def _place(place_id, name=None, rating=None, total=None, lat=10.0, lng=20.0, vicinity=None):
        raw = {
            "place_id": place_id,
            "name": name or f"Place {place_id}",
            "geometry": {"location": {"lat": lat, "lng": lng}},
        }
        if rating is not None:
            raw["rating"] = rating
        if total is not None:
            raw["user_ratings_total"] = total
        if vicinity is not None:
            raw["vicinity"] = vicinity
        return raw

    return _place

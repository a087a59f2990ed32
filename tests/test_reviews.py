from hotel_intel.analysis import reviews
from hotel_intel.core.models import Review


def test_summarize_joins_texts_in_order():
    texts = [Review("Great pool."), Review("Slow check-in."), Review("Would return.")]
    assert reviews.summarize(texts) == "Great pool. Slow check-in. Would return."


def test_summarize_empty():
    assert reviews.summarize([]) == ""


def test_extract_themes_deduplicates_and_ignores_case():
    found = reviews.extract_themes(
        [
            Review("Very COMFORTABLE beds"),
            Review("Spacious rooms but noisy street"),
            Review("Noise from the bar"),
        ]
    )
    assert found == [
        "Guests frequently mention comfort and spaciousness.",
        "Some guests have reported issues with noise.",
    ]


def test_extract_themes_no_matches():
    assert reviews.extract_themes([Review("Fine stay.")]) == []


def test_keyword_opportunities():
    found = reviews.keyword_opportunities(
        [Review("Cleanliness was lacking"), Review("Room service was slow"), Review("service ok")]
    )
    assert found == [
        "Improve cleanliness standards based on guest feedback.",
        "Enhance customer service quality.",
    ]

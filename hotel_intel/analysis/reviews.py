"""Review text condensation and keyword theme detection."""

from typing import Iterable, List, Sequence, Tuple

from hotel_intel.core.models import Review

# (keywords, sentence) pairs; a sentence is emitted when any keyword appears.
THEME_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("comfortable", "spacious"), "Guests frequently mention comfort and spaciousness."),
    (("noisy", "noise"), "Some guests have reported issues with noise."),
)

IMPROVEMENT_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("cleanliness",), "Improve cleanliness standards based on guest feedback."),
    (("service",), "Enhance customer service quality."),
)


def summarize(reviews: Sequence[Review]) -> str:
    """Join review bodies with single spaces, in their original order.

    The result is the evidence text handed to opportunity generation, not a
    condensed rewrite.
    """
    return " ".join(review.text for review in reviews)


def _match_rules(reviews: Iterable[Review], rules) -> List[str]:
    matched: List[str] = []
    for review in reviews:
        text = (review.text or "").lower()
        for keywords, sentence in rules:
            if sentence not in matched and any(keyword in text for keyword in keywords):
                matched.append(sentence)
    return matched


def extract_themes(reviews: Sequence[Review]) -> List[str]:
    return _match_rules(reviews, THEME_RULES)


def keyword_opportunities(reviews: Sequence[Review]) -> List[str]:
    return _match_rules(reviews, IMPROVEMENT_RULES)

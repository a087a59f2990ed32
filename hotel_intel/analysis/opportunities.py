"""LLM-backed improvement suggestions derived from competitor reviews."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from openai import OpenAI, OpenAIError

from hotel_intel.core.errors import UpstreamUnavailable
from hotel_intel.core.models import MAX_OPPORTUNITIES

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"
MAX_TOKENS = 250
TEMPERATURE = 0.7

PROMPT_TEMPLATE = (
    "Given the following reviews, create a concise list of up to five actionable opportunities "
    "of 10-20 words each to improve the hotel, based on its own guest feedback and the performance "
    'of nearby competitors:\n\n"{summary}"\n\nOpportunities:'
)


def build_prompt(summary_text: str) -> str:
    return PROMPT_TEMPLATE.format(summary=summary_text)


def split_opportunities(content: str, limit: int = MAX_OPPORTUNITIES) -> List[str]:
    """Split completion text into trimmed lines, skipping blank ones, capped at `limit`."""
    lines = [line.strip() for line in content.splitlines()]
    return [line for line in lines if line][:limit]


class OpportunityGenerator:
    """Turn a review summary into up to five suggestions via OpenAI chat completions."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        client: Optional[Any] = None,
        max_tokens: int = MAX_TOKENS,
        temperature: float = TEMPERATURE,
    ) -> None:
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._client = client or OpenAI(api_key=api_key or None)

    def generate(self, summary_text: str) -> List[str]:
        prompt = build_prompt(summary_text)
        try:
            completion = self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except OpenAIError as exc:
            logger.error("Opportunity generation failed: %s", exc)
            raise UpstreamUnavailable(f"Opportunity generation failed: {exc}") from exc

        choices = getattr(completion, "choices", None) or []
        content = choices[0].message.content if choices else None
        if not content or not content.strip():
            raise UpstreamUnavailable("Opportunity generation returned no content")

        opportunities = split_opportunities(content)
        logger.debug("Generated %d opportunities from %d characters of reviews", len(opportunities), len(summary_text))
        return opportunities

"""Gemini token accounting for analyzed signals.

One structured log line per analysis call carries the signal timestamp,
model, token counts and estimated USD cost, so spend can be summed from
the JSON logs without a separate metrics backend.
"""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Gemini 3 Flash list prices, USD per token
INPUT_PRICE_PER_TOKEN = 0.50 / 1_000_000
OUTPUT_PRICE_PER_TOKEN = 3.00 / 1_000_000


@dataclass
class TokenUsage:
    """Token counts and estimated cost of one generate_content call."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    cost_usd: float


def extract_usage(response: object) -> TokenUsage:
    """Read token counts off a GenerateContentResponse; missing or null counts are 0."""
    metadata = getattr(response, "usage_metadata", None)
    prompt = getattr(metadata, "prompt_token_count", None) or 0
    completion = getattr(metadata, "candidates_token_count", None) or 0
    return TokenUsage(
        prompt_tokens=prompt,
        completion_tokens=completion,
        total_tokens=prompt + completion,
        cost_usd=prompt * INPUT_PRICE_PER_TOKEN + completion * OUTPUT_PRICE_PER_TOKEN,
    )


def log_usage(signal_id: str, usage: TokenUsage, model: str) -> None:
    """Emit the per-signal usage record at INFO with the counts as extra fields."""
    logger.info(
        "Gemini analysis complete",
        extra={
            "signal_id": signal_id,
            "model": model,
            "prompt_tokens": usage.prompt_tokens,
            "completion_tokens": usage.completion_tokens,
            "total_tokens": usage.total_tokens,
            "cost_usd": round(usage.cost_usd, 6),
        },
    )

"""Tests for per-signal Gemini token accounting."""

from types import SimpleNamespace
from unittest.mock import patch

import pytest

from cultural_signals.cost import TokenUsage, extract_usage, log_usage

SIGNAL_TS = "1700000000.000100"


def _response(prompt: int | None, candidates: int | None) -> SimpleNamespace:
    return SimpleNamespace(
        usage_metadata=SimpleNamespace(
            prompt_token_count=prompt, candidates_token_count=candidates
        )
    )


@pytest.mark.parametrize(
    ("prompt", "candidates", "expected_cost"),
    [
        (4_000, 500, 0.0035),  # typical signal with one fetched page
        (1_000_000, 0, 0.50),
        (0, 1_000_000, 3.00),
    ],
)
def test_cost_from_token_counts(prompt: int, candidates: int, expected_cost: float):
    usage = extract_usage(_response(prompt, candidates))

    assert usage.total_tokens == prompt + candidates
    assert usage.cost_usd == pytest.approx(expected_cost)


def test_null_counts_treated_as_zero():
    usage = extract_usage(_response(None, 120))

    assert usage.prompt_tokens == 0
    assert usage.completion_tokens == 120
    assert usage.total_tokens == 120


def test_response_without_usage_metadata():
    usage = extract_usage(SimpleNamespace())

    assert usage == TokenUsage(prompt_tokens=0, completion_tokens=0, total_tokens=0, cost_usd=0.0)


def test_log_usage_tags_signal_and_model():
    usage = TokenUsage(prompt_tokens=4_000, completion_tokens=500, total_tokens=4_500, cost_usd=0.00350004)

    with patch("cultural_signals.cost.logger") as mock_logger:
        log_usage(SIGNAL_TS, usage, "gemini-3-flash-preview")

    mock_logger.info.assert_called_once()
    message = mock_logger.info.call_args.args[0]
    extra = mock_logger.info.call_args.kwargs["extra"]
    assert message == "Gemini analysis complete"
    assert extra == {
        "signal_id": SIGNAL_TS,
        "model": "gemini-3-flash-preview",
        "prompt_tokens": 4_000,
        "completion_tokens": 500,
        "total_tokens": 4_500,
        "cost_usd": 0.0035,
    }

"""Tests for Slack reactions and thread replies.

Reaction helpers and notify_error are fire-and-forget: they catch and log,
never letting a status update failure propagate. post_signal_reply raises.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from slack_sdk.errors import SlackApiError

from cultural_signals.models.analysis import AnalysisRecord
from cultural_signals.slack.notifier import (
    add_reaction,
    notify_error,
    post_signal_reply,
    remove_reaction,
)

CHANNEL = "C0SIGNALS1"
TS = "1234567890.123456"


def _make_slack_api_error(error_code: str) -> SlackApiError:
    """Build a SlackApiError with a mock response carrying the given error code."""
    resp = MagicMock()
    resp.get = MagicMock(
        side_effect=lambda key, default="": error_code if key == "error" else default,
    )
    resp.__getitem__ = MagicMock(
        side_effect=lambda key: error_code if key == "error" else None,
    )
    return SlackApiError(message=f"slack error: {error_code}", response=resp)


@pytest.fixture()
def mock_client() -> AsyncMock:
    return AsyncMock()


# -- reactions --


async def test_add_reaction_calls_api(mock_client: AsyncMock):
    await add_reaction(mock_client, CHANNEL, TS, "eyes")

    mock_client.reactions_add.assert_awaited_once_with(channel=CHANNEL, name="eyes", timestamp=TS)


async def test_remove_reaction_calls_api(mock_client: AsyncMock):
    await remove_reaction(mock_client, CHANNEL, TS, "eyes")

    mock_client.reactions_remove.assert_awaited_once_with(
        channel=CHANNEL, name="eyes", timestamp=TS
    )


async def test_already_reacted_logged_as_warning(mock_client: AsyncMock):
    mock_client.reactions_add.side_effect = _make_slack_api_error("already_reacted")

    with patch("cultural_signals.slack.notifier.logger") as mock_logger:
        await add_reaction(mock_client, CHANNEL, TS, "eyes")

    mock_logger.warning.assert_called_once()
    mock_logger.error.assert_not_called()


async def test_no_reaction_on_remove_logged_as_warning(mock_client: AsyncMock):
    mock_client.reactions_remove.side_effect = _make_slack_api_error("no_reaction")

    with patch("cultural_signals.slack.notifier.logger") as mock_logger:
        await remove_reaction(mock_client, CHANNEL, TS, "eyes")

    mock_logger.warning.assert_called_once()
    mock_logger.error.assert_not_called()


async def test_unexpected_reaction_error_logged_as_error(mock_client: AsyncMock):
    mock_client.reactions_add.side_effect = _make_slack_api_error("ratelimited")

    with patch("cultural_signals.slack.notifier.logger") as mock_logger:
        await add_reaction(mock_client, CHANNEL, TS, "warning")

    mock_logger.error.assert_called_once()


async def test_reaction_network_error_swallowed(mock_client: AsyncMock):
    mock_client.reactions_add.side_effect = ConnectionError("reset")

    await add_reaction(mock_client, CHANNEL, TS, "white_check_mark")


# -- replies --


async def test_post_signal_reply_threads_blocks(mock_client: AsyncMock):
    analysis = AnalysisRecord(tldr="X replacing Y")

    await post_signal_reply(mock_client, CHANNEL, TS, analysis)

    kwargs = mock_client.chat_postMessage.call_args.kwargs
    assert kwargs["channel"] == CHANNEL
    assert kwargs["thread_ts"] == TS
    assert kwargs["text"] == "X replacing Y"
    assert kwargs["blocks"][0]["text"]["text"] == "Signal Captured"


async def test_post_signal_reply_propagates_errors(mock_client: AsyncMock):
    mock_client.chat_postMessage.side_effect = _make_slack_api_error("channel_not_found")

    with pytest.raises(SlackApiError):
        await post_signal_reply(mock_client, CHANNEL, TS, AnalysisRecord())


async def test_notify_error_posts_detail(mock_client: AsyncMock):
    await notify_error(mock_client, CHANNEL, TS, "Notion unavailable")

    kwargs = mock_client.chat_postMessage.call_args.kwargs
    assert kwargs["thread_ts"] == TS
    assert kwargs["text"] == "Failed to process this signal: Notion unavailable"


async def test_notify_error_swallows_failures(mock_client: AsyncMock):
    mock_client.chat_postMessage.side_effect = _make_slack_api_error("not_in_channel")

    await notify_error(mock_client, CHANNEL, TS, "boom")

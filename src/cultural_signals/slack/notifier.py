"""Slack reactions and thread replies for pipeline outcomes.

Reaction and error-reply helpers are fire-and-forget: they catch and log
errors but never raise, so a failed status update cannot mask the outcome
being reported. ``post_signal_reply`` is the exception -- the analysis
reply is part of the pipeline and its failure propagates.
"""

import logging

from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient

from cultural_signals.models.analysis import AnalysisRecord
from cultural_signals.slack.blocks import format_analysis_blocks

logger = logging.getLogger(__name__)

PROCESSING_EMOJI = "eyes"
SUCCESS_EMOJI = "white_check_mark"
WARNING_EMOJI = "warning"

# Non-error conditions: reaction already present/absent, missing scope, message gone
_BENIGN_REACTION_ERRORS = ("missing_scope", "already_reacted", "no_reaction", "no_item_specified")


def _log_reaction_failure(action: str, emoji: str, timestamp: str, exc: Exception) -> None:
    error_code = ""
    if isinstance(exc, SlackApiError) and exc.response is not None:
        error_code = exc.response.get("error", "")
    if error_code in _BENIGN_REACTION_ERRORS:
        logger.warning("Could not %s reaction '%s' (%s): %s", action, emoji, error_code, timestamp)
    else:
        logger.error(
            "Failed to %s reaction '%s' on %s: %s",
            action,
            emoji,
            timestamp,
            error_code or exc,
            exc_info=True,
        )


async def add_reaction(client: AsyncWebClient, channel_id: str, timestamp: str, emoji: str) -> None:
    """Add an emoji reaction to the original message (best-effort).

    Args:
        client: Slack Web API client.
        channel_id: Slack channel ID.
        timestamp: Original message timestamp.
        emoji: Emoji name without colons (e.g., "white_check_mark").
    """
    try:
        await client.reactions_add(channel=channel_id, name=emoji, timestamp=timestamp)
    except Exception as exc:
        _log_reaction_failure("add", emoji, timestamp, exc)


async def remove_reaction(
    client: AsyncWebClient, channel_id: str, timestamp: str, emoji: str
) -> None:
    """Remove an emoji reaction from the original message (best-effort)."""
    try:
        await client.reactions_remove(channel=channel_id, name=emoji, timestamp=timestamp)
    except Exception as exc:
        _log_reaction_failure("remove", emoji, timestamp, exc)


async def post_signal_reply(
    client: AsyncWebClient, channel_id: str, timestamp: str, analysis: AnalysisRecord
) -> None:
    """Post the formatted analysis as a thread reply. Raises on failure.

    The plain-text fallback (notifications, screen readers) is the TLDR.
    """
    await client.chat_postMessage(
        channel=channel_id,
        thread_ts=timestamp,
        blocks=format_analysis_blocks(analysis),
        text=analysis.tldr,
    )


async def notify_error(client: AsyncWebClient, channel_id: str, timestamp: str, detail: str) -> None:
    """Post a thread reply describing why the signal failed (best-effort).

    Args:
        client: Slack Web API client.
        channel_id: Slack channel ID.
        timestamp: Original message timestamp (thread parent).
        detail: Human-readable error description.
    """
    try:
        await client.chat_postMessage(
            channel=channel_id,
            thread_ts=timestamp,
            text=f"Failed to process this signal: {detail}",
        )
    except Exception:
        logger.warning("Failed to send error notification for %s", timestamp, exc_info=True)

"""Slack message filtering and the per-signal processing pipeline."""

import logging

from slack_sdk.web.async_client import AsyncWebClient

from cultural_signals.context import SignalContext
from cultural_signals.extraction import gather_signal, select_attachment
from cultural_signals.llm import analyze_signal
from cultural_signals.notion import store_signal
from cultural_signals.slack.notifier import (
    PROCESSING_EMOJI,
    SUCCESS_EMOJI,
    WARNING_EMOJI,
    add_reaction,
    notify_error,
    post_signal_reply,
    remove_reaction,
)

logger = logging.getLogger(__name__)

# None = plain message. Every other subtype (joins, deletes, topic changes) is noise.
_PROCESSED_SUBTYPES = frozenset({None, "file_share", "message_changed"})


def unwrap_event(event: dict) -> dict | None:
    """Return the message a pipeline run should act on.

    Plain messages pass through unchanged. For ``message_changed`` the edited
    message is lifted out of ``event["message"]`` with the channel attached.
    Edits that leave the text untouched (link unfurls, attachment previews)
    return None.
    """
    if event.get("subtype") != "message_changed":
        return event

    message = event.get("message") or {}
    previous = event.get("previous_message") or {}
    if message.get("text", "") == previous.get("text", ""):
        return None
    return {**message, "channel": event.get("channel")}


def should_process(event: dict, channel_id: str) -> bool:
    """Apply message filters. All must pass for the message to be analyzed.

    1. Monitored channel only
    2. Not a bot (bot_id or bot_message subtype)
    3. Known subtype (plain, file share, edit)
    4. Top-level only: thread replies are skipped, thread parents are not
    """
    # Filter 1: Wrong channel
    if event.get("channel") != channel_id:
        return False

    # Filter 2: Bot messages
    if event.get("bot_id") or event.get("subtype") == "bot_message":
        return False

    # Filter 3: Irrelevant subtypes
    if event.get("subtype") not in _PROCESSED_SUBTYPES:
        return False

    # Filter 4: Thread replies
    thread_ts = event.get("thread_ts")
    if thread_ts and thread_ts != event.get("ts"):
        return False

    return True


def build_permalink(channel_id: str, timestamp: str) -> str:
    """Build the archive permalink for a message: ts without its dot, prefixed ``p``."""
    return f"https://slack.com/archives/{channel_id}/p{timestamp.replace('.', '')}"


async def process_signal(event: dict, client: AsyncWebClient, context: SignalContext) -> None:
    """Run one Slack message event through the full signal pipeline.

    filter -> acknowledge -> enrich -> analyze -> store -> reply -> success reaction.
    Any exception after acknowledgement is reported back in the thread with a
    warning reaction; the exception itself is logged, never re-raised.
    """
    settings = context.settings

    if not should_process(event, settings.signals_channel_id):
        return
    message = unwrap_event(event)
    if message is None or not should_process(message, settings.signals_channel_id):
        return

    channel_id = message["channel"]
    timestamp = message["ts"]
    text = message.get("text") or ""
    files = message.get("files") or []

    # Nothing to analyze: stay silent, no reaction
    if not text.strip() and select_attachment(files) is None:
        return

    await add_reaction(client, channel_id, timestamp, PROCESSING_EMOJI)

    try:
        signal = await gather_signal(text, files, bot_token=settings.slack_bot_token)
        # Nothing to analyze: clear the acknowledgement, no reply, no row
        if signal.is_empty:
            logger.info("Signal %s had nothing to analyze after enrichment", timestamp)
            await remove_reaction(client, channel_id, timestamp, PROCESSING_EMOJI)
            return

        analysis = await analyze_signal(
            context.gemini,
            signal.content,
            signal.attachment,
            model=settings.gemini_model,
            signal_id=timestamp,
        )

        slack_link = build_permalink(channel_id, timestamp)
        stored = await store_signal(
            context.notion,
            settings.notion_database_id,
            analysis,
            signal.content,
            slack_link,
        )

        await post_signal_reply(client, channel_id, timestamp, analysis)

        await remove_reaction(client, channel_id, timestamp, PROCESSING_EMOJI)
        await add_reaction(client, channel_id, timestamp, SUCCESS_EMOJI)
        logger.info("Pipeline complete for %s -> %s", timestamp, stored.record_id)

    except Exception as exc:
        logger.error("Error processing signal %s: %s", timestamp, exc, exc_info=True)
        await remove_reaction(client, channel_id, timestamp, PROCESSING_EMOJI)
        await add_reaction(client, channel_id, timestamp, WARNING_EMOJI)
        await notify_error(client, channel_id, timestamp, str(exc))

"""Slack event listener using Socket Mode.

Connects to Slack via the bolt framework (no public HTTP endpoint) and
hands every ``message`` event to the signal pipeline.
"""

import logging

from slack_bolt.adapter.socket_mode.async_handler import AsyncSocketModeHandler
from slack_bolt.async_app import AsyncApp

from cultural_signals.context import SignalContext
from cultural_signals.slack.handlers import process_signal

logger = logging.getLogger(__name__)


class SignalListener:
    """Wraps a Slack Bolt ``AsyncApp`` with Socket Mode for real-time events.

    Bolt acknowledges each event before running its listener as a separate
    task, so concurrent messages are processed independently.
    """

    def __init__(self, context: SignalContext) -> None:
        settings = context.settings
        self._context = context
        self._app = AsyncApp(
            token=settings.slack_bot_token,
            signing_secret=settings.slack_signing_secret,
        )
        self._handler = AsyncSocketModeHandler(self._app, settings.slack_app_token)
        self._app.event("message")(self._on_message)

    @property
    def app(self) -> AsyncApp:
        """The underlying ``slack_bolt.async_app.AsyncApp`` instance."""
        return self._app

    async def _on_message(self, event: dict, client) -> None:
        await process_signal(event, client, self._context)

    # -- lifecycle -----------------------------------------------------------

    async def start(self) -> None:
        """Open the Socket Mode connection without blocking the event loop."""
        logger.info(
            "Starting Socket Mode handler",
            extra={"channel": self._context.settings.signals_channel_id},
        )
        await self._handler.connect_async()

    async def close(self) -> None:
        """Shut down the Socket Mode connection gracefully."""
        logger.info("Closing Socket Mode handler")
        await self._handler.close_async()

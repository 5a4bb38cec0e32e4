"""FastAPI application hosting the Socket Mode listener, with a health endpoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cultural_signals.config import get_settings
from cultural_signals.context import SignalContext
from cultural_signals.logging_config import configure_logging
from cultural_signals.slack.listener import SignalListener

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging, build clients, run the listener."""
    settings = get_settings()
    configure_logging(settings.log_level)
    context = SignalContext.from_settings(settings)
    listener = SignalListener(context)
    app.state.settings = settings
    app.state.listener = listener

    await listener.start()
    logger.info("Cultural signal bot is running, monitoring %s", settings.signals_channel_id)
    try:
        yield
    finally:
        await listener.close()


app = FastAPI(
    title="Cultural Signals",
    lifespan=lifespan,
)


@app.get("/health")
async def health():
    """Health check endpoint for Cloud Run and local development."""
    return {
        "status": "ok",
        "service": "cultural-signals",
        "version": "0.1.0",
    }

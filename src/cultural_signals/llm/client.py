"""Gemini client factory.

Builds a genai.Client from application settings with a 60-second HTTP
timeout. No HttpRetryOptions: every signal gets exactly one attempt.
"""

from google import genai
from google.genai import types

from cultural_signals.config import Settings


def create_gemini_client(settings: Settings) -> genai.Client:
    """Return a Gemini client configured with gemini_api_key from settings."""
    return genai.Client(
        api_key=settings.gemini_api_key,
        http_options=types.HttpOptions(timeout=60_000),
    )

"""Read-only dependencies shared by every pipeline run."""

from dataclasses import dataclass

from google import genai
from notion_client import AsyncClient

from cultural_signals.config import Settings
from cultural_signals.llm.client import create_gemini_client
from cultural_signals.notion.client import create_notion_client


@dataclass(frozen=True)
class SignalContext:
    """Settings and API clients, built once at startup."""

    settings: Settings
    gemini: genai.Client
    notion: AsyncClient

    @classmethod
    def from_settings(cls, settings: Settings) -> "SignalContext":
        return cls(
            settings=settings,
            gemini=create_gemini_client(settings),
            notion=create_notion_client(settings),
        )

"""Environment-driven settings for the signal bot."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Frozen: built once at startup and handed to every component, which never
    reads the environment on its own.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Slack
    slack_bot_token: str = ""
    slack_signing_secret: str = ""
    slack_app_token: str = ""
    signals_channel_id: str = ""

    # Notion
    notion_api_key: str = ""
    notion_database_id: str = ""

    # Gemini
    gemini_api_key: str = ""
    gemini_model: str = "gemini-3-flash-preview"

    # App
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8080


@lru_cache
def get_settings() -> Settings:
    """Build Settings on first call and reuse them for the life of the process."""
    return Settings()

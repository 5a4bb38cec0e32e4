"""Async Notion client factory with data source discovery.

Discovers the data_source_id from the signals database on first use
(required by Notion API 2025-09-03) and caches it per database.
"""

from notion_client import AsyncClient

from cultural_signals.config import Settings

_data_source_ids: dict[str, str] = {}


def create_notion_client(settings: Settings) -> AsyncClient:
    """Return an async Notion client configured with notion_api_key from settings."""
    return AsyncClient(auth=settings.notion_api_key)


async def get_data_source_id(client: AsyncClient, database_id: str) -> str:
    """Discover and cache the data_source_id for a database.

    Uses databases.retrieve() to find the data_sources array, then caches
    the first entry. Raises RuntimeError if no data sources are found.
    """
    if database_id not in _data_source_ids:
        db = await client.databases.retrieve(database_id=database_id)
        data_sources = db.get("data_sources", [])
        if not data_sources:
            raise RuntimeError(
                f"No data sources found for database {database_id}. "
                "Ensure the database exists and has at least one data source."
            )
        _data_source_ids[database_id] = data_sources[0]["id"]
    return _data_source_ids[database_id]


def reset_cache() -> None:
    """Forget discovered data source ids. Used for testing."""
    _data_source_ids.clear()

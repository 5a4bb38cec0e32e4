"""Result type for Notion writes."""

from pydantic import BaseModel


class StoredSignal(BaseModel):
    """Returned after a signal row is created in the Notion database."""

    record_id: str
    url: str

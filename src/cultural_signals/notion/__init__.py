"""Notion output: signal row creation in the Cultural Signals database."""

from cultural_signals.notion.client import create_notion_client, get_data_source_id, reset_cache
from cultural_signals.notion.models import StoredSignal
from cultural_signals.notion.properties import build_signal_properties
from cultural_signals.notion.service import store_signal

__all__ = [
    "build_signal_properties",
    "create_notion_client",
    "get_data_source_id",
    "reset_cache",
    "store_signal",
    "StoredSignal",
]

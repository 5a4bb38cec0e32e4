"""Signal row creation in the Notion database.

Append-only: every analyzed signal becomes a new page. No duplicate check,
no upsert. Lets notion_client.errors.APIResponseError propagate to the
pipeline, which reports it in Slack.
"""

import logging

from notion_client import AsyncClient

from cultural_signals.models.analysis import AnalysisRecord
from cultural_signals.notion.client import get_data_source_id
from cultural_signals.notion.models import StoredSignal
from cultural_signals.notion.properties import build_signal_properties

logger = logging.getLogger(__name__)


async def store_signal(
    client: AsyncClient,
    database_id: str,
    analysis: AnalysisRecord,
    raw_input: str,
    slack_link: str,
) -> StoredSignal:
    """Create one row for an analyzed signal and return its identifier."""
    ds_id = await get_data_source_id(client, database_id)
    properties = build_signal_properties(analysis, raw_input, slack_link)

    created_page = await client.pages.create(
        parent={"type": "data_source_id", "data_source_id": ds_id},
        properties=properties,
    )

    logger.info("Stored signal row %s (%s)", created_page["id"], slack_link)
    return StoredSignal(record_id=created_page["id"], url=created_page.get("url", ""))

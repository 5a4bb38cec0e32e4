"""Pure function mapping an AnalysisRecord to Notion API properties.

Every field is truncated to its column limit (in code points, the unit
Notion's own text limits use) before being split into rich_text chunks
that respect Notion's 2000-character-per-object limit.
"""

from datetime import date

from cultural_signals.models.analysis import FIELD_LIMITS, RAW_INPUT_LIMIT, AnalysisRecord

# AnalysisRecord field -> Notion column name
COLUMN_NAMES: dict[str, str] = {
    "source": "Source",
    "tldr": "TLDR",
    "what_who": "What/Who",
    "why": "Why",
    "where": "Where",
    "when": "When",
    "how": "How",
    "theme": "Theme",
    "category": "Category",
    "conflict": "Conflict",
    "tags": "Tags",
    "date_added": "Date Added",
}

TITLE_FIELD = "tldr"


def _split_rich_text(text: str, limit: int = 2000) -> list[dict]:
    """Split text into multiple rich_text objects respecting Notion's 2000-char limit.

    Every text field MUST go through this to avoid 400 errors on long content.
    """
    if not text:
        return [{"type": "text", "text": {"content": ""}}]
    chunks = []
    for i in range(0, len(text), limit):
        chunks.append({"type": "text", "text": {"content": text[i : i + limit]}})
    return chunks


def truncate(value: str | None, limit: int | None) -> str:
    """Coerce a missing value to "" and cut it to ``limit`` characters (None = unbounded)."""
    value = value or ""
    return value if limit is None else value[:limit]


def format_date_added(day: date) -> str:
    """Format a date as ``Month DD, YYYY``."""
    return day.strftime("%B %d, %Y")


def build_signal_properties(
    analysis: AnalysisRecord,
    raw_input: str,
    slack_link: str,
    *,
    today: date | None = None,
) -> dict:
    """Map an analysis record plus raw input and permalink to a Notion property dict.

    Pure function -- no API calls, no async. ``today`` is the fallback for a
    missing date_added and defaults to the current local date.

    Returns a dict suitable for pages.create(properties=...).
    """
    values = {
        field: truncate(getattr(analysis, field), limit) for field, limit in FIELD_LIMITS.items()
    }
    if not values["date_added"]:
        values["date_added"] = format_date_added(today or date.today())

    properties: dict = {}
    for field, column in COLUMN_NAMES.items():
        kind = "title" if field == TITLE_FIELD else "rich_text"
        properties[column] = {kind: _split_rich_text(values[field])}

    properties["Raw Input"] = {"rich_text": _split_rich_text(truncate(raw_input, RAW_INPUT_LIMIT))}
    properties["Slack Link"] = {"url": slack_link or None}
    return properties

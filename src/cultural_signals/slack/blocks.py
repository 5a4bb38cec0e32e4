"""Pure function rendering an AnalysisRecord as Slack Block Kit blocks."""

from cultural_signals.models.analysis import AnalysisRecord

HEADER_TEXT = "Signal Captured"


def _mrkdwn(text: str) -> dict:
    return {"type": "mrkdwn", "text": text}


def _section(text: str) -> dict:
    return {"type": "section", "text": _mrkdwn(text)}


def _fields_section(*fields: str) -> dict:
    return {"type": "section", "fields": [_mrkdwn(f) for f in fields]}


def format_analysis_blocks(analysis: AnalysisRecord) -> list[dict]:
    """Build the threaded reply for an analyzed signal.

    Order: header, TLDR, theme + category, conflict, why, what/who, how,
    where + when, tags context, divider. Empty fields render as empty text.
    """
    return [
        {
            "type": "header",
            "text": {"type": "plain_text", "text": HEADER_TEXT, "emoji": True},
        },
        _section(f"*TLDR:* {analysis.tldr}"),
        _fields_section(f"*Theme:*\n{analysis.theme}", f"*Category:*\n{analysis.category}"),
        _section(f"*Conflict:* {analysis.conflict}"),
        _section(f"*Why:*\n{analysis.why}"),
        _section(f"*What/Who:* {analysis.what_who}"),
        _section(f"*How:* {analysis.how}"),
        _fields_section(f"*Where:*\n{analysis.where}", f"*When:*\n{analysis.when}"),
        {"type": "context", "elements": [_mrkdwn(f"Tags: {analysis.tags}")]},
        {"type": "divider"},
    ]

"""Content extraction: URLs, web page text, and Slack attachments.

Public API:
    gather_signal(text, files, bot_token=...) -> RawSignal
        Single entry point that enriches a message with up to 3 fetched
        pages and one image/PDF attachment.
"""

from cultural_signals.extraction.files import download_slack_file, select_attachment
from cultural_signals.extraction.signal import gather_signal
from cultural_signals.extraction.urls import extract_urls
from cultural_signals.extraction.web import fetch_url_content

__all__ = [
    "download_slack_file",
    "extract_urls",
    "fetch_url_content",
    "gather_signal",
    "select_attachment",
]

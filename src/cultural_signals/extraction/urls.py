"""URL extraction from raw Slack message text."""

import re

# Stops at whitespace and angle brackets, so Slack's <url> wrapping is shed.
URL_PATTERN = re.compile(r"https?://[^\s<>]+", re.IGNORECASE)

MAX_URLS = 3


def extract_urls(text: str | None) -> list[str]:
    """Extract every http(s) URL from text, in order of appearance.

    No deduplication. Bare domains without a scheme are not matched.
    """
    if not text:
        return []
    return URL_PATTERN.findall(text)

"""Web page fetch and plain-text cleanup for URL enrichment."""

import asyncio
import logging
import re

import httpx

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (compatible; CulturalSignalBot/1.0)"
FETCH_TIMEOUT_SECONDS = 10.0
MAX_REDIRECTS = 5
MAX_BODY_BYTES = 50_000
MAX_TEXT_CHARS = 3_000

_SCRIPT_PATTERN = re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE | re.DOTALL)
_STYLE_PATTERN = re.compile(r"<style[^>]*>.*?</style>", re.IGNORECASE | re.DOTALL)
_TAG_PATTERN = re.compile(r"<[^>]+>")
_WHITESPACE_PATTERN = re.compile(r"\s+")

_TEXTUAL_MARKERS = ("json", "xml", "javascript")


class NonTextualContent(Exception):
    """Raised when a fetched body is not something we can read as text."""


def fetch_failed_placeholder(url: str) -> str:
    """Sentinel substituted into the signal when a page cannot be fetched."""
    return f"[Could not fetch content from {url}]"


def _is_textual(content_type: str) -> bool:
    """Missing content types are given the benefit of the doubt."""
    if not content_type:
        return True
    media_type = content_type.split(";")[0].strip().lower()
    return media_type.startswith("text/") or any(m in media_type for m in _TEXTUAL_MARKERS)


def clean_html(html: str, limit: int = MAX_TEXT_CHARS) -> str:
    """Reduce an HTML document to collapsed plain text of at most ``limit`` characters.

    Strips <script> and <style> blocks, replaces all remaining tags with
    spaces, and drops stray angle brackets left by truncated markup.
    """
    text = _SCRIPT_PATTERN.sub("", html)
    text = _STYLE_PATTERN.sub("", text)
    text = _TAG_PATTERN.sub(" ", text)
    text = text.replace("<", " ").replace(">", " ")
    text = _WHITESPACE_PATTERN.sub(" ", text).strip()
    return text[:limit]


async def _read_capped(response: httpx.Response, limit: int) -> bytes:
    """Read at most ``limit`` bytes of a streamed body, then stop downloading."""
    body = bytearray()
    async for chunk in response.aiter_bytes():
        body.extend(chunk)
        if len(body) >= limit:
            break
    return bytes(body[:limit])


async def fetch_url_content(url: str) -> str:
    """Fetch a page and return its cleaned text, or a placeholder on any failure.

    Never raises: timeouts, network errors, redirect loops, error statuses and
    non-text bodies all produce ``[Could not fetch content from <url>]`` so a
    bad link can't abort the pipeline.
    """
    try:
        # httpx timeouts apply per read; the wall-clock budget covers the whole fetch
        async with asyncio.timeout(FETCH_TIMEOUT_SECONDS):
            async with httpx.AsyncClient(
                follow_redirects=True,
                max_redirects=MAX_REDIRECTS,
                timeout=httpx.Timeout(FETCH_TIMEOUT_SECONDS),
                headers={"User-Agent": USER_AGENT},
            ) as client:
                async with client.stream("GET", url) as response:
                    response.raise_for_status()
                    content_type = response.headers.get("content-type", "")
                    if not _is_textual(content_type):
                        raise NonTextualContent(content_type)
                    body = await _read_capped(response, MAX_BODY_BYTES)
                    encoding = response.charset_encoding or "utf-8"

        text = body.decode(encoding, errors="replace")
    except TimeoutError:
        logger.warning("Fetch timed out after %.1fs: %s", FETCH_TIMEOUT_SECONDS, url)
        return fetch_failed_placeholder(url)
    except (httpx.HTTPError, httpx.InvalidURL, NonTextualContent, LookupError) as exc:
        logger.warning("Failed to fetch URL %s: %s", url, exc)
        return fetch_failed_placeholder(url)

    return clean_html(text)

"""Slack file download for image and PDF attachments."""

import asyncio
import base64
import logging

import httpx

logger = logging.getLogger(__name__)

DOWNLOAD_TIMEOUT_SECONDS = 15.0

SUPPORTED_PDF_TYPE = "application/pdf"


def is_supported_mimetype(mimetype: str | None) -> bool:
    """Only images and PDFs are forwarded to the LLM."""
    if not mimetype:
        return False
    return mimetype.startswith("image/") or mimetype == SUPPORTED_PDF_TYPE


def select_attachment(files: list[dict] | None) -> dict | None:
    """Return the first Slack file object with a supported mimetype, if any."""
    for file in files or []:
        if is_supported_mimetype(file.get("mimetype")):
            return file
    return None


async def download_slack_file(file_url: str, *, bot_token: str) -> str | None:
    """Download a private Slack file and return its base64-encoded body.

    Returns None on any failure. Slack answers an under-scoped token with a
    200 HTML login page instead of the file, which is treated as a failure too.
    """
    try:
        async with asyncio.timeout(DOWNLOAD_TIMEOUT_SECONDS):
            async with httpx.AsyncClient(
                follow_redirects=True,
                timeout=httpx.Timeout(DOWNLOAD_TIMEOUT_SECONDS),
            ) as client:
                response = await client.get(
                    file_url,
                    headers={"Authorization": f"Bearer {bot_token}"},
                )
                response.raise_for_status()
    except TimeoutError:
        logger.warning(
            "Slack file download timed out after %.1fs: %s", DOWNLOAD_TIMEOUT_SECONDS, file_url
        )
        return None
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Failed to download Slack file %s: %s", file_url, exc)
        return None

    if response.headers.get("content-type", "").startswith("text/html"):
        logger.warning(
            "Slack returned an HTML page for %s; check the files:read scope", file_url
        )
        return None

    return base64.b64encode(response.content).decode("ascii")

"""Signal assembly: message text + fetched pages + one attachment."""

import logging

from cultural_signals.extraction.files import download_slack_file, select_attachment
from cultural_signals.extraction.urls import MAX_URLS, extract_urls
from cultural_signals.extraction.web import fetch_url_content
from cultural_signals.models.signal import Attachment, RawSignal

logger = logging.getLogger(__name__)


def _attachment_marker(attachment: Attachment) -> str:
    kind = "PDF" if attachment.is_pdf else "Image"
    return f"[{kind} attached: {attachment.name}]"


async def gather_signal(
    text: str | None,
    files: list[dict] | None,
    *,
    bot_token: str,
) -> RawSignal:
    """Build a RawSignal from a Slack message's text and files.

    URLs are fetched one at a time in message order and each appended as a
    labeled block. The first image/PDF file is downloaded; when that fails the
    signal simply has no attachment.
    """
    text = text or ""
    urls = extract_urls(text)[:MAX_URLS]
    content = text

    for url in urls:
        page = await fetch_url_content(url)
        content += f"\n\n--- Content from {url} ---\n{page}"

    attachment = None
    file = select_attachment(files)
    if file is not None and file.get("url_private"):
        encoded = await download_slack_file(file["url_private"], bot_token=bot_token)
        if encoded:
            attachment = Attachment(
                mime_type=file["mimetype"],
                base64=encoded,
                name=file.get("name") or "unnamed",
            )
            content += f"\n\n{_attachment_marker(attachment)}"

    logger.debug(
        "Gathered signal: %d URL(s), attachment=%s, %d chars",
        len(urls),
        attachment is not None,
        len(content),
    )
    return RawSignal(text=text, urls=urls, attachment=attachment, content=content)

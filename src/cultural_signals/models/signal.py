"""Raw signal model: one inbound message plus its enrichment."""

from pydantic import BaseModel, Field


class Attachment(BaseModel):
    """A downloaded image or PDF, base64-encoded for the LLM request."""

    mime_type: str  # e.g., "image/png", "application/pdf"
    base64: str
    name: str = "unnamed"

    @property
    def is_pdf(self) -> bool:
        return self.mime_type == "application/pdf"


class RawSignal(BaseModel):
    """Per-event signal assembled before analysis. Discarded once analyzed."""

    text: str = ""  # Original message body
    urls: list[str] = Field(default_factory=list)  # At most 3, in message order
    attachment: Attachment | None = None
    content: str = ""  # Message text plus fetched page blocks and attachment marker

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to analyze."""
        return not self.content.strip() and self.attachment is None

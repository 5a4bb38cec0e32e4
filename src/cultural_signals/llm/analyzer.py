"""Signal analyzer: enriched content -> AnalysisRecord via Gemini.

Sends one multimodal request per signal with the fixed analysis framework
as system instruction, then parses the reply defensively: the model is told
to return bare JSON but may still wrap it in prose or fences.
"""

import json
import logging
import re

from google import genai
from google.genai import types
from google.genai.errors import APIError

from cultural_signals.cost import extract_usage, log_usage
from cultural_signals.llm.prompts import SYSTEM_PROMPT, build_user_parts
from cultural_signals.llm.vocabulary import (
    CATEGORY_VOCABULARY,
    CONFLICT_VOCABULARY,
    THEME_VOCABULARY,
    find_unknown_terms,
)
from cultural_signals.models.analysis import AnalysisRecord
from cultural_signals.models.signal import Attachment

logger = logging.getLogger(__name__)

# Greedy: first "{" through last "}".
_JSON_OBJECT_PATTERN = re.compile(r"\{.*\}", re.DOTALL)

_VOCABULARY_FIELDS = {
    "theme": THEME_VOCABULARY,
    "category": CATEGORY_VOCABULARY,
    "conflict": CONFLICT_VOCABULARY,
}


class AnalysisParseError(ValueError):
    """The LLM reply held no parseable JSON object."""

    def __init__(self, response_text: str):
        super().__init__("Failed to parse analysis response as JSON")
        self.response_text = response_text


def _loads_object(text: str) -> dict | None:
    # JSONDecodeError, oversized int literals, pathological nesting
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        return None
    return data if isinstance(data, dict) else None


def parse_analysis(response_text: str) -> AnalysisRecord:
    """Parse an LLM reply into an AnalysisRecord.

    Tries the whole text as JSON first, then the outermost ``{...}`` span.

    Raises:
        AnalysisParseError: If neither attempt yields a JSON object.
    """
    data = _loads_object(response_text)
    if data is None:
        match = _JSON_OBJECT_PATTERN.search(response_text)
        if match:
            data = _loads_object(match.group(0))
    if data is None:
        raise AnalysisParseError(response_text)
    return AnalysisRecord.model_validate(data)


def _log_vocabulary_drift(analysis: AnalysisRecord) -> None:
    """Report terms outside the controlled vocabularies. Nothing is rejected."""
    for field, vocabulary in _VOCABULARY_FIELDS.items():
        unknown = find_unknown_terms(getattr(analysis, field), vocabulary)
        if unknown:
            logger.info(
                "Out-of-vocabulary %s terms",
                field,
                extra={"field": field, "terms": unknown},
            )


async def analyze_signal(
    client: genai.Client,
    content: str,
    attachment: Attachment | None = None,
    *,
    model: str,
    signal_id: str = "",
) -> AnalysisRecord:
    """Analyze one signal with Gemini and return the parsed record.

    Args:
        client: Configured Gemini client instance.
        content: Enriched signal text (message + fetched pages + markers).
        attachment: Optional image/PDF sent as an inline part before the text.
        model: Gemini model identifier.
        signal_id: Slack message timestamp, used only for log correlation.

    Raises:
        APIError: On any Gemini API failure (not retried).
        AnalysisParseError: If the reply contains no JSON object.
    """
    try:
        response = await client.aio.models.generate_content(
            model=model,
            contents=build_user_parts(content, attachment),
            config=types.GenerateContentConfig(
                system_instruction=SYSTEM_PROMPT,
                response_mime_type="application/json",
                temperature=1.0,
            ),
        )
    except APIError:
        logger.error("Gemini API error analyzing signal %s", signal_id, exc_info=True)
        raise

    log_usage(signal_id, extract_usage(response), model)

    response_text = response.text or ""
    try:
        analysis = parse_analysis(response_text)
    except AnalysisParseError:
        logger.error(
            "Unparseable Gemini response for signal %s",
            signal_id,
            extra={"response_text": response_text[:2000]},
        )
        raise

    _log_vocabulary_drift(analysis)
    return analysis

"""Prompt template tests for the system prompt and user parts."""

from cultural_signals.llm.prompts import SYSTEM_PROMPT, build_user_parts
from cultural_signals.llm.vocabulary import (
    CATEGORY_VOCABULARY,
    CONFLICT_VOCABULARY,
    CONTROLLED_TAGS,
    THEME_VOCABULARY,
    all_terms,
)
from cultural_signals.models.analysis import FIELD_LIMITS
from cultural_signals.models.signal import Attachment


def test_system_prompt_lists_every_output_field():
    for field in FIELD_LIMITS:
        assert f'"{field}"' in SYSTEM_PROMPT, f"Field '{field}' not in system prompt"


def test_system_prompt_states_field_limits():
    for field, limit in FIELD_LIMITS.items():
        if limit is not None:
            assert f'"{field}": "(max {limit} chars)' in SYSTEM_PROMPT


def test_system_prompt_contains_all_vocabularies():
    for vocabulary in (THEME_VOCABULARY, CATEGORY_VOCABULARY, CONFLICT_VOCABULARY, CONTROLLED_TAGS):
        for term in all_terms(vocabulary):
            assert term in SYSTEM_PROMPT, f"Term '{term}' not in system prompt"


def test_system_prompt_describes_tldr_formula():
    assert "EXTRACT THE CORE TENSION" in SYSTEM_PROMPT
    for element in ("behavioral shift", "data/evidence", "mechanism", "implication"):
        assert element in SYSTEM_PROMPT


def test_system_prompt_demands_bare_json():
    assert "Return ONLY a valid JSON object" in SYSTEM_PROMPT
    assert "{{" not in SYSTEM_PROMPT  # template braces fully rendered


def test_user_parts_text_only():
    parts = build_user_parts("observation")
    assert len(parts) == 1
    assert parts[0].text == "Analyze this cultural signal:\n\nobservation"


def test_user_parts_pdf_inline_first():
    attachment = Attachment(mime_type="application/pdf", base64="JVBERi0=")
    parts = build_user_parts("report", attachment)
    assert parts[0].inline_data.mime_type == "application/pdf"
    assert parts[0].inline_data.data == b"%PDF-"
    assert parts[1].text.startswith("Analyze this cultural signal:")

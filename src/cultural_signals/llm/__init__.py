"""LLM processing: cultural signal analysis via Gemini.

Public API:
    analyze_signal(client, content, attachment, model=...) -> AnalysisRecord
        Sends enriched signal content to Gemini with the fixed analysis
        framework and parses the JSON reply.
"""

from cultural_signals.llm.analyzer import AnalysisParseError, analyze_signal, parse_analysis
from cultural_signals.llm.client import create_gemini_client

__all__ = [
    "AnalysisParseError",
    "analyze_signal",
    "create_gemini_client",
    "parse_analysis",
]

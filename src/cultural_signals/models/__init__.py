"""Data models for the cultural signal pipeline."""

from cultural_signals.models.analysis import FIELD_LIMITS, RAW_INPUT_LIMIT, AnalysisRecord
from cultural_signals.models.signal import Attachment, RawSignal

__all__ = [
    "AnalysisRecord",
    "Attachment",
    "FIELD_LIMITS",
    "RAW_INPUT_LIMIT",
    "RawSignal",
]

"""Analysis record model mirroring the cultural signal table columns."""

from pydantic import BaseModel, ConfigDict, field_validator

# Max characters per field at write time. date_added is unbounded.
FIELD_LIMITS: dict[str, int | None] = {
    "source": 150,
    "tldr": 600,
    "what_who": 300,
    "why": 200,
    "where": 100,
    "when": 80,
    "how": 250,
    "theme": 100,
    "category": 80,
    "conflict": 250,
    "tags": 300,
    "date_added": None,
}

RAW_INPUT_LIMIT = 100_000


class AnalysisRecord(BaseModel):
    """Structured LLM output for one signal.

    Every field is a string and defaults to "". The LLM's JSON is coerced
    here rather than trusted: nulls become "", lists are joined, numbers
    are stringified. Unknown keys are dropped.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    source: str = ""
    tldr: str = ""
    what_who: str = ""
    why: str = ""
    where: str = ""
    when: str = ""
    how: str = ""
    theme: str = ""
    category: str = ""
    conflict: str = ""
    tags: str = ""
    date_added: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_to_str(cls, value: object, info) -> str:
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            sep = "," if info.field_name == "tags" else " / "
            return sep.join(str(v) for v in value if v is not None)
        if isinstance(value, str):
            return value
        return str(value)

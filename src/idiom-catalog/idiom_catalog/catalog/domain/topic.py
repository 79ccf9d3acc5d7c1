"""TopicEntry domain value object — one Base R vs Tidy R comparison."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from idiom_catalog.catalog.domain.note import Note


class TopicEntry(BaseModel):
    """Immutable pairing of a Base R snippet with its Tidy R equivalent.

    Snippets are illustrative text, one statement per item, and are never
    executed. Notes keep their authored order.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, pattern=r"^[a-z][a-z0-9_]*$")
    title: str = ""
    summary: str = ""
    base_snippet: tuple[str, ...] = Field(min_length=1)
    tidy_snippet: tuple[str, ...] = Field(min_length=1)
    notes: tuple[Note, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _default_title(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("title"):
            return {**data, "title": data.get("name", "")}
        return data

    @field_validator("base_snippet", "tidy_snippet")
    @classmethod
    def _statements_not_blank(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        blank = [str(index) for index, stmt in enumerate(value) if not stmt.strip()]
        if blank:
            raise ValueError(f"blank statement(s) at index {', '.join(blank)}")
        return value

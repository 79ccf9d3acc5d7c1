"""Caveat note value object and its optional tag."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NoteKind(StrEnum):
    OBSERVATION = "observation"
    GOTCHA = "gotcha"
    FIX = "fix"


class Note(BaseModel):
    """Free-text caveat attached to a topic, optionally tagged with a NoteKind."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1)
    kind: NoteKind | None = None

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("blank note text")
        return value

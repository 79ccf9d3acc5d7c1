"""IdiomCatalog aggregate — the ordered, read-only collection of topics."""

from collections import Counter
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from idiom_catalog.catalog.domain.errors import NotFoundError
from idiom_catalog.catalog.domain.topic import TopicEntry


class IdiomCatalog(BaseModel):
    """Root aggregate holding topic entries in authored (pedagogical) order.

    Entry names are unique. Lookups return the stored entry itself, so
    ``catalog.get_topic(e.name) is e`` holds for every entry.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    title: str = Field(min_length=1)
    dataset: Literal["mtcars"] = "mtcars"
    entries: tuple[TopicEntry, ...] = ()

    @model_validator(mode="after")
    def _names_unique(self) -> "IdiomCatalog":
        counts = Counter(entry.name for entry in self.entries)
        duplicates = [name for name, count in counts.items() if count > 1]
        if duplicates:
            raise ValueError(f"duplicate topic name(s): {', '.join(duplicates)}")
        return self

    def __len__(self) -> int:
        return len(self.entries)

    def list_topics(self) -> list[str]:
        """Return topic names in catalog order."""
        return [entry.name for entry in self.entries]

    def get_topic(self, name: str) -> TopicEntry:
        """
        Return the entry called name.

        Raises:
            NotFoundError: if no entry has that name.
        """
        for entry in self.entries:
            if entry.name == name:
                return entry
        raise NotFoundError(name=name, catalog=self.name)

"""Plain-text renderer — indented snippets under underlined topic headings."""

from idiom_catalog.catalog.domain.catalog import IdiomCatalog
from idiom_catalog.catalog.domain.note import Note
from idiom_catalog.catalog.domain.topic import TopicEntry

_INDENT = "    "


class PlainTextRenderer:
    """Renders catalog content as plain text.

    Satisfies the Renderer protocol structurally.
    """

    def render_catalog(self, catalog: IdiomCatalog) -> str:
        sections = [_header(catalog=catalog)]
        sections.extend(self.render_topic(entry=entry) for entry in catalog.entries)
        return "\n\n".join(sections) + "\n"

    def render_topic(self, entry: TopicEntry) -> str:
        heading = f"[{entry.name}] {entry.title}"
        lines = [heading, "-" * len(heading)]
        if entry.summary.strip():
            lines.extend(["", entry.summary.strip()])

        lines.extend(["", "Base R:"])
        lines.extend(_indented(entry.base_snippet))
        lines.append("Tidy R:")
        lines.extend(_indented(entry.tidy_snippet))

        if entry.notes:
            lines.append("Notes:")
            lines.extend(f"{_INDENT}- {_note_text(note)}" for note in entry.notes)
        return "\n".join(lines)


def _header(catalog: IdiomCatalog) -> str:
    return "\n".join(
        [catalog.title, "=" * len(catalog.title), f"Dataset: {catalog.dataset}"]
    )


def _indented(statements: tuple[str, ...]) -> list[str]:
    """Indent every physical line, including lines inside multi-line statements."""
    return [
        f"{_INDENT}{line}" if line else ""
        for stmt in statements
        for line in stmt.splitlines()
    ]


def _note_text(note: Note) -> str:
    if note.kind is None:
        return note.text
    return f"[{note.kind.value}] {note.text}"

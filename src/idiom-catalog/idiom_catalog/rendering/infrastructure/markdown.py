"""Markup renderer — Markdown with fenced R code blocks.

Only the document body is produced. HTML conversion, tables of contents and
styling are left to whatever consumes the Markdown.
"""

import re

from idiom_catalog.catalog.domain.catalog import IdiomCatalog
from idiom_catalog.catalog.domain.note import Note
from idiom_catalog.catalog.domain.topic import TopicEntry

_BACKTICK_RUN = re.compile(r"`+")


class MarkdownRenderer:
    """Renders catalog content as Markdown.

    Satisfies the Renderer protocol structurally.
    """

    def render_catalog(self, catalog: IdiomCatalog) -> str:
        sections = [f"# {catalog.title}", f"_Dataset: `{catalog.dataset}`_"]
        sections.extend(self.render_topic(entry=entry) for entry in catalog.entries)
        return "\n\n".join(sections) + "\n"

    def render_topic(self, entry: TopicEntry) -> str:
        blocks = [f"## {entry.title} (`{entry.name}`)"]
        if entry.summary.strip():
            blocks.append(entry.summary.strip())

        blocks.append("**Base R**")
        blocks.append(_code_block(entry.base_snippet))
        blocks.append("**Tidy R**")
        blocks.append(_code_block(entry.tidy_snippet))

        if entry.notes:
            blocks.append("**Notes**")
            blocks.append("\n".join(f"- {_note_text(note)}" for note in entry.notes))
        return "\n\n".join(blocks)


def _code_block(statements: tuple[str, ...]) -> str:
    """Fence the statements; the fence outgrows any backtick run in the body."""
    body = "\n".join(statements)
    longest = max((len(run) for run in _BACKTICK_RUN.findall(body)), default=0)
    fence = "`" * max(3, longest + 1)
    return f"{fence}r\n{body}\n{fence}"


def _note_text(note: Note) -> str:
    if note.kind is None:
        return note.text
    return f"**{note.kind.value.capitalize()}:** {note.text}"

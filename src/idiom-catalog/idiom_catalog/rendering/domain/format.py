"""Recognised output formats for a rendered catalog."""

from enum import StrEnum


class RenderFormat(StrEnum):
    PLAIN_TEXT = "plain_text"
    MARKUP = "markup"

"""Rich-text input models: mark flags and document shapes."""

from __future__ import annotations

from enum import Enum, Flag


class Marks(Flag):
    """Inline formatting applied to a text run.

    Member values match the bits of the CMS ``format`` integer so a bitmask
    can be decoded with ``Marks(format & Marks.ALL.value)``.
    """

    NONE = 0
    BOLD = 1
    ITALIC = 2
    UNDERLINE = 4
    ALL = BOLD | ITALIC | UNDERLINE


class ContentShape(str, Enum):
    """Top-level shape of a rich-text field value."""

    EMPTY = "empty"
    TEXT = "text"
    FLAT = "flat"
    ROOTED = "rooted"
    UNKNOWN = "unknown"

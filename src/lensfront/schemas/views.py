"""Rendered view nodes produced by the rich-text renderer."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from lensfront.schemas.richtext import Marks


class TextRunView(BaseModel):
    """A run of literal text with inline marks."""

    kind: Literal["text"] = "text"
    text: str
    bold: bool = False
    italic: bool = False
    underline: bool = False

    @classmethod
    def from_marks(cls, text: str, marks: Marks) -> "TextRunView":
        return cls(
            text=text,
            bold=Marks.BOLD in marks,
            italic=Marks.ITALIC in marks,
            underline=Marks.UNDERLINE in marks,
        )

    @property
    def marks(self) -> Marks:
        marks = Marks.NONE
        if self.bold:
            marks |= Marks.BOLD
        if self.italic:
            marks |= Marks.ITALIC
        if self.underline:
            marks |= Marks.UNDERLINE
        return marks


class ParagraphView(BaseModel):
    """A paragraph made of text runs."""

    kind: Literal["paragraph"] = "paragraph"
    children: list[TextRunView] = Field(default_factory=list)


class HeadingView(BaseModel):
    """A heading holding a single plain text run."""

    kind: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=4)
    text: str = ""


class ListItemView(BaseModel):
    """One list entry; its runs are rendered as siblings."""

    kind: Literal["list_item"] = "list_item"
    children: list[TextRunView] = Field(default_factory=list)


class ListView(BaseModel):
    """An ordered or unordered single-level list."""

    kind: Literal["list"] = "list"
    ordered: bool = False
    items: list[ListItemView] = Field(default_factory=list)


class FallbackView(BaseModel):
    """Diagnostic rendering of content that could not be interpreted.

    ``reason`` is ``"unrecognized"`` when ``raw`` holds the serialized input,
    or ``"error"`` when conversion failed and ``raw`` holds a message.
    """

    kind: Literal["fallback"] = "fallback"
    reason: Literal["unrecognized", "error"] = "unrecognized"
    raw: str


BlockView = Annotated[
    Union[TextRunView, ParagraphView, HeadingView, ListView, FallbackView],
    Field(discriminator="kind"),
]


class RenderResult(BaseModel):
    """Output of a render call. Always a success value, possibly empty."""

    blocks: list[BlockView] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.blocks

    @property
    def has_fallback(self) -> bool:
        return any(isinstance(block, FallbackView) for block in self.blocks)

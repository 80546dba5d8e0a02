"""Render CMS rich-text documents into view nodes.

Accepted inputs are ``None``, a plain string, a flat paragraph node
(``{"type": "paragraph", "children": [...]}``) or a rooted document
(``{"root": {"children": [...]}}``). Anything else renders as a fallback
view holding the serialized input. ``render`` never raises.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from lensfront.exceptions import UnrenderableContent
from lensfront.schemas import (
    BlockView,
    ContentShape,
    FallbackView,
    HeadingView,
    ListItemView,
    ListView,
    Marks,
    ParagraphView,
    RenderResult,
    TextRunView,
)

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Error rendering content"

_HEADING_LEVELS = {"h1": 1, "h2": 2, "h3": 3, "h4": 4}
_LIST_TYPES = {"ul": False, "ol": True}


def render(content: Any) -> RenderResult:
    """Convert a rich-text field value into a ``RenderResult``.

    Conversion failures are logged and replaced by a single error fallback
    view; the caller always receives a result.
    """
    shape = detect_shape(content)
    if shape is ContentShape.EMPTY:
        return RenderResult()
    if shape is ContentShape.TEXT:
        return RenderResult(blocks=[ParagraphView(children=[TextRunView(text=content)])])

    try:
        if shape is ContentShape.FLAT:
            blocks: list[BlockView] = [_convert_paragraph(content)]
        elif shape is ContentShape.ROOTED:
            blocks = [_convert_node(node) for node in content["root"]["children"]]
        else:
            blocks = [FallbackView(raw=serialize_raw(content))]
    except Exception as exc:
        logger.warning("Error rendering rich text: %s", exc)
        return RenderResult(blocks=[FallbackView(reason="error", raw=ERROR_MESSAGE)])

    return RenderResult(blocks=blocks)


def detect_shape(content: Any) -> ContentShape:
    """Classify a rich-text field value before dispatch."""
    if content is None:
        return ContentShape.EMPTY
    if isinstance(content, str):
        return ContentShape.TEXT
    if isinstance(content, Mapping):
        if content.get("type") == "paragraph" and isinstance(content.get("children"), list):
            return ContentShape.FLAT
        root = content.get("root")
        if isinstance(root, Mapping) and isinstance(root.get("children"), list):
            return ContentShape.ROOTED
    return ContentShape.UNKNOWN


def decode_marks(node: Mapping[str, Any]) -> Marks:
    """Read boolean mark flags and the ``format`` bitmask into ``Marks``."""
    marks = Marks.NONE
    fmt = node.get("format")
    # ``format`` also carries alignment strings on block nodes.
    if isinstance(fmt, int) and not isinstance(fmt, bool):
        marks |= Marks(fmt & Marks.ALL.value)
    if node.get("bold") is True:
        marks |= Marks.BOLD
    if node.get("italic") is True:
        marks |= Marks.ITALIC
    if node.get("underline") is True:
        marks |= Marks.UNDERLINE
    return marks


def serialize_raw(value: Any) -> str:
    """Compact JSON used by fallback views."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)


def _convert_node(node: Any) -> BlockView:
    if node is None:
        raise UnrenderableContent("document contains a null node")
    if not isinstance(node, Mapping):
        return FallbackView(raw=serialize_raw(node))

    if node.get("text"):
        return _convert_text_run(node)

    node_type = node.get("type")
    if node_type == "paragraph":
        return _convert_paragraph(node)
    if node_type in _HEADING_LEVELS:
        return _convert_heading(node, _HEADING_LEVELS[node_type])
    if node_type in _LIST_TYPES:
        return _convert_list(node, ordered=_LIST_TYPES[node_type])

    return FallbackView(raw=serialize_raw(node))


def _convert_text_run(node: Any) -> TextRunView:
    node = _as_node(node)
    return TextRunView.from_marks(_literal_text(node), decode_marks(node))


def _convert_paragraph(node: Mapping[str, Any]) -> ParagraphView:
    return ParagraphView(children=[_convert_text_run(child) for child in _children(node)])


def _convert_heading(node: Mapping[str, Any], level: int) -> HeadingView:
    # Only the first run is rendered; its marks are not applied.
    children = _children(node)
    first = children[0] if children else None
    text = _literal_text(first) if isinstance(first, Mapping) else ""
    return HeadingView(level=level, text=text)


def _convert_list(node: Mapping[str, Any], *, ordered: bool) -> ListView:
    items = []
    for item in _children(node):
        runs = [TextRunView(text=_literal_text(_as_node(child))) for child in _children(_as_node(item))]
        items.append(ListItemView(children=runs))
    return ListView(ordered=ordered, items=items)


def _as_node(value: Any) -> Mapping[str, Any]:
    """Null children are broken content; other non-mappings carry no text or children."""
    if value is None:
        raise UnrenderableContent("document contains a null node")
    if not isinstance(value, Mapping):
        return {}
    return value


def _children(node: Mapping[str, Any]) -> list[Any]:
    children = node.get("children")
    if children is None:
        return []
    if not isinstance(children, list):
        raise UnrenderableContent("node children must be a list")
    return children


def _literal_text(node: Mapping[str, Any]) -> str:
    text = node.get("text")
    if not text:
        return ""
    return text if isinstance(text, str) else str(text)

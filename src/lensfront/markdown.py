"""Serialize rendered rich-text views to Markdown."""

from __future__ import annotations

import re
from typing import Any

from lensfront.richtext import render
from lensfront.schemas import (
    BlockView,
    FallbackView,
    HeadingView,
    ListView,
    ParagraphView,
    RenderResult,
    TextRunView,
)

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_\[\]<>])")
_BACKTICK_RUNS = re.compile(r"`+")


def content_to_markdown(content: Any) -> str:
    """Render a rich-text field value straight to Markdown."""
    return result_to_markdown(render(content))


def result_to_markdown(result: RenderResult) -> str:
    blocks = [_serialize_block(block) for block in result.blocks]
    return "\n\n".join(block for block in blocks if block).strip()


def _serialize_block(block: BlockView) -> str:
    if isinstance(block, TextRunView):
        return _serialize_run(block)

    if isinstance(block, ParagraphView):
        return _serialize_runs(block.children)

    if isinstance(block, HeadingView):
        heading = block.text.strip()
        if not heading:
            return ""
        return f"{'#' * block.level} {escape_markdown(heading)}"

    if isinstance(block, ListView):
        lines = []
        for index, item in enumerate(block.items, start=1):
            prefix = f"{index}. " if block.ordered else "- "
            item_text = _serialize_runs(item.children)
            lines.append(prefix + item_text if item_text else prefix.rstrip())
        return "\n".join(lines)

    if isinstance(block, FallbackView):
        if block.reason == "error":
            return f"> {block.raw}"
        fence = _code_fence(block.raw)
        return f"{fence}json\n{block.raw}\n{fence}"

    return ""


def _serialize_runs(runs: list[TextRunView]) -> str:
    return "".join(_serialize_run(run) for run in runs)


def _serialize_run(run: TextRunView) -> str:
    text = escape_markdown(run.text)
    # Markers cannot wrap whitespace-only text.
    if not text.strip():
        return text
    if run.bold:
        text = f"**{text}**"
    if run.italic:
        text = f"*{text}*"
    if run.underline:
        text = f"<u>{text}</u>"
    return text


def escape_markdown(text: str) -> str:
    """Backslash-escape characters that Markdown would read as formatting."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def _code_fence(raw: str) -> str:
    longest = max((len(run) for run in _BACKTICK_RUNS.findall(raw)), default=0)
    return "`" * max(3, longest + 1)

"""Serialize rendered rich-text views to an HTML fragment."""

from __future__ import annotations

from typing import Any

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML output (pip install beautifulsoup4)."
    ) from exc

from lensfront.richtext import detect_shape, render
from lensfront.schemas import (
    BlockView,
    ContentShape,
    FallbackView,
    HeadingView,
    ListView,
    ParagraphView,
    RenderResult,
    TextRunView,
)

WRAPPER_CLASS = "rich-text"
RAW_CLASS = "rich-text-raw"
ERROR_CLASS = "rich-text-error"


def content_to_html(content: Any) -> str:
    """Render a rich-text field value to an HTML fragment.

    Plain strings become a bare ``<p>``; structured documents are wrapped in
    ``<div class="rich-text">``. Empty content gives an empty string.
    """
    result = render(content)
    wrap = detect_shape(content) is not ContentShape.TEXT
    return result_to_html(result, wrap=wrap)


def result_to_html(result: RenderResult, *, wrap: bool = True) -> str:
    if result.is_empty:
        return ""
    soup = BeautifulSoup("", "html.parser")
    tags = [_build_block(soup, block) for block in result.blocks]
    if not wrap:
        return "".join(str(tag) for tag in tags)
    container = soup.new_tag("div", attrs={"class": WRAPPER_CLASS})
    for tag in tags:
        container.append(tag)
    return str(container)


def _build_block(soup: BeautifulSoup, block: BlockView) -> Tag:
    if isinstance(block, TextRunView):
        span = soup.new_tag("span")
        span.append(_build_run(soup, block))
        return span

    if isinstance(block, ParagraphView):
        paragraph = soup.new_tag("p")
        for run in block.children:
            paragraph.append(_build_run(soup, run))
        return paragraph

    if isinstance(block, HeadingView):
        heading = soup.new_tag(f"h{block.level}")
        heading.string = block.text
        return heading

    if isinstance(block, ListView):
        list_tag = soup.new_tag("ol" if block.ordered else "ul")
        for item in block.items:
            li = soup.new_tag("li")
            for run in item.children:
                li.append(_build_run(soup, run))
            list_tag.append(li)
        return list_tag

    if isinstance(block, FallbackView):
        css_class = ERROR_CLASS if block.reason == "error" else RAW_CLASS
        div = soup.new_tag("div", attrs={"class": css_class})
        div.string = block.raw
        return div

    raise TypeError(f"Unsupported view node: {type(block).__name__}")


def _build_run(soup: BeautifulSoup, run: TextRunView) -> Any:
    node: Any = soup.new_string(run.text)
    for name, active in (("strong", run.bold), ("em", run.italic), ("u", run.underline)):
        if not active:
            continue
        wrapper = soup.new_tag(name)
        wrapper.append(node)
        node = wrapper
    return node

"""URL slug generation for CMS records."""

from __future__ import annotations

import re
from typing import Any, MutableMapping

_WHITESPACE = re.compile(r"\s+")
_NON_WORD = re.compile(r"[^\w\-]+", re.ASCII)
_DASH_RUNS = re.compile(r"-{2,}")


def slugify(text: str) -> str:
    """Lowercase, dash-separated, word characters only."""
    slug = _WHITESPACE.sub("-", text.lower())
    slug = _NON_WORD.sub("", slug)
    slug = _DASH_RUNS.sub("-", slug)
    return slug.strip("-")


def apply_slug(
    data: MutableMapping[str, Any] | None, *, source: str = "title", target: str = "slug"
) -> MutableMapping[str, Any] | None:
    """Keep ``data[target]`` in sync with the slug of ``data[source]``.

    Fills a missing target and regenerates one that no longer matches its
    source. Mutates and returns ``data``.
    """
    if not data:
        return data
    source_value = data.get(source)
    if not source_value:
        return data
    expected = slugify(str(source_value))
    if data.get(target) != expected:
        data[target] = expected
    return data

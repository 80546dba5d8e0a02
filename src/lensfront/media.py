"""Resolve CMS media references to browser-usable URLs."""

from __future__ import annotations

from typing import Any

from lensfront.config import LENSFRONT_CMS_URL, LENSFRONT_PLACEHOLDER_IMAGE
from lensfront.schemas import MediaRef


def media_url_of(media: Any) -> str | None:
    """Extract the URL from an upload field (populated record, mapping or URL)."""
    if isinstance(media, MediaRef):
        return media.url
    if isinstance(media, dict):
        url = media.get("url")
        return url if isinstance(url, str) else None
    if isinstance(media, str) and media.startswith(("/", "http")):
        return media
    return None


def resolve_media_url(
    media: Any,
    base_url: str = LENSFRONT_CMS_URL,
    placeholder: str = LENSFRONT_PLACEHOLDER_IMAGE,
) -> str:
    """Absolute URL for a media field, or the placeholder image when missing."""
    url = media_url_of(media)
    if not url:
        return placeholder
    if url.startswith("http"):
        return url
    return f"{base_url.rstrip('/')}{url}"

"""lensfront: rich-text rendering and storefront content for an eyewear catalog."""

from lensfront.cms_client import CMSClient
from lensfront.exceptions import (
    ContentNotFoundError,
    ContentValidationError,
    FetchError,
    LensfrontError,
    RateLimitError,
    UnrenderableContent,
)
from lensfront.html_output import content_to_html
from lensfront.markdown import content_to_markdown
from lensfront.pricing import format_price
from lensfront.richtext import decode_marks, detect_shape, render
from lensfront.schemas import Marks, RenderResult
from lensfront.slugs import slugify
from lensfront.whatsapp import whatsapp_url

__all__ = [
    "CMSClient",
    "ContentNotFoundError",
    "ContentValidationError",
    "FetchError",
    "LensfrontError",
    "Marks",
    "RateLimitError",
    "RenderResult",
    "UnrenderableContent",
    "content_to_html",
    "content_to_markdown",
    "decode_marks",
    "detect_shape",
    "format_price",
    "render",
    "slugify",
    "whatsapp_url",
]

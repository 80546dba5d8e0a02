"""Pydantic models for API requests and responses."""

from __future__ import annotations

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, Field

from lensfront.schemas import BlockView


class RenderFormat(str, Enum):
    """Output formats supported by the render endpoint."""

    HTML = "html"
    MARKDOWN = "markdown"
    VIEWS = "views"


class RenderRequest(BaseModel):
    """Request model for the /api/render endpoint.

    Attributes
    ----------
    content : Any
        Rich-text field value: null, a string, or a document tree.
    format : RenderFormat
        Output format.

    """

    content: Any = Field(default=None, description="Rich-text field value")
    format: RenderFormat = Field(default=RenderFormat.HTML, description="Output format")


class RenderResponse(BaseModel):
    """Response model for the /api/render endpoint.

    Attributes
    ----------
    format : RenderFormat
        Format of ``output``.
    output : str | list[BlockView]
        Serialized output, or the view nodes for ``views``.
    has_fallback : bool
        Whether any part of the content could not be interpreted.

    """

    format: RenderFormat
    output: Union[str, list[BlockView]]
    has_fallback: bool = False


class ErrorResponse(BaseModel):
    """Error body returned by every endpoint."""

    error: str = Field(..., description="Error message")

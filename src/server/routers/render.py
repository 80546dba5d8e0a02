"""Rich-text render endpoint."""

from fastapi import APIRouter

from lensfront.html_output import content_to_html
from lensfront.markdown import result_to_markdown
from lensfront.richtext import render
from server.models import RenderFormat, RenderRequest, RenderResponse

router = APIRouter()


@router.post("/api/render", response_model=RenderResponse)
async def api_render(render_request: RenderRequest) -> RenderResponse:
    """Render a rich-text field value.

    **Never fails on malformed content**: uninterpretable nodes come back as
    fallback output and ``has_fallback`` is set.

    **Parameters**

    - **render_request** (`RenderRequest`): content plus the desired output format

    **Returns**

    - **RenderResponse**: rendered HTML, Markdown, or view nodes
    """
    result = render(render_request.content)
    if render_request.format is RenderFormat.VIEWS:
        output = result.blocks
    elif render_request.format is RenderFormat.MARKDOWN:
        output = result_to_markdown(result)
    else:
        output = content_to_html(render_request.content)
    return RenderResponse(format=render_request.format, output=output, has_fallback=result.has_fallback)

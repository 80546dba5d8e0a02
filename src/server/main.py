"""FastAPI application serving storefront content."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from lensfront.exceptions import ContentNotFoundError, ContentValidationError, FetchError
from lensfront.http_utils import build_client
from lensfront.utils.logging_config import get_logger
from server.routers import content, render
from server.server_config import APP_DESCRIPTION, APP_TITLE

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    async with build_client() as http_client:
        app.state.http_client = http_client
        yield


app = FastAPI(title=APP_TITLE, description=APP_DESCRIPTION, lifespan=lifespan)
app.include_router(render.router)
app.include_router(content.router)


@app.exception_handler(ContentNotFoundError)
async def not_found_handler(request: Request, exc: ContentNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)})


@app.exception_handler(ContentValidationError)
async def invalid_content_handler(request: Request, exc: ContentValidationError) -> JSONResponse:
    logger.warning("CMS returned invalid content", extra={"path": request.url.path, "error": str(exc)})
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"error": "Invalid content from CMS"})


@app.exception_handler(FetchError)
async def fetch_error_handler(request: Request, exc: FetchError) -> JSONResponse:
    logger.error("CMS fetch failed", extra={"path": request.url.path, "error": str(exc)})
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"error": "Error fetching content"})


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}

"""HTTP utilities for fetching CMS JSON with retry logic and connection pooling."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Final, Mapping

import httpx

from lensfront.config import (
    LENSFRONT_FETCH_BACKOFF_S,
    LENSFRONT_FETCH_MAX_RETRIES,
    LENSFRONT_FETCH_TIMEOUT_S,
    LENSFRONT_USER_AGENT,
)
from lensfront.exceptions import FetchError, RateLimitError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


def build_client(**kwargs: Any) -> httpx.AsyncClient:
    """Create an AsyncClient configured with lensfront defaults."""
    kwargs.setdefault("timeout", httpx.Timeout(LENSFRONT_FETCH_TIMEOUT_S))
    kwargs.setdefault(
        "headers",
        {"User-Agent": LENSFRONT_USER_AGENT, "Accept": "application/json"},
    )
    kwargs.setdefault("follow_redirects", True)
    kwargs.setdefault("max_redirects", _MAX_REDIRECTS)
    return httpx.AsyncClient(**kwargs)


async def fetch_json_with_retries(
    url: str,
    *,
    params: Mapping[str, Any] | None = None,
    client: httpx.AsyncClient | None = None,
    on_404: type[Exception] | None = None,
    on_404_message: str | None = None,
) -> Any:
    """Fetch a JSON document from a URL, retrying transient failures.

    Args:
        url: The URL to fetch.
        params: Optional query parameters.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        on_404: Custom exception class to raise on 404. Defaults to FetchError.
        on_404_message: Custom error message for 404 responses.

    Returns:
        The decoded JSON body.

    Raises:
        RateLimitError: If the server keeps answering 429.
        FetchError (or custom on_404 exception): If the fetch fails after all
            retries, returns 404, or the body is not valid JSON.
    """
    last_exc: Exception | None = None
    not_found_exc_class = on_404 or FetchError

    async def do_fetch(http_client: httpx.AsyncClient) -> Any:
        nonlocal last_exc

        for attempt in range(LENSFRONT_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.get(url, params=params)

                if response.status_code == 404:
                    message = on_404_message or f"Resource not found at {url}"
                    raise not_found_exc_class(message)

                if response.status_code == 429:
                    last_exc = RateLimitError(f"HTTP 429 from {url}")
                elif response.status_code in RETRY_STATUS_CODES:
                    last_exc = FetchError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    try:
                        return response.json()
                    except ValueError as exc:
                        raise FetchError(f"Invalid JSON from {url}: {exc}") from exc
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                last_exc = exc
            except not_found_exc_class:
                raise

            if attempt < LENSFRONT_FETCH_MAX_RETRIES:
                backoff = LENSFRONT_FETCH_BACKOFF_S * (2**attempt)
                logger.debug("Retrying %s in %.2fs (%s)", url, backoff, last_exc)
                await asyncio.sleep(backoff)

        if isinstance(last_exc, RateLimitError):
            raise last_exc
        raise FetchError(f"Failed to fetch {url}: {last_exc}")

    if client is not None:
        return await do_fetch(client)

    async with build_client() as new_client:
        return await do_fetch(new_client)

"""Read-only client for the CMS REST API."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx
from pydantic import ValidationError

from lensfront.config import LENSFRONT_CMS_URL
from lensfront.exceptions import ContentNotFoundError, ContentValidationError
from lensfront.http_utils import fetch_json_with_retries
from lensfront.schemas import PaginatedDocs, Product

logger = logging.getLogger(__name__)

PRODUCTS_COLLECTION = "products"


def flatten_where(where: Mapping[str, Any], prefix: str = "where") -> dict[str, Any]:
    """Flatten a nested ``where`` query into bracketed query parameters.

    ``{"slug": {"equals": "x"}}`` becomes ``{"where[slug][equals]": "x"}``;
    lists expand into indexed keys.
    """
    params: dict[str, Any] = {}
    for key, value in where.items():
        name = f"{prefix}[{key}]"
        if isinstance(value, Mapping):
            params.update(flatten_where(value, name))
        elif isinstance(value, (list, tuple)):
            for index, item in enumerate(value):
                if isinstance(item, Mapping):
                    params.update(flatten_where(item, f"{name}[{index}]"))
                else:
                    params[f"{name}[{index}]"] = item
        else:
            params[name] = value
    return params


class CMSClient:
    """Fetch storefront collections from the CMS.

    Args:
        base_url: CMS origin; ``/api/<collection>`` is appended.
        client: Optional shared httpx.AsyncClient for connection pooling.
    """

    def __init__(self, base_url: str = LENSFRONT_CMS_URL, *, client: httpx.AsyncClient | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = client

    def collection_url(self, collection: str) -> str:
        return f"{self.base_url}/api/{collection}"

    async def find(
        self,
        collection: str,
        *,
        limit: int = 10,
        page: int = 1,
        depth: int = 1,
        where: Mapping[str, Any] | None = None,
    ) -> PaginatedDocs:
        """List records of a collection.

        Raises:
            ContentNotFoundError: If the collection does not exist.
            ContentValidationError: If the response is not a paginated listing.
            FetchError: If the request fails after retries.
        """
        params: dict[str, Any] = {"limit": limit, "page": page, "depth": depth}
        if where:
            params.update(flatten_where(where))

        logger.debug("Fetching %s with %s", collection, params)
        data = await fetch_json_with_retries(
            self.collection_url(collection),
            params=params,
            client=self._client,
            on_404=ContentNotFoundError,
            on_404_message=f"Collection {collection!r} not found",
        )
        try:
            return PaginatedDocs.model_validate(data)
        except ValidationError as exc:
            raise ContentValidationError(f"Unexpected listing for {collection!r}: {exc}") from exc

    async def find_first(self, collection: str, *, depth: int = 1) -> dict[str, Any] | None:
        """Return the first record of a single-record collection, if any."""
        listing = await self.find(collection, limit=1, depth=depth)
        if not listing.docs:
            logger.info("Collection %s has no records", collection)
            return None
        return listing.docs[0]

    async def get_product_by_slug(self, slug: str) -> Product | None:
        """Look up a product by slug.

        The products endpoint may answer with a paginated listing, a bare list
        or a single object. Records whose slug does not match are ignored.
        """
        params = {"limit": 1, "depth": 1, **flatten_where({"slug": {"equals": slug}})}
        try:
            data = await fetch_json_with_retries(
                self.collection_url(PRODUCTS_COLLECTION),
                params=params,
                client=self._client,
                on_404=ContentNotFoundError,
            )
        except ContentNotFoundError:
            logger.debug("Products endpoint returned 404 for slug %s", slug)
            return None

        record = _first_record(data)
        if record is None:
            logger.info("No product found for slug %s", slug)
            return None
        if record.get("slug") != slug:
            logger.info("Product slug mismatch: wanted %s, got %s", slug, record.get("slug"))
            return None

        try:
            return Product.model_validate(record)
        except ValidationError as exc:
            raise ContentValidationError(f"Invalid product {slug!r}: {exc}") from exc


def _first_record(data: Any) -> dict[str, Any] | None:
    if isinstance(data, list):
        first = data[0] if data else None
    elif isinstance(data, dict) and isinstance(data.get("docs"), list):
        first = data["docs"][0] if data["docs"] else None
    elif isinstance(data, dict):
        first = data
    else:
        first = None
    return first if isinstance(first, dict) else None

"""Storefront content endpoints backed by the CMS."""

from typing import Any

from fastapi import APIRouter, Depends, Query, Request

from lensfront.cms_client import CMSClient
from lensfront.config import LENSFRONT_CMS_URL
from lensfront.schemas import ProductCatalog, ProductPage
from lensfront.storefront import load_product_catalog, load_product_page, load_section
from server.models import ErrorResponse

router = APIRouter()

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Content not found"},
    502: {"model": ErrorResponse, "description": "CMS unavailable or returned invalid content"},
}


def get_cms_client(request: Request) -> CMSClient:
    """Client sharing the application's pooled HTTP connection."""
    http_client = getattr(request.app.state, "http_client", None)
    return CMSClient(LENSFRONT_CMS_URL, client=http_client)


@router.get("/api/products", response_model=ProductCatalog, responses=_ERROR_RESPONSES)
async def list_products(
    limit: int = Query(default=10, ge=1, le=100),
    page: int = Query(default=1, ge=1),
    cms: CMSClient = Depends(get_cms_client),
) -> ProductCatalog:
    """One page of product cards with formatted prices and main images."""
    return await load_product_catalog(cms, limit=limit, page=page)


@router.get("/api/products/{slug}", response_model=ProductPage, responses=_ERROR_RESPONSES)
async def get_product_page(slug: str, cms: CMSClient = Depends(get_cms_client)) -> ProductPage:
    """Product detail payload with formatted price, description HTML and buy link."""
    return await load_product_page(cms, slug)


@router.get("/api/content/{section}", responses=_ERROR_RESPONSES)
async def get_section(section: str, cms: CMSClient = Depends(get_cms_client)) -> dict[str, Any]:
    """First published record of ``header``, ``hero``, ``how-to`` or ``site-settings``."""
    content = await load_section(cms, section)
    return content.model_dump(by_alias=True, mode="json")

"""Tests for the FastAPI application."""

from __future__ import annotations

from typing import Any, Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from lensfront.cms_client import CMSClient
from lensfront.exceptions import FetchError
from lensfront.schemas import PaginatedDocs, Product
from server.main import app
from server.routers.content import get_cms_client


@pytest.fixture
def cms() -> MagicMock:
    return MagicMock(spec=CMSClient)


@pytest.fixture
def client(cms: MagicMock) -> Iterator[TestClient]:
    app.dependency_overrides[get_cms_client] = lambda: cms
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:
    """Tests for /health."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestRenderEndpoint:
    """Tests for POST /api/render."""

    def test_html_is_default(self, client: TestClient, rooted_document: dict[str, Any]) -> None:
        response = client.post("/api/render", json={"content": rooted_document})
        assert response.status_code == 200
        body = response.json()
        assert body["format"] == "html"
        assert body["output"].startswith('<div class="rich-text"><h2>Frame care</h2>')
        assert body["has_fallback"] is False

    def test_markdown(self, client: TestClient) -> None:
        response = client.post("/api/render", json={"content": "Halo", "format": "markdown"})
        assert response.json()["output"] == "Halo"

    def test_views(self, client: TestClient) -> None:
        content = {"root": {"children": [{"type": "h2", "children": [{"text": "Title"}]}]}}
        response = client.post("/api/render", json={"content": content, "format": "views"})
        assert response.json()["output"] == [{"kind": "heading", "level": 2, "text": "Title"}]

    def test_null_content(self, client: TestClient) -> None:
        response = client.post("/api/render", json={"content": None})
        assert response.json()["output"] == ""

    def test_malformed_content_is_not_an_error(self, client: TestClient) -> None:
        response = client.post("/api/render", json={"content": {"foo": "bar"}, "format": "views"})
        assert response.status_code == 200
        body = response.json()
        assert body["has_fallback"] is True
        assert body["output"] == [{"kind": "fallback", "reason": "unrecognized", "raw": '{"foo":"bar"}'}]

    def test_unknown_format_rejected(self, client: TestClient) -> None:
        response = client.post("/api/render", json={"content": "x", "format": "pdf"})
        assert response.status_code == 422


class TestProductCatalogEndpoint:
    """Tests for GET /api/products."""

    def test_lists_products(self, client: TestClient, cms: MagicMock, product_record: dict[str, Any]) -> None:
        cms.find = AsyncMock(
            return_value=PaginatedDocs.model_validate({"docs": [product_record], "totalDocs": 1, "page": 1, "limit": 10})
        )
        response = client.get("/api/products")

        assert response.status_code == 200
        body = response.json()
        assert body["total_docs"] == 1
        assert body["items"][0]["slug"] == "aviator-classic"
        assert body["items"][0]["discount_percent"] == 20
        cms.find.assert_awaited_once_with("products", limit=10, page=1, depth=1)

    def test_passes_paging(self, client: TestClient, cms: MagicMock) -> None:
        cms.find = AsyncMock(return_value=PaginatedDocs())
        response = client.get("/api/products", params={"limit": 4, "page": 3})

        assert response.status_code == 200
        cms.find.assert_awaited_once_with("products", limit=4, page=3, depth=1)

    @pytest.mark.parametrize("params", [{"limit": 0}, {"page": 0}, {"limit": "ten"}])
    def test_rejects_bad_paging(self, client: TestClient, params: dict[str, Any]) -> None:
        assert client.get("/api/products", params=params).status_code == 422

    def test_cms_failure_is_502(self, client: TestClient, cms: MagicMock) -> None:
        cms.find = AsyncMock(side_effect=FetchError("down"))
        assert client.get("/api/products").status_code == 502


class TestProductEndpoint:
    """Tests for GET /api/products/{slug}."""

    def test_product_page(self, client: TestClient, cms: MagicMock, product_record: dict[str, Any]) -> None:
        cms.get_product_by_slug = AsyncMock(return_value=Product.model_validate(product_record))
        cms.find_first = AsyncMock(return_value={"contactInfo": {"whatsapp": "62812"}})

        response = client.get("/api/products/aviator-classic")

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Aviator Classic"
        assert body["discount_percent"] == 20
        assert body["whatsapp_url"].startswith("https://wa.me/62812?text=")
        cms.get_product_by_slug.assert_awaited_once_with("aviator-classic")

    def test_missing_product_is_404(self, client: TestClient, cms: MagicMock) -> None:
        cms.get_product_by_slug = AsyncMock(return_value=None)
        response = client.get("/api/products/nope")
        assert response.status_code == 404
        assert "nope" in response.json()["error"]

    def test_cms_failure_is_502(self, client: TestClient, cms: MagicMock) -> None:
        cms.get_product_by_slug = AsyncMock(side_effect=FetchError("down"))
        response = client.get("/api/products/aviator-classic")
        assert response.status_code == 502
        assert response.json() == {"error": "Error fetching content"}


class TestContentEndpoint:
    """Tests for GET /api/content/{section}."""

    def test_header(self, client: TestClient, cms: MagicMock) -> None:
        cms.find_first = AsyncMock(
            return_value={"title": "Optik Jaya", "navLinks": [{"label": "Produk", "url": "/products"}]}
        )
        response = client.get("/api/content/header")

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Optik Jaya"
        assert body["navLinks"] == [{"label": "Produk", "url": "/products", "isExternal": False}]

    def test_unknown_section_is_404(self, client: TestClient) -> None:
        assert client.get("/api/content/cart").status_code == 404

    def test_invalid_content_is_502(self, client: TestClient, cms: MagicMock) -> None:
        cms.find_first = AsyncMock(return_value={"steps": [{"order": 1}]})
        response = client.get("/api/content/how-to")
        assert response.status_code == 502
        assert response.json() == {"error": "Invalid content from CMS"}

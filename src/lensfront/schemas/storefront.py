"""Page payload models assembled from CMS content."""

from __future__ import annotations

from pydantic import BaseModel, Field

from lensfront.schemas.content import Specification


class ProductImage(BaseModel):
    url: str
    alt: str | None = None
    is_main: bool = False


class ProductPage(BaseModel):
    """Everything the product detail page displays."""

    title: str
    slug: str | None = None
    brand: str | None = None
    category: str | None = None
    price: str
    original_price: str | None = None
    discount_percent: int | None = None
    description_html: str = ""
    images: list[ProductImage] = Field(default_factory=list)
    specifications: list[Specification] = Field(default_factory=list)
    stock: int | None = None
    whatsapp_url: str = "#"


class ProductCard(BaseModel):
    """Summary shown in catalog grids."""

    title: str
    slug: str | None = None
    brand: str | None = None
    category: str | None = None
    price: str
    original_price: str | None = None
    discount_percent: int | None = None
    image_url: str
    image_alt: str | None = None
    featured: bool = False


class ProductCatalog(BaseModel):
    """One page of the product catalog."""

    items: list[ProductCard] = Field(default_factory=list)
    total_docs: int = 0
    page: int = 1
    limit: int = 10
    total_pages: int | None = None
    has_next_page: bool = False
    has_prev_page: bool = False

"""CMS content models for storefront collections.

Field names follow the CMS's camelCase JSON through aliases; unknown fields
are kept so newer CMS schemas do not break validation.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field


class _CMSModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class MediaRef(_CMSModel):
    """An upload relation populated with its media record."""

    id: Union[int, str, None] = None
    url: str | None = None
    alt: str | None = None
    filename: str | None = None


# Unpopulated relations arrive as bare ids.
MediaField = Union[MediaRef, int, str, None]


class NavLink(_CMSModel):
    label: str
    url: str
    is_external: bool = Field(default=False, alias="isExternal")


class HeaderContent(_CMSModel):
    title: str | None = None
    logo: MediaField = None
    nav_links: list[NavLink] = Field(default_factory=list, alias="navLinks")


class HeroSlide(_CMSModel):
    title: str = ""
    image: MediaField = None
    alt: str | None = None
    description: str | None = None


class HeroContent(_CMSModel):
    title: str | None = None
    slides: list[HeroSlide] = Field(default_factory=list)
    auto_play_speed: int | None = Field(default=None, alias="autoPlaySpeed")


class HowToStep(_CMSModel):
    id: Union[int, str, None] = None
    title: str
    explanation: str = ""
    icon: MediaField = None
    order: int | None = None


class HowToContent(_CMSModel):
    title: str = "How To Section"
    subtitle: str | None = None
    steps: list[HowToStep] = Field(default_factory=list)
    background_color: str | None = Field(default="bg-white", alias="backgroundColor")


class ContactInfo(_CMSModel):
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    whatsapp: str | None = None


class SocialLink(_CMSModel):
    platform: str
    url: str


class SiteSettings(_CMSModel):
    company_name: str | None = Field(default=None, alias="companyName")
    contact_info: ContactInfo | None = Field(default_factory=ContactInfo, alias="contactInfo")
    social_media: list[SocialLink] = Field(default_factory=list, alias="socialMedia")
    footer_text: Any = Field(default=None, alias="footerText")
    copyright: str | None = None


class Specification(_CMSModel):
    name: str
    value: str


class GalleryImage(_CMSModel):
    image: MediaField = None
    alt: str | None = None
    is_feature: bool = Field(default=False, alias="isFeature")


class Product(_CMSModel):
    """A catalog product. ``stock`` is a display field only."""

    id: Union[int, str, None] = None
    product_id: str | None = Field(default=None, alias="productId")
    title: str
    slug: str | None = None
    brand: str | None = None
    price: float | None = None
    discounted_price: float | None = Field(default=None, alias="discountedPrice")
    description: Any = None
    category: str | None = None
    main_image: MediaField = Field(default=None, alias="mainImage")
    gallery: list[GalleryImage] = Field(default_factory=list)
    specifications: list[Specification] = Field(default_factory=list)
    featured: bool = False
    stock: int | None = None
    reference: str | None = None


class PaginatedDocs(_CMSModel):
    """Paginated ``find`` response from the CMS REST API."""

    docs: list[dict[str, Any]] = Field(default_factory=list)
    total_docs: int = Field(default=0, alias="totalDocs")
    limit: int | None = None
    total_pages: int | None = Field(default=None, alias="totalPages")
    page: int | None = None
    has_prev_page: bool = Field(default=False, alias="hasPrevPage")
    has_next_page: bool = Field(default=False, alias="hasNextPage")
    prev_page: int | None = Field(default=None, alias="prevPage")
    next_page: int | None = Field(default=None, alias="nextPage")

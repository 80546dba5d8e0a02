"""Shared schemas for lensfront."""

from lensfront.schemas.content import (
    ContactInfo,
    GalleryImage,
    HeaderContent,
    HeroContent,
    HeroSlide,
    HowToContent,
    HowToStep,
    MediaRef,
    NavLink,
    PaginatedDocs,
    Product,
    SiteSettings,
    Specification,
)
from lensfront.schemas.richtext import ContentShape, Marks
from lensfront.schemas.storefront import ProductCard, ProductCatalog, ProductImage, ProductPage
from lensfront.schemas.views import (
    BlockView,
    FallbackView,
    HeadingView,
    ListItemView,
    ListView,
    ParagraphView,
    RenderResult,
    TextRunView,
)

__all__ = [
    "BlockView",
    "ContactInfo",
    "ContentShape",
    "FallbackView",
    "GalleryImage",
    "HeaderContent",
    "HeadingView",
    "HeroContent",
    "HeroSlide",
    "HowToContent",
    "HowToStep",
    "ListItemView",
    "ListView",
    "Marks",
    "MediaRef",
    "NavLink",
    "PaginatedDocs",
    "ParagraphView",
    "Product",
    "ProductCard",
    "ProductCatalog",
    "ProductImage",
    "ProductPage",
    "RenderResult",
    "SiteSettings",
    "Specification",
    "TextRunView",
]

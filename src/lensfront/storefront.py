"""Assemble storefront page payloads from CMS content."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any

from pydantic import BaseModel, ValidationError

from lensfront.cms_client import PRODUCTS_COLLECTION, CMSClient
from lensfront.config import LENSFRONT_CMS_URL, LENSFRONT_CURRENCY
from lensfront.exceptions import ContentNotFoundError, ContentValidationError, FetchError
from lensfront.html_output import content_to_html
from lensfront.media import media_url_of, resolve_media_url
from lensfront.pricing import discount_percent, effective_price, format_price
from lensfront.schemas import (
    HeaderContent,
    HeroContent,
    HowToContent,
    HowToStep,
    Product,
    ProductCard,
    ProductCatalog,
    ProductImage,
    ProductPage,
    SiteSettings,
)
from lensfront.whatsapp import product_inquiry_message, whatsapp_url

logger = logging.getLogger(__name__)

SITE_SETTINGS_COLLECTION = "site-settings"

SECTION_MODELS: dict[str, type[BaseModel]] = {
    "header": HeaderContent,
    "hero": HeroContent,
    "how-to": HowToContent,
    SITE_SETTINGS_COLLECTION: SiteSettings,
}


@dataclass
class PageOptions:
    """Options for building page payloads.

    Attributes:
        base_url: Origin prepended to relative media URLs.
        currency: Currency code used for price display.
    """

    base_url: str = LENSFRONT_CMS_URL
    currency: str = LENSFRONT_CURRENCY


def _compare_steps(a: HowToStep, b: HowToStep) -> int:
    if a.order is not None and b.order is not None:
        return a.order - b.order
    return 0


def sort_steps(steps: list[HowToStep]) -> list[HowToStep]:
    """Order steps by ``order`` where both sides define it; otherwise keep input order."""
    return sorted(steps, key=cmp_to_key(_compare_steps))


def build_product_page(
    product: Product,
    *,
    whatsapp_number: str | None = None,
    options: PageOptions | None = None,
) -> ProductPage:
    """Build the product detail payload.

    The displayed price is the discounted price when a valid discount exists;
    the original price is kept alongside it for strike-through display.
    """
    opts = options or PageOptions()
    discount = discount_percent(product.price, product.discounted_price)
    price = format_price(effective_price(product.price, product.discounted_price), opts.currency)

    images: list[ProductImage] = []
    if media_url_of(product.main_image):
        images.append(
            ProductImage(
                url=resolve_media_url(product.main_image, opts.base_url),
                alt=_media_alt(product.main_image) or product.title,
                is_main=True,
            )
        )
    for item in product.gallery:
        if not media_url_of(item.image):
            continue
        images.append(
            ProductImage(
                url=resolve_media_url(item.image, opts.base_url),
                alt=item.alt or _media_alt(item.image),
            )
        )
    if not images:
        images.append(ProductImage(url=resolve_media_url(None, opts.base_url), alt=product.title, is_main=True))

    return ProductPage(
        title=product.title,
        slug=product.slug,
        brand=product.brand,
        category=product.category,
        price=price,
        original_price=format_price(product.price, opts.currency) if discount is not None else None,
        discount_percent=discount,
        description_html=content_to_html(product.description),
        images=images,
        specifications=product.specifications,
        stock=product.stock,
        whatsapp_url=whatsapp_url(whatsapp_number, product_inquiry_message(product.title, price)),
    )


def build_product_card(product: Product, *, options: PageOptions | None = None) -> ProductCard:
    """Catalog summary: formatted price, discount and the main image."""
    opts = options or PageOptions()
    discount = discount_percent(product.price, product.discounted_price)
    return ProductCard(
        title=product.title,
        slug=product.slug,
        brand=product.brand,
        category=product.category,
        price=format_price(effective_price(product.price, product.discounted_price), opts.currency),
        original_price=format_price(product.price, opts.currency) if discount is not None else None,
        discount_percent=discount,
        image_url=resolve_media_url(product.main_image, opts.base_url),
        image_alt=_media_alt(product.main_image) or product.title,
        featured=product.featured,
    )


async def load_product_catalog(
    client: CMSClient,
    *,
    limit: int = 10,
    page: int = 1,
    options: PageOptions | None = None,
) -> ProductCatalog:
    """Fetch one page of products as catalog cards.

    Records that fail validation are skipped so one broken product does not
    empty the grid.
    """
    listing = await client.find(PRODUCTS_COLLECTION, limit=limit, page=page, depth=1)
    cards: list[ProductCard] = []
    for record in listing.docs:
        try:
            product = _validate(Product, record, PRODUCTS_COLLECTION)
        except ContentValidationError as exc:
            logger.warning("Skipping product %s: %s", record.get("slug") or record.get("id"), exc)
            continue
        cards.append(build_product_card(product, options=options))

    return ProductCatalog(
        items=cards,
        total_docs=listing.total_docs,
        page=listing.page or page,
        limit=listing.limit or limit,
        total_pages=listing.total_pages,
        has_next_page=listing.has_next_page,
        has_prev_page=listing.has_prev_page,
    )


async def load_product_page(
    client: CMSClient,
    slug: str,
    *,
    options: PageOptions | None = None,
) -> ProductPage:
    """Fetch a product and the site's WhatsApp number, then build its page.

    Raises:
        ContentNotFoundError: If no product has this slug.
    """
    product = await client.get_product_by_slug(slug)
    if product is None:
        raise ContentNotFoundError(f"Product {slug!r} not found")

    settings = await load_site_settings(client)
    number = settings.contact_info.whatsapp if settings and settings.contact_info else None
    return build_product_page(product, whatsapp_number=number, options=options)


async def load_site_settings(client: CMSClient) -> SiteSettings | None:
    """Site settings are optional; any failure to load them yields ``None``."""
    try:
        record = await client.find_first(SITE_SETTINGS_COLLECTION)
        if record is None:
            return None
        return _validate(SiteSettings, record, SITE_SETTINGS_COLLECTION)
    except ContentNotFoundError:
        logger.info("Site settings collection is not available")
    except (FetchError, ContentValidationError) as exc:
        logger.warning("Could not load site settings: %s", exc)
    return None


async def load_section(client: CMSClient, section: str) -> BaseModel:
    """Fetch the single record behind a storefront section.

    Raises:
        ContentNotFoundError: For unknown sections or empty collections.
    """
    model = SECTION_MODELS.get(section)
    if model is None:
        raise ContentNotFoundError(f"Unknown section {section!r}")

    record = await client.find_first(section)
    if record is None:
        raise ContentNotFoundError(f"No {section} content published")

    content = _validate(model, record, section)
    if isinstance(content, HowToContent):
        content.steps = sort_steps(content.steps)
    return content


def _validate(model: type[BaseModel], record: dict[str, Any], name: str) -> Any:
    try:
        return model.model_validate(record)
    except ValidationError as exc:
        raise ContentValidationError(f"Invalid {name} content: {exc}") from exc


def _media_alt(media: Any) -> str | None:
    if isinstance(media, dict):
        alt = media.get("alt")
        return alt if isinstance(alt, str) else None
    return getattr(media, "alt", None)

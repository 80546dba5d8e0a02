"""WhatsApp click-to-chat links."""

from __future__ import annotations

import re
from urllib.parse import quote

WHATSAPP_BASE_URL = "https://wa.me"
PRODUCT_INQUIRY_TEMPLATE = "Halo, saya tertarik dengan produk: {title} ({price})"

_NON_DIGITS = re.compile(r"\D")


def normalize_number(number: str | None) -> str:
    return _NON_DIGITS.sub("", number or "")


def whatsapp_url(number: str | None, message: str | None = None) -> str:
    """Build a ``wa.me`` link, or ``"#"`` when no usable number is configured."""
    digits = normalize_number(number)
    if not digits:
        return "#"
    url = f"{WHATSAPP_BASE_URL}/{digits}"
    if message:
        url += "?text=" + quote(message, safe="")
    return url


def product_inquiry_message(title: str, formatted_price: str) -> str:
    return PRODUCT_INQUIRY_TEMPLATE.format(title=title, price=formatted_price)

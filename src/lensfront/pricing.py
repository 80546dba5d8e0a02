"""Price display helpers for the Indonesian storefront."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from lensfront.config import LENSFRONT_CURRENCY

NBSP = "\u00a0"

_CURRENCY_SYMBOLS = {"IDR": "Rp"}


def format_price(amount: float | int | None, currency: str = LENSFRONT_CURRENCY) -> str:
    """Format an amount the way ``id-ID`` currency formatting does.

    Whole units only, ``.`` as the thousands separator and the currency
    symbol separated by a non-breaking space, e.g. ``"Rp 1.250.000"``.
    ``None`` formats as zero.
    """
    value = Decimal(str(amount or 0)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    grouped = f"{abs(int(value)):,}".replace(",", ".")
    symbol = _CURRENCY_SYMBOLS.get(currency.upper(), currency.upper())
    return f"{sign}{symbol}{NBSP}{grouped}"


def has_discount(price: float | None, discounted_price: float | None) -> bool:
    return bool(price) and discounted_price is not None and 0 <= discounted_price < price


def effective_price(price: float | None, discounted_price: float | None) -> float:
    """Price the customer pays: the discounted price when it is a real discount."""
    if has_discount(price, discounted_price):
        return discounted_price
    return price or 0


def discount_percent(price: float | None, discounted_price: float | None) -> int | None:
    """Whole percentage off, or ``None`` when there is no valid discount."""
    if not has_discount(price, discounted_price):
        return None
    ratio = (Decimal(str(price)) - Decimal(str(discounted_price))) / Decimal(str(price))
    return int((ratio * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

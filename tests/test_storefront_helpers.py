"""Tests for price, WhatsApp, slug and media helpers."""

from __future__ import annotations

from typing import Any

import pytest

from lensfront.media import resolve_media_url
from lensfront.pricing import NBSP, discount_percent, effective_price, format_price
from lensfront.schemas import MediaRef
from lensfront.slugs import apply_slug, slugify
from lensfront.whatsapp import product_inquiry_message, whatsapp_url


class TestFormatPrice:
    """Tests for format_price."""

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (1250000, f"Rp{NBSP}1.250.000"),
            (0, f"Rp{NBSP}0"),
            (None, f"Rp{NBSP}0"),
            (999, f"Rp{NBSP}999"),
            (1000, f"Rp{NBSP}1.000"),
            (1999.5, f"Rp{NBSP}2.000"),
            (1999.4, f"Rp{NBSP}1.999"),
            (-15000, f"-Rp{NBSP}15.000"),
        ],
    )
    def test_rupiah(self, amount: Any, expected: str) -> None:
        assert format_price(amount, "IDR") == expected

    def test_other_currency_uses_code(self) -> None:
        assert format_price(12, "usd") == f"USD{NBSP}12"


class TestDiscounts:
    """Tests for discount helpers."""

    def test_discount_percent(self) -> None:
        assert discount_percent(2500000, 2000000) == 20

    def test_discount_percent_rounds(self) -> None:
        assert discount_percent(300, 199) == 34

    @pytest.mark.parametrize(
        ("price", "discounted"),
        [(100, None), (100, 100), (100, 150), (None, 50), (0, 0), (100, -1)],
    )
    def test_no_valid_discount(self, price: Any, discounted: Any) -> None:
        assert discount_percent(price, discounted) is None
        assert effective_price(price, discounted) == (price or 0)

    def test_effective_price_uses_discount(self) -> None:
        assert effective_price(2500000, 2000000) == 2000000


class TestWhatsapp:
    """Tests for WhatsApp links."""

    def test_strips_non_digits(self) -> None:
        assert whatsapp_url("+62 812-3456") == "https://wa.me/628123456"

    @pytest.mark.parametrize("number", [None, "", "n/a"])
    def test_missing_number(self, number: Any) -> None:
        assert whatsapp_url(number, "hi") == "#"

    def test_message_is_encoded(self) -> None:
        message = product_inquiry_message("Aviator & Co", f"Rp{NBSP}2.000.000")
        assert message == f"Halo, saya tertarik dengan produk: Aviator & Co (Rp{NBSP}2.000.000)"
        url = whatsapp_url("628123", message)
        assert url.startswith("https://wa.me/628123?text=Halo%2C%20saya%20tertarik")
        assert "Aviator%20%26%20Co" in url
        assert "%C2%A0" in url


class TestSlugs:
    """Tests for slug generation."""

    @pytest.mark.parametrize(
        ("text", "slug"),
        [
            ("  Ray-Ban  Aviator!! ", "ray-ban-aviator"),
            ("Oakley Holbrook", "oakley-holbrook"),
            ("Lensa -- Photochromic", "lensa-photochromic"),
            ("snake_case stays", "snake_case-stays"),
            ("Café Frame", "caf-frame"),
            ("!!!", ""),
        ],
    )
    def test_slugify(self, text: str, slug: str) -> None:
        assert slugify(text) == slug

    def test_fills_missing_slug(self) -> None:
        assert apply_slug({"title": "Round Metal"}) == {"title": "Round Metal", "slug": "round-metal"}

    def test_regenerates_stale_slug(self) -> None:
        data = {"title": "Round Metal II", "slug": "round-metal"}
        assert apply_slug(data)["slug"] == "round-metal-ii"

    def test_keeps_matching_slug(self) -> None:
        data = {"title": "Round Metal", "slug": "round-metal"}
        assert apply_slug(data) == {"title": "Round Metal", "slug": "round-metal"}

    def test_without_source_leaves_target(self) -> None:
        assert apply_slug({"slug": "custom"}) == {"slug": "custom"}

    def test_none_passes_through(self) -> None:
        assert apply_slug(None) is None

    def test_custom_fields(self) -> None:
        data = {"name": "Clip On", "handle": ""}
        assert apply_slug(data, source="name", target="handle")["handle"] == "clip-on"


class TestResolveMediaUrl:
    """Tests for resolve_media_url."""

    def test_relative_url_gets_base(self) -> None:
        media = {"url": "/media/a.jpg"}
        assert resolve_media_url(media, "https://cms.example.com/") == "https://cms.example.com/media/a.jpg"

    def test_absolute_url_kept(self) -> None:
        media = MediaRef(url="https://cdn.example.com/a.jpg")
        assert resolve_media_url(media, "https://cms.example.com") == "https://cdn.example.com/a.jpg"

    @pytest.mark.parametrize("media", [None, 12, {"url": None}, MediaRef()])
    def test_missing_media_uses_placeholder(self, media: Any) -> None:
        assert resolve_media_url(media, "https://cms.example.com", placeholder="/ph.jpg") == "/ph.jpg"

"""Test setup for lensfront."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (talk to a live CMS)",
    )


@pytest.fixture
def rooted_document() -> dict[str, Any]:
    """A rooted rich-text document covering every supported node type."""
    return {
        "root": {
            "children": [
                {"type": "h2", "children": [{"text": "Frame care"}]},
                {
                    "type": "paragraph",
                    "children": [
                        {"text": "Clean "},
                        {"text": "gently", "bold": True},
                        {"text": " every day.", "format": 2},
                    ],
                },
                {
                    "type": "ul",
                    "children": [
                        {"type": "li", "children": [{"text": "Microfiber cloth"}]},
                        {"type": "li", "children": [{"text": "Lens spray"}]},
                    ],
                },
            ]
        }
    }


@pytest.fixture
def product_record() -> dict[str, Any]:
    """A product as returned by the CMS products endpoint (depth=1)."""
    return {
        "id": 7,
        "productId": "RB-3025",
        "title": "Aviator Classic",
        "slug": "aviator-classic",
        "brand": "Ray-Ban",
        "price": 2500000,
        "discountedPrice": 2000000,
        "description": {
            "root": {
                "children": [
                    {"type": "paragraph", "children": [{"text": "Timeless pilot frame."}]},
                ]
            }
        },
        "category": "Sunglasses",
        "mainImage": {"id": 1, "url": "/media/aviator.jpg", "alt": "Aviator front"},
        "gallery": [
            {"image": {"id": 2, "url": "https://cdn.example.com/aviator-side.jpg"}, "alt": "Side"},
            {"image": 3, "alt": "Unpopulated"},
        ],
        "specifications": [{"name": "Lens width", "value": "58 mm"}],
        "featured": True,
        "stock": 4,
    }

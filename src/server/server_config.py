"""Server configuration."""

from __future__ import annotations

import os

DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 8000

APP_TITLE = "lensfront"
APP_DESCRIPTION = "Read-only storefront content API with rich-text rendering."

HOST = os.getenv("HOST", DEFAULT_HOST)
PORT = int(os.getenv("PORT", str(DEFAULT_PORT)))
RELOAD = os.getenv("RELOAD", "false").lower() == "true"

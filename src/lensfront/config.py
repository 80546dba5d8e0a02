"""Local configuration for lensfront."""

from __future__ import annotations

import os


DEFAULT_CMS_URL = "http://localhost:3000"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "lensfront/0.1"
DEFAULT_CURRENCY = "IDR"
DEFAULT_PLACEHOLDER_IMAGE = "/placeholder-product.jpg"
DEFAULT_LOG_LEVEL = "INFO"

# Base URL of the CMS serving /api/<collection> endpoints.
LENSFRONT_CMS_URL = os.getenv("LENSFRONT_CMS_URL", DEFAULT_CMS_URL).rstrip("/")
LENSFRONT_FETCH_TIMEOUT_S = float(os.getenv("LENSFRONT_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
LENSFRONT_FETCH_MAX_RETRIES = int(os.getenv("LENSFRONT_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
LENSFRONT_FETCH_BACKOFF_S = float(os.getenv("LENSFRONT_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
LENSFRONT_USER_AGENT = os.getenv("LENSFRONT_USER_AGENT", DEFAULT_USER_AGENT)
LENSFRONT_CURRENCY = os.getenv("LENSFRONT_CURRENCY", DEFAULT_CURRENCY)
LENSFRONT_PLACEHOLDER_IMAGE = os.getenv("LENSFRONT_PLACEHOLDER_IMAGE", DEFAULT_PLACEHOLDER_IMAGE)
LENSFRONT_LOG_LEVEL = os.getenv("LENSFRONT_LOG_LEVEL", DEFAULT_LOG_LEVEL)

"""Process-wide logging setup for the lensfront server."""

from __future__ import annotations

import logging
import sys

from lensfront.config import LENSFRONT_LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


class _ExtraFormatter(logging.Formatter):
    """Append ``extra={...}`` fields to the formatted record."""

    _STANDARD = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {key: value for key, value in vars(record).items() if key not in self._STANDARD}
        if not extras:
            return base
        rendered = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{base} [{rendered}]"


def configure_logging(level: str | int = LENSFRONT_LOG_LEVEL) -> None:
    """Install a stderr handler on the root logger once."""
    global _configured
    if _configured:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_ExtraFormatter(LOG_FORMAT))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)

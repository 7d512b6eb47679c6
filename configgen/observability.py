"""Logging helpers."""
from __future__ import annotations

import logging

_LOG_CONFIGURED = False


def configure_logging(level: str) -> None:
    global _LOG_CONFIGURED
    if not _LOG_CONFIGURED:
        logging.basicConfig(
            level=getattr(logging, level.upper(), logging.INFO),
            format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        _LOG_CONFIGURED = True
    else:
        logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))

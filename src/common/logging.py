"""
Logging configuration helpers.
The dashboard entrypoint calls `configure_logging` once before building any panel.
"""

from __future__ import annotations

import logging

from src.common.settings import get_settings

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Configure process-wide logging from environment settings."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    settings = get_settings()
    level = getattr(logging, settings.LOG_LEVEL, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    logging.getLogger(__name__).debug(
        "Logging configured for %s (%s) at %s",
        settings.PROJECT_NAME,
        settings.ENV,
        settings.LOG_LEVEL,
    )
    _LOGGING_CONFIGURED = True

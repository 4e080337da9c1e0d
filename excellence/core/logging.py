"""
Logging Setup - Excellence Eligibility
excellence/core/logging.py

structlog configuration driven by Settings.LOG_FORMAT / Settings.LOG_LEVEL.
"""

import logging
from typing import Optional

import structlog

from excellence.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog rendering (json or console) and level filtering."""
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL)

    if settings.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )

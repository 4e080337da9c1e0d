"""
Core Package - Excellence Eligibility
excellence/core/__init__.py

Core infrastructure: exceptions, logging.
"""

from excellence.core.exceptions import (
    DataSourceAuthenticationException,
    DataSourceException,
    EventNotFoundException,
)
from excellence.core.logging import configure_logging

__all__ = [
    # Exceptions
    "DataSourceAuthenticationException",
    "DataSourceException",
    "EventNotFoundException",
    # Logging
    "configure_logging",
]

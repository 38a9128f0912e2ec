"""Logging module with structured logging and request tracking."""

from propertyops.core.logging.config import configure_logging
from propertyops.core.logging.middleware import (
    RequestIdMiddleware,
    RequestLoggingMiddleware,
)


__all__ = [
    "RequestIdMiddleware",
    "RequestLoggingMiddleware",
    "configure_logging",
]

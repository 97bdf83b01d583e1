"""Logging module with structured logging and request tracking."""

from travlr.core.logging.middleware import RequestLoggingMiddleware, get_client_ip
from travlr.core.logging.setup import configure_logging


__all__ = [
    "RequestLoggingMiddleware",
    "configure_logging",
    "get_client_ip",
]

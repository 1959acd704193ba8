"""
Observability module.

Provides logging configuration, correlation ID tracking and request
logging middleware.
"""

from franchise_site.observability.correlation import get_correlation_id, set_correlation_id
from franchise_site.observability.logger import configure_logging, get_logger
from franchise_site.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

__all__ = [
    "configure_logging",
    "get_logger",
    "get_correlation_id",
    "set_correlation_id",
    "CorrelationMiddleware",
    "RequestLoggingMiddleware",
]

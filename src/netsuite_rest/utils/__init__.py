"""Utility functions for the NetSuite client."""

from .errors import (
    AuthenticationError,
    ConfigurationError,
    NetSuiteError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    from_http_error,
    handle_error,
    is_retryable,
)
from .logging_config import PerformanceMonitor, initialize_logging

__all__ = [
    # Errors
    "NetSuiteError",
    "ConfigurationError",
    "NetworkError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "from_http_error",
    "handle_error",
    "is_retryable",
    # Logging
    "initialize_logging",
    "PerformanceMonitor",
]

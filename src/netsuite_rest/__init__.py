"""
netsuite-rest.

Async client for the NetSuite SuiteTalk REST API with OAuth 1.0a signing
and cursor-following pagination.
"""

from importlib.metadata import PackageNotFoundError, version
import logging

try:
    __version__ = version("netsuite-rest")
except PackageNotFoundError:
    __version__ = "unknown"

# Library logging stays silent unless the application configures handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .clients import NetSuiteClient, NetSuiteOAuth1, get_netsuite_client  # noqa: E402
from .config import Config, get_config  # noqa: E402
from .models import MetadataOptions, NavigationLink, Page, RequestOptions  # noqa: E402
from .services import Paginator, async_retry_with_backoff, retrying  # noqa: E402
from .settings import NetSuiteSettings  # noqa: E402
from .utils.errors import (  # noqa: E402
    AuthenticationError,
    ConfigurationError,
    NetSuiteError,
    NetworkError,
    NotFoundError,
    RateLimitError,
)

__all__ = [
    "__version__",
    # Client
    "NetSuiteClient",
    "NetSuiteOAuth1",
    "get_netsuite_client",
    # Pagination
    "Paginator",
    "async_retry_with_backoff",
    "retrying",
    # Models
    "Page",
    "NavigationLink",
    "RequestOptions",
    "MetadataOptions",
    # Configuration
    "Config",
    "get_config",
    "NetSuiteSettings",
    # Errors
    "NetSuiteError",
    "ConfigurationError",
    "NetworkError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
]

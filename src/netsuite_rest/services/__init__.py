"""Paging and retry helpers layered over NetSuite calls."""

from .pagination import DEFAULT_PAGE_LIMIT, Paginator, find_next_href
from .retry import async_retry_with_backoff, retrying

__all__ = [
    "DEFAULT_PAGE_LIMIT",
    "Paginator",
    "find_next_href",
    "async_retry_with_backoff",
    "retrying",
]

"""Retry with exponential backoff for NetSuite calls."""

import asyncio
from collections.abc import Awaitable, Callable
import logging
from typing import TypeVar

from netsuite_rest.utils.errors import is_retryable

T = TypeVar("T")

logger = logging.getLogger(__name__)


async def async_retry_with_backoff(
    func: Callable[[], Awaitable[T]],
    *,
    max_retries: int = 3,
    base_delay: float = 2.0,
    description: str = "Operation",
) -> T:
    """
    Execute an async function with retry and exponential backoff.

    Only errors accepted by ``is_retryable`` (network failures, 429 and 5xx
    responses) are retried.

    Args:
        func: Async function to execute
        max_retries: Maximum number of attempts
        base_delay: Base delay in seconds (will be doubled each retry)
        description: Description for logging

    Returns:
        Result from func

    Raises:
        The first non-retryable exception, or the last one once attempts run out
    """
    if max_retries < 1:
        raise ValueError(f"max_retries must be at least 1, got {max_retries}")

    for attempt in range(max_retries):
        try:
            return await func()
        except Exception as e:
            if not is_retryable(e) or attempt == max_retries - 1:
                raise

            delay = base_delay * (2**attempt)
            logger.warning(
                f"{description} failed (attempt {attempt + 1}/{max_retries}): "
                f"{e}. Retrying in {delay:.1f}s..."
            )
            await asyncio.sleep(delay)

    raise RuntimeError(f"{description} failed after {max_retries} retries")


def retrying(
    fetch: Callable[[int, int], Awaitable[T]],
    *,
    max_retries: int = 3,
    base_delay: float = 2.0,
) -> Callable[[int, int], Awaitable[T]]:
    """Wrap an ``(offset, limit)`` page fetch so each page call is retried."""

    async def fetch_with_retry(offset: int, limit: int) -> T:
        return await async_retry_with_backoff(
            lambda: fetch(offset, limit),
            max_retries=max_retries,
            base_delay=base_delay,
            description=f"Page fetch at offset {offset}",
        )

    return fetch_with_retry

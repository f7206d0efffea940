"""Cursor-following pagination over NetSuite collection envelopes.

NetSuite collection responses carry a ``links`` list; the ``next`` entry's
href encodes where the following page starts::

    {"rel": "next", "href": ".../suiteql?limit=1000&offset=1000"}

:class:`Paginator` resumes from that href instead of computing
``offset + limit`` itself, so server-side clamping of ``limit`` is honoured.
"""

from collections.abc import AsyncIterator, Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass
import logging
import math
from typing import Any, Generic, TypeVar
from urllib.parse import parse_qs, urlsplit

logger = logging.getLogger(__name__)

DEFAULT_PAGE_LIMIT = 1000

PageT = TypeVar("PageT")

FetchPage = Callable[[int, int], Awaitable[PageT]]


@dataclass
class _PaginationCursor:
    offset: int
    limit: int
    done: bool = False


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def find_next_href(links: Iterable[Any] | None) -> str | None:
    """Return the href of the first ``rel == "next"`` link, if any."""
    for link in links or ():
        if _field(link, "rel") == "next":
            href = _field(link, "href")
            return "" if href is None else str(href)
    return None


def _query_int(params: dict[str, list[str]], name: str, minimum: int) -> int | None:
    values = params.get(name)
    if not values:
        return None
    text = values[0].strip()
    # Decimal notation only: "1000", "1000.0" and "1e3" are all 1000.
    if "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number) or not number.is_integer():
        return None
    value = int(number)
    return value if value >= minimum else None


class Paginator(Generic[PageT]):
    """
    Drive an async ``(offset, limit) -> page`` fetch function across pages.

    Each page is handed to the caller as soon as it arrives; only one fetch
    is ever in flight. Iteration stops after the first page without a
    ``next`` link. ``hasMore``/``count``/``totalResults`` are ignored.

    A paginator supports a single traversal. Once :meth:`run` has started,
    a later call yields nothing, whether the first traversal finished,
    failed or was abandoned.

    Example:
        >>> paginator = Paginator(
        ...     lambda offset, limit: client.fetch_suiteql(query, offset, limit),
        ...     limit=500,
        ... )
        >>> async for page in paginator.run():
        ...     rows.extend(page.items)
    """

    def __init__(self, api_call: FetchPage[PageT], limit: int = DEFAULT_PAGE_LIMIT):
        """
        Args:
            api_call: Async callable returning the page at (offset, limit).
                Errors it raises reach the consumer unchanged.
            limit: Page size for the first request; later requests use the
                limit from the server's ``next`` link when it has one.
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")
        self._api_call = api_call
        self._cursor = _PaginationCursor(offset=0, limit=limit)
        self._started = False

    @property
    def done(self) -> bool:
        """True once no further page will be fetched."""
        return self._cursor.done

    async def run(self) -> AsyncIterator[PageT]:
        """Yield pages in server order until there is no ``next`` link."""
        if self._started:
            return
        self._started = True

        try:
            while not self._cursor.done:
                offset, limit = self._cursor.offset, self._cursor.limit
                page = await self._api_call(offset, limit)
                self._advance(page)
                logger.debug(f"Fetched page at offset={offset} limit={limit}")
                yield page
        finally:
            # Failed fetch, abandoned iteration or normal end: never resume.
            self._cursor.done = True

    async def items(self) -> AsyncIterator[Any]:
        """Yield the records of every page, in order."""
        async for page in self.run():
            for item in _field(page, "items") or ():
                yield item

    def _advance(self, page: PageT) -> None:
        href = find_next_href(_field(page, "links"))
        if href is None:
            self._cursor.done = True
            return

        params = parse_qs(urlsplit(href).query, keep_blank_values=True)

        offset = _query_int(params, "offset", minimum=0)
        if offset is None:
            if "offset" in params:
                logger.warning(f"Ignoring invalid offset in next link: {href}")
            offset = 0

        limit = _query_int(params, "limit", minimum=1)
        if limit is None:
            if "limit" in params:
                logger.warning(f"Ignoring invalid limit in next link: {href}")
            limit = self._cursor.limit

        self._cursor.offset = offset
        self._cursor.limit = limit

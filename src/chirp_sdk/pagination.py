"""Cursor-based pagination over list endpoints.

List endpoints return one page per request together with the integer cursor
of the next (and previous) page. :class:`PageIterator` owns that cursor so
callers only ever see pages::

    iterator = client.users.get_friend_ids(UserRef.of("jack"), max_items=12000)
    while iterator.has_next():
        page = await iterator.next_page()
        ...

or, flattened::

    ids = await client.users.get_friend_ids("jack").collect(12000)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, AsyncIterator, Awaitable, Callable, Generic, TypeVar

import httpx

from chirp_sdk.errors import ChirpResponseError, CursorLoopError, IteratorExhausted
from chirp_sdk.models.cursors import CursorResponse

if TYPE_CHECKING:
    from chirp_sdk.http import HTTPClient

log = logging.getLogger(__name__)

T = TypeVar("T")

INITIAL_CURSOR = 0
"""Start cursor: fetch the first page."""

END_CURSOR = -1
"""Next cursor meaning no further pages exist."""

# The API reports the end of a listing as next_cursor 0; -1 is accepted too.
_TERMINAL_CURSORS = frozenset({INITIAL_CURSOR, END_CURSOR})


def is_terminal(cursor: int) -> bool:
    """Whether a *returned* next cursor marks the end of the listing."""
    return cursor in _TERMINAL_CURSORS


@dataclass(frozen=True)
class Page(Generic[T]):
    """One fetched batch of a cursored listing."""

    items: list[T] = field(default_factory=list)
    previous_cursor: int = INITIAL_CURSOR
    next_cursor: int = END_CURSOR

    def __len__(self) -> int:
        return len(self.items)

    @property
    def is_last(self) -> bool:
        return is_terminal(self.next_cursor)


FetchPage = Callable[[int], Awaitable[Page[T]]]


class PageIterator(Generic[T]):
    """Forward-only iterator over the pages of a cursored listing.

    ``fetch`` performs one request for the given cursor and returns the page.
    Whatever it raises reaches the caller of :meth:`next_page` untouched, and
    the cursor stays where it was so calling again repeats the same request.

    With ``max_items`` set, iteration stops once the pages handed out hold at
    least that many items. Pages are never split: use :meth:`collect` for an
    exact count.

    Not safe for concurrent ``next_page`` calls.
    """

    def __init__(
        self,
        fetch: FetchPage[T],
        *,
        start_cursor: int = INITIAL_CURSOR,
        max_items: int | None = None,
    ) -> None:
        if max_items is not None and max_items < 0:
            raise ValueError("max_items cannot be negative")
        self._fetch = fetch
        self._cursor = start_cursor
        self._max_items = max_items
        self._item_count = 0
        self._completed = max_items == 0 or start_cursor == END_CURSOR

    @property
    def cursor(self) -> int:
        """Cursor the next request will be issued with."""
        return self._cursor

    @property
    def item_count(self) -> int:
        return self._item_count

    @property
    def max_items(self) -> int | None:
        return self._max_items

    @property
    def remaining(self) -> int | None:
        """Items still wanted before ``max_items`` is met, None when unbounded."""
        if self._max_items is None:
            return None
        return max(self._max_items - self._item_count, 0)

    @property
    def completed(self) -> bool:
        return self._completed

    def has_next(self) -> bool:
        return not self._completed

    async def next_page(self) -> Page[T]:
        """Fetch the page at the current cursor and advance past it."""
        if self._completed:
            raise IteratorExhausted(self._cursor)

        page = await self._fetch(self._cursor)

        if page.next_cursor == self._cursor and not page.is_last:
            raise CursorLoopError(self._cursor)

        log.debug(
            "Fetched page at cursor %d: %d items, next cursor %d",
            self._cursor, len(page.items), page.next_cursor,
        )
        self._cursor = page.next_cursor
        self._item_count += len(page.items)
        if page.is_last:
            self._completed = True
        elif self._max_items is not None and self._item_count >= self._max_items:
            self._completed = True
        return page

    def __aiter__(self) -> AsyncIterator[Page[T]]:
        return self._pages()

    async def _pages(self) -> AsyncIterator[Page[T]]:
        while self.has_next():
            yield await self.next_page()

    async def items(self) -> AsyncIterator[T]:
        """Yield individual items across pages."""
        async for page in self:
            for item in page.items:
                yield item

    async def collect(self, max_items: int | None = None) -> list[T]:
        """Consume pages into one ordered list of at most ``max_items`` items."""
        limit = max_items if max_items is not None else self._max_items
        result: list[T] = []
        if limit is not None and limit <= 0:
            return result
        while self.has_next():
            page = await self.next_page()
            result.extend(page.items)
            if limit is not None and len(result) >= limit:
                break
        if limit is not None:
            del result[limit:]
        return result

    async def flatten(self) -> list[T]:
        """Consume the full iterator into a list."""
        return await self.collect()


# ---------------------------------------------------------------------------
# Response unwrapping
# ---------------------------------------------------------------------------

def cursor_page(
    response: httpx.Response,
    items_field: str,
    parse: Callable[[Any], T] | None = None,
) -> Page[T]:
    """Build a :class:`Page` from a cursored JSON body.

    The body carries the batch under ``items_field`` (``ids``, ``users``)
    alongside ``next_cursor`` and ``previous_cursor``. Anything else raises
    :class:`ChirpResponseError`.
    """
    try:
        data = response.json()
        cursors = CursorResponse.model_validate(data)
        raw = data.get(items_field) or []
        if not isinstance(raw, list):
            raise ValueError(f"{items_field!r} is not a list")
        items = [parse(item) for item in raw] if parse else list(raw)
    except ValueError as exc:
        raise ChirpResponseError(f"Unreadable page body: {exc}", response) from exc
    return Page(
        items=items,
        previous_cursor=cursors.previous_cursor,
        next_cursor=cursors.next_cursor,
    )


def cursored(
    http: HTTPClient,
    path: str,
    items_field: str,
    *,
    params: dict[str, Any] | None = None,
    parse: Callable[[Any], T] | None = None,
    page_size: int,
    max_items: int | None = None,
    start_cursor: int = INITIAL_CURSOR,
) -> PageIterator[T]:
    """Iterator over a GET list endpoint of ``http``.

    Each request asks for ``count = min(page_size, remaining)`` so a bounded
    iteration does not pull more than it needs.
    """
    base = dict(params) if params else {}

    async def fetch(cursor: int) -> Page[T]:
        query = dict(base)
        count = page_size
        if iterator.remaining is not None:
            count = min(count, iterator.remaining)
        query["count"] = count
        if cursor != INITIAL_CURSOR:
            query["cursor"] = cursor
        r = await http.get(path, params=query)
        return cursor_page(r, items_field, parse)

    iterator: PageIterator[T] = PageIterator(fetch, start_cursor=start_cursor, max_items=max_items)
    return iterator

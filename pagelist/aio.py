"""Async page construction for remote sources.

An :class:`AsyncQueryable` (``async count()`` / ``async fetch(offset, limit)``)
is awaited directly. Any other source goes through the synchronous builders
on a worker thread, so the resulting metadata is identical either way.
Cancelling the awaiting task abandons the page; nothing partial is returned.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable, Iterable
from typing import Any, Protocol, TypeVar

from .errors import InvalidTotalItemCount
from .metadata import DEFAULT_PAGE_SIZE
from .slicing import (
    PageSlice,
    Queryable,
    static_page_slice,
    to_ordered_page_slice,
    to_page_slice,
    validate_page_request,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class AsyncQueryable(Protocol[T_co]):
    """Remote source, typically an async database query adapter."""

    async def count(self) -> int: ...

    async def fetch(self, offset: int, limit: int) -> Iterable[T_co]: ...


def _is_async_queryable(source: object) -> bool:
    count = getattr(source, "count", None)
    fetch = getattr(source, "fetch", None)
    return inspect.iscoroutinefunction(count) and inspect.iscoroutinefunction(fetch)


async def to_page_slice_async(
    source: AsyncQueryable[T] | Queryable[T] | Iterable[T] | None,
    page_number: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    total_item_count: int | None = None,
) -> PageSlice[T]:
    """Async counterpart of :func:`pagelist.slicing.to_page_slice`."""
    if not _is_async_queryable(source):
        return await asyncio.to_thread(
            to_page_slice, source, page_number, page_size, total_item_count
        )

    validate_page_request(page_number, page_size)
    if total_item_count is not None and total_item_count < 0:
        raise InvalidTotalItemCount(total_item_count)

    remote: Any = source
    total = await remote.count() if total_item_count is None else total_item_count
    items: list[T] = []
    if total > 0:
        items = list(await remote.fetch((page_number - 1) * page_size, page_size))
    page = static_page_slice(items, page_number, page_size, total)
    logger.debug(
        "Built page %d of %d (%d items, %d total)",
        page.page_number, page.page_count, len(page), page.total_item_count,
    )
    return page


async def to_ordered_page_slice_async(
    source: AsyncQueryable[T] | Queryable[T] | Iterable[T] | None,
    key: Callable[[T], Any],
    page_number: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> PageSlice[T]:
    """Async counterpart of :func:`pagelist.slicing.to_ordered_page_slice`."""
    if not _is_async_queryable(source):
        return await asyncio.to_thread(
            to_ordered_page_slice, source, key, page_number, page_size
        )

    validate_page_request(page_number, page_size)
    remote: Any = source
    total = await remote.count()
    everything = list(await remote.fetch(0, total)) if total > 0 else []
    return to_page_slice(sorted(everything, key=key), page_number, page_size)

"""Page slices: one page of items plus its metadata.

A slice is built in one of three ways:

- computed from a full source (``to_page_slice``), which counts the source
  unless the caller already knows the total;
- computed after sorting by a key (``to_ordered_page_slice``);
- wrapped around items fetched elsewhere (``static_page_slice``).

Sources may be ``None``, a :class:`Queryable` (anything exposing ``count()``
and ``fetch(offset, limit)``, e.g. a database query adapter), a sequence, or
any other iterable, which is materialised once.
"""

from __future__ import annotations

import inspect
import logging
import math
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, Protocol, TypeVar, overload, runtime_checkable

from .errors import InvalidPageNumber, InvalidPageSize, InvalidTotalItemCount, SubsetTooLarge
from .metadata import DEFAULT_PAGE_SIZE, PageMetadata

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Queryable(Protocol[T_co]):
    """A source that can count itself and fetch a window without loading everything."""

    def count(self) -> int: ...

    def fetch(self, offset: int, limit: int) -> Iterable[T_co]: ...


@dataclass(frozen=True)
class PageSlice(PageMetadata, Sequence[T], Generic[T]):
    """The items of one page together with the page's metadata."""

    items: tuple[T, ...] = field(default=())

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "items", tuple(self.items))
        if len(self.items) > self.page_size:
            raise SubsetTooLarge(len(self.items), self.page_size)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __contains__(self, value: object) -> bool:
        return value in self.items


# ---------------------------------------------------------------------------
# Source helpers
# ---------------------------------------------------------------------------

def validate_page_request(page_number: int, page_size: int) -> None:
    if page_number < 1:
        raise InvalidPageNumber(page_number)
    if page_size < 1:
        raise InvalidPageSize(page_size)


def _as_countable(source: Iterable[T] | Queryable[T] | None) -> Queryable[T] | Sequence[T]:
    """Return *source* in a form that can be counted and sliced more than once."""
    if source is None:
        return ()
    if inspect.iscoroutinefunction(getattr(source, "count", None)):
        raise TypeError(
            f"{type(source).__name__} has async count/fetch; use pagelist.aio.to_page_slice_async"
        )
    if isinstance(source, Queryable):
        return source
    if isinstance(source, Sequence):
        return source
    return list(source)


def _count(source: Queryable[T] | Sequence[T]) -> int:
    if isinstance(source, Queryable):
        return source.count()
    return len(source)


def _fetch(source: Queryable[T] | Sequence[T], offset: int, limit: int) -> tuple[T, ...]:
    if isinstance(source, Queryable):
        return tuple(source.fetch(offset, limit))
    return tuple(source[offset:offset + limit])


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def to_page_slice(
    source: Iterable[T] | Queryable[T] | None,
    page_number: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    total_item_count: int | None = None,
) -> PageSlice[T]:
    """Build the page ``page_number`` of *source*.

    Args:
        source: Full sequence to page through. ``None`` is treated as empty.
        page_number: One-based page number. Pages past the end are allowed
            and come back empty.
        page_size: Maximum number of items on the page.
        total_item_count: Known size of *source*. When given, the source is
            not counted and this value is used verbatim.

    Returns:
        The page slice.

    Raises:
        InvalidPageNumber: ``page_number`` is below 1.
        InvalidPageSize: ``page_size`` is below 1.
        InvalidTotalItemCount: ``total_item_count`` is negative.
    """
    validate_page_request(page_number, page_size)
    if total_item_count is not None and total_item_count < 0:
        raise InvalidTotalItemCount(total_item_count)

    countable = _as_countable(source)
    total = _count(countable) if total_item_count is None else total_item_count

    items: tuple[T, ...] = ()
    if total > 0:
        items = _fetch(countable, (page_number - 1) * page_size, page_size)

    page = PageSlice(
        page_number=page_number,
        page_size=page_size,
        total_item_count=total,
        items=items,
    )
    logger.debug(
        "Built page %d of %d (%d items, %d total)",
        page.page_number, page.page_count, len(page), page.total_item_count,
    )
    return page


def to_ordered_page_slice(
    source: Iterable[T] | Queryable[T] | None,
    key: Callable[[T], Any],
    page_number: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> PageSlice[T]:
    """Sort *source* ascending by *key* (stable), then build the requested page."""
    validate_page_request(page_number, page_size)
    countable = _as_countable(source)
    if isinstance(countable, Queryable):
        everything: Iterable[T] = countable.fetch(0, countable.count())
    else:
        everything = countable
    return to_page_slice(sorted(everything, key=key), page_number, page_size)


def single_page_slice(source: Iterable[T] | Queryable[T] | None) -> PageSlice[T]:
    """Put every item of *source* on a single page."""
    countable = _as_countable(source)
    total = _count(countable)
    return to_page_slice(countable, 1, max(total, 1), total)


def static_page_slice(
    subset: Iterable[T],
    page_number: int,
    page_size: int,
    total_item_count: int,
) -> PageSlice[T]:
    """Wrap items that were already paged elsewhere, e.g. by a database query."""
    return PageSlice(
        page_number=page_number,
        page_size=page_size,
        total_item_count=total_item_count,
        items=tuple(subset),
    )


def static_page_slice_from(subset: Iterable[T], metadata: PageMetadata) -> PageSlice[T]:
    return static_page_slice(
        subset, metadata.page_number, metadata.page_size, metadata.total_item_count
    )


def recast_page_slice(page: PageMetadata, items: Iterable[U]) -> PageSlice[U]:
    """Reuse the metadata of *page* for a different item sequence.

    Used after the items of a page have been converted into another type.

    Raises:
        SubsetTooLarge: *items* holds more than ``page.page_size`` entries.
    """
    return static_page_slice_from(items, page)


def map_page_slice(page: PageSlice[T], fn: Callable[[T], U]) -> PageSlice[U]:
    return recast_page_slice(page, (fn(item) for item in page.items))


# ---------------------------------------------------------------------------
# Chunking
# ---------------------------------------------------------------------------

def split(superset: Iterable[T], number_of_pages: int) -> list[list[T]]:
    """Split *superset* into at most ``number_of_pages`` evenly sized, non-empty chunks."""
    if superset is None:
        raise TypeError("superset must not be None")
    if number_of_pages < 1:
        raise ValueError(f"number_of_pages = {number_of_pages}. Must be at least 1.")

    items = list(superset)
    take = math.ceil(len(items) / number_of_pages)
    chunks: list[list[T]] = []
    for i in range(number_of_pages):
        chunk = items[i * take:(i + 1) * take]
        if chunk:
            chunks.append(chunk)
    return chunks


def partition(superset: Iterable[T], page_size: int) -> Iterator[list[T]]:
    """Iterate over consecutive chunks of ``page_size`` items.

    When *superset* is smaller than one page it is yielded whole, even if
    it is empty. Arguments are checked on the call, not on first iteration.
    """
    if superset is None:
        raise TypeError("superset must not be None")
    if page_size < 1:
        raise InvalidPageSize(page_size)
    return _partition(list(superset), page_size)


def _partition(items: list[T], page_size: int) -> Iterator[list[T]]:
    if len(items) < page_size:
        yield items
        return
    for start in range(0, len(items), page_size):
        yield items[start:start + page_size]

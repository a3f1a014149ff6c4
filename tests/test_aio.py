"""Tests for pagelist.aio async page construction."""

from __future__ import annotations

import asyncio
import logging

import pytest

from pagelist.aio import to_ordered_page_slice_async, to_page_slice_async
from pagelist.errors import (
    InvalidPageNumber,
    InvalidPageSize,
    InvalidTotalItemCount,
    SubsetTooLarge,
)
from pagelist.slicing import to_ordered_page_slice, to_page_slice


class FakeAsyncQuery:
    """Async source with awaitable count and fetch."""

    def __init__(self, rows):
        self.rows = list(rows)
        self.count_calls = 0
        self.fetch_calls: list[tuple[int, int]] = []

    async def count(self) -> int:
        self.count_calls += 1
        await asyncio.sleep(0)
        return len(self.rows)

    async def fetch(self, offset: int, limit: int):
        self.fetch_calls.append((offset, limit))
        await asyncio.sleep(0)
        return self.rows[offset:offset + limit]


class FailingAsyncQuery(FakeAsyncQuery):
    async def fetch(self, offset: int, limit: int):
        raise RuntimeError("connection reset")


class GreedyAsyncQuery(FakeAsyncQuery):
    async def fetch(self, offset: int, limit: int):
        return self.rows[offset:]


class BlockingAsyncQuery(FakeAsyncQuery):
    """Fetch never completes until cancelled."""

    def __init__(self, rows):
        super().__init__(rows)
        self.fetch_started = asyncio.Event()

    async def fetch(self, offset: int, limit: int):
        self.fetch_started.set()
        await asyncio.Event().wait()
        return []


# ---------------------------------------------------------------------------
# to_page_slice_async()
# ---------------------------------------------------------------------------


class TestToPageSliceAsync:
    def test_async_source(self):
        query = FakeAsyncQuery(range(1, 26))
        page = asyncio.run(to_page_slice_async(query, page_number=2, page_size=10))
        assert list(page) == list(range(11, 21))
        assert page.page_count == 3
        assert query.count_calls == 1
        assert query.fetch_calls == [(10, 10)]

    def test_matches_sync_metadata(self):
        rows = list(range(1, 36))
        async_page = asyncio.run(to_page_slice_async(FakeAsyncQuery(rows), 4, 10))
        sync_page = to_page_slice(rows, 4, 10)
        assert async_page == sync_page
        assert async_page.to_dict() == sync_page.to_dict()

    def test_sync_source_runs_in_thread(self):
        page = asyncio.run(to_page_slice_async([1, 2, 3, 4, 5], page_number=2, page_size=2))
        assert list(page) == [3, 4]
        assert page == to_page_slice([1, 2, 3, 4, 5], 2, 2)

    def test_none_source(self):
        page = asyncio.run(to_page_slice_async(None))
        assert len(page) == 0
        assert page.page_count == 0

    def test_known_total_skips_count(self):
        query = FakeAsyncQuery(range(30))
        page = asyncio.run(to_page_slice_async(query, 1, 10, total_item_count=30))
        assert query.count_calls == 0
        assert page.page_count == 3

    def test_empty_source_skips_fetch(self):
        query = FakeAsyncQuery([])
        page = asyncio.run(to_page_slice_async(query, 1, 10))
        assert len(page) == 0
        assert query.fetch_calls == []

    def test_invalid_request_raises_before_count(self):
        query = FakeAsyncQuery(range(5))
        with pytest.raises(InvalidPageNumber):
            asyncio.run(to_page_slice_async(query, page_number=0))
        with pytest.raises(InvalidPageSize):
            asyncio.run(to_page_slice_async(query, page_number=1, page_size=0))
        with pytest.raises(InvalidTotalItemCount):
            asyncio.run(to_page_slice_async(query, 1, 10, total_item_count=-5))
        assert query.count_calls == 0

    def test_source_error_propagates(self):
        with pytest.raises(RuntimeError, match="connection reset"):
            asyncio.run(to_page_slice_async(FailingAsyncQuery(range(5)), 1, 2))

    def test_fetch_ignoring_limit_rejected(self):
        with pytest.raises(SubsetTooLarge):
            asyncio.run(to_page_slice_async(GreedyAsyncQuery(range(10)), 1, 3))

    def test_logs_page_built(self, caplog):
        caplog.set_level(logging.DEBUG, logger="pagelist.aio")
        asyncio.run(to_page_slice_async(FakeAsyncQuery(range(5)), 1, 2))
        assert "Built page 1 of 3 (2 items, 5 total)" in caplog.text

    def test_cancellation_abandons_page(self):
        async def run():
            query = BlockingAsyncQuery(range(5))
            task = asyncio.create_task(to_page_slice_async(query, 1, 2))
            await query.fetch_started.wait()
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        asyncio.run(run())


# ---------------------------------------------------------------------------
# to_ordered_page_slice_async()
# ---------------------------------------------------------------------------


class TestToOrderedPageSliceAsync:
    def test_async_source_sorted(self):
        query = FakeAsyncQuery([4, 1, 3, 2])
        page = asyncio.run(
            to_ordered_page_slice_async(query, key=lambda x: x, page_number=1, page_size=3)
        )
        assert list(page) == [1, 2, 3]
        assert page.total_item_count == 4

    def test_sync_source_matches_sync_builder(self):
        rows = ["pear", "fig", "apple", "kiwi"]
        page = asyncio.run(to_ordered_page_slice_async(rows, key=len, page_number=2, page_size=2))
        assert page == to_ordered_page_slice(rows, key=len, page_number=2, page_size=2)

    def test_invalid_page_number(self):
        with pytest.raises(InvalidPageNumber):
            asyncio.run(to_ordered_page_slice_async(FakeAsyncQuery([1]), key=lambda x: x, page_number=0))

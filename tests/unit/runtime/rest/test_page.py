"""Unit tests for the Page cursor.

Tests focus on lazy fetching, termination and atomic state updates.
"""

from __future__ import annotations

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from laakhay.fedi.core import ApiError, ServerError
from laakhay.fedi.models import Account
from laakhay.fedi.runtime.rest import HTTPResponse, Page

BASE = "https://example.com/api/v1/blocks"


def _accounts(*ids: int) -> list[dict]:
    return [{"id": str(i), "username": f"u{i}", "acct": f"u{i}"} for i in ids]


def _response(items: list[dict], next_url: str | None = None, prev_url: str | None = None):
    links = []
    if next_url:
        links.append(f'<{next_url}>; rel="next"')
    if prev_url:
        links.append(f'<{prev_url}>; rel="prev"')
    headers = {"Link": ", ".join(links)} if links else {}
    return HTTPResponse(200, json.dumps(items).encode(), headers=headers)


def _page(first: HTTPResponse, *later: HTTPResponse) -> Page[Account]:
    dispatcher = MagicMock()
    dispatcher.execute = AsyncMock(side_effect=list(later))
    return Page.from_response(dispatcher, Account, first)


def _ids(items) -> list[str]:
    return [a.id for a in items]


class TestPageNavigation:
    """Test next_page / prev_page."""

    @pytest.mark.asyncio
    async def test_no_links_no_requests(self):
        """Test missing links return [] without touching the network."""
        page = _page(_response(_accounts(1, 2)))
        assert page.is_exhausted
        assert await page.next_page() == []
        assert await page.prev_page() == []
        page._dispatcher.execute.assert_not_awaited()
        assert _ids(page.items) == ["1", "2"]

    @pytest.mark.asyncio
    async def test_next_page_replaces_state(self):
        """Test an advance swaps items and both links."""
        page = _page(
            _response(_accounts(3, 2), next_url=f"{BASE}?max_id=2"),
            _response(_accounts(1), prev_url=f"{BASE}?min_id=1"),
        )

        batch = await page.next_page()

        assert _ids(batch) == ["1"]
        assert _ids(page.items) == ["1"]
        assert page.next_url is None
        assert page.prev_url == f"{BASE}?min_id=1"
        page._dispatcher.execute.assert_awaited_once()
        assert page._dispatcher.execute.await_args.args[1] == f"{BASE}?max_id=2"

    @pytest.mark.asyncio
    async def test_next_then_prev_returns_to_first_batch(self):
        """Test following prev after next yields the original batch."""
        first = _response(_accounts(5, 4), next_url=f"{BASE}?max_id=4")
        page = _page(
            first,
            _response(_accounts(3, 2), next_url=f"{BASE}?max_id=2", prev_url=f"{BASE}?min_id=3"),
            _response(_accounts(5, 4), next_url=f"{BASE}?max_id=4", prev_url=f"{BASE}?min_id=5"),
        )

        await page.next_page()
        back = await page.prev_page()

        assert _ids(back) == ["5", "4"]
        assert page._dispatcher.execute.await_args.args[1] == f"{BASE}?min_id=3"

    @pytest.mark.asyncio
    async def test_returned_batch_is_a_copy(self):
        """Test callers cannot mutate the page through the returned list."""
        page = _page(
            _response(_accounts(2), next_url=f"{BASE}?max_id=2"),
            _response(_accounts(1)),
        )
        batch = await page.next_page()
        batch.clear()
        assert _ids(page.items) == ["1"]


class TestPageFailures:
    """Test state is untouched when an advance does not complete."""

    @pytest.mark.asyncio
    async def test_status_error_keeps_state(self):
        page = _page(
            _response(_accounts(2), next_url=f"{BASE}?max_id=2"),
            ServerError(503),
        )
        with pytest.raises(ServerError):
            await page.next_page()
        assert _ids(page.items) == ["2"]
        assert page.next_url == f"{BASE}?max_id=2"
        assert page.prev_url is None

    @pytest.mark.asyncio
    async def test_decode_error_keeps_state(self):
        page = _page(
            _response(_accounts(2), next_url=f"{BASE}?max_id=2"),
            HTTPResponse(200, b'{"error": "boom"}'),
        )
        with pytest.raises(ApiError):
            await page.next_page()
        assert _ids(page.items) == ["2"]
        assert page.next_url == f"{BASE}?max_id=2"

    @pytest.mark.asyncio
    async def test_cancellation_keeps_state(self):
        """Test a cancelled advance leaves the cursor where it was."""
        page = _page(_response(_accounts(2), next_url=f"{BASE}?max_id=2"))
        started = asyncio.Event()

        async def hang(*args, **kwargs):
            started.set()
            await asyncio.Event().wait()

        page._dispatcher.execute = hang
        task = asyncio.create_task(page.next_page())
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert _ids(page.items) == ["2"]
        assert page.next_url == f"{BASE}?max_id=2"


class TestItemsIter:
    """Test the flattening item stream."""

    @pytest.mark.asyncio
    async def test_yields_all_batches_in_order(self):
        """Test batches of sizes 3, 2, 4 yield 9 items in server order."""
        page = _page(
            _response(_accounts(9, 8, 7), next_url=f"{BASE}?max_id=7"),
            _response(_accounts(6, 5), next_url=f"{BASE}?max_id=5"),
            _response(_accounts(4, 3, 2, 1), next_url=f"{BASE}?max_id=1"),
            _response([]),
        )
        items = [a async for a in page.items_iter()]
        assert _ids(items) == ["9", "8", "7", "6", "5", "4", "3", "2", "1"]
        assert page._dispatcher.execute.await_count == 3

    @pytest.mark.asyncio
    async def test_fetches_lazily(self):
        """Test the next batch is requested only once the current one is consumed."""
        page = _page(
            _response(_accounts(3, 2), next_url=f"{BASE}?max_id=2"),
            _response(_accounts(1)),
        )
        it = page.items_iter()
        assert (await it.__anext__()).id == "3"
        assert (await it.__anext__()).id == "2"
        page._dispatcher.execute.assert_not_awaited()

        assert (await it.__anext__()).id == "1"
        page._dispatcher.execute.assert_awaited_once()
        await it.aclose()

    @pytest.mark.asyncio
    async def test_stops_without_next_link(self):
        """Test the stream ends when the last batch has no next link."""
        page = _page(
            _response(_accounts(2), next_url=f"{BASE}?max_id=2"),
            _response(_accounts(1)),
        )
        assert _ids([a async for a in page.items_iter()]) == ["2", "1"]
        assert page._dispatcher.execute.await_count == 1

    @pytest.mark.asyncio
    async def test_empty_first_page(self):
        """Test an empty first batch yields nothing and fetches nothing."""
        page = _page(_response([], next_url=f"{BASE}?max_id=0"))
        assert [a async for a in page.items_iter()] == []
        page._dispatcher.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_drained_iterator_is_not_restartable(self):
        """Test a second iteration after draining yields nothing."""
        page = _page(_response(_accounts(1)))
        assert len([a async for a in page.items_iter()]) == 1
        assert [a async for a in page.items_iter()] == []

    @pytest.mark.asyncio
    async def test_closed_iterator_is_not_restartable(self):
        """Test an iteration closed partway also ends the item stream."""
        page = _page(_response(_accounts(2, 1)))
        it = page.items_iter()
        assert (await it.__anext__()).id == "2"
        await it.aclose()

        assert [a async for a in page.items_iter()] == []

    @pytest.mark.asyncio
    async def test_failed_iterator_is_not_restartable(self):
        """Test an iteration that raised does not replay the current batch."""
        page = _page(
            _response(_accounts(2), next_url=f"{BASE}?max_id=2"),
            ServerError(503),
        )
        seen = []
        with pytest.raises(ServerError):
            async for account in page.items_iter():
                seen.append(account.id)

        assert seen == ["2"]
        assert [a async for a in page.items_iter()] == []
        assert page.next_url == f"{BASE}?max_id=2"

    def test_repr(self):
        page = _page(_response(_accounts(1), next_url=f"{BASE}?max_id=1"))
        assert "items=1" in repr(page)

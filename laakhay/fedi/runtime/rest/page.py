"""Cursor over a paginated list endpoint.

Architecture:
    The instance paginates lists through the ``Link`` response header
    (``rel="next"`` for older items, ``rel="prev"`` for newer ones). A Page
    holds the most recent batch plus those two URLs and fetches adjacent
    batches lazily, one request per advance.

States:
    - Active: at least one of ``next_url`` / ``prev_url`` is known
    - Exhausted: neither is known (no further data in either direction)

Ownership:
    A Page keeps a plain reference to the dispatcher of the client that
    created it. The client must stay open while its pages are used. A Page is
    single-owner: advancing one Page from two tasks at once is not supported.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ...core.enums import HTTPMethod
from .envelope import decode
from .http_client import HTTPResponse
from .links import parse_link_header

if TYPE_CHECKING:
    from .dispatcher import RequestDispatcher

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Page(Generic[T]):
    """One batch of a paginated list plus links to its neighbours."""

    def __init__(
        self,
        dispatcher: RequestDispatcher,
        item_type: Any,
        items: list[T],
        next_url: str | None = None,
        prev_url: str | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._item_type = item_type
        self.items = items
        self.next_url = next_url
        self.prev_url = prev_url
        self._drained = False

    @classmethod
    def from_response(
        cls, dispatcher: RequestDispatcher, item_type: Any, response: HTTPResponse
    ) -> Page[Any]:
        """Build the initial page from an already status-checked response."""
        items, next_url, prev_url = cls._parse(item_type, response)
        return cls(dispatcher, item_type, items, next_url=next_url, prev_url=prev_url)

    @staticmethod
    def _parse(item_type: Any, response: HTTPResponse) -> tuple[list[Any], str | None, str | None]:
        items = decode(response.body, list[item_type])
        links = parse_link_header(response.header("Link"))
        return items, links.get("next"), links.get("prev")

    @property
    def is_exhausted(self) -> bool:
        return self.next_url is None and self.prev_url is None

    async def next_page(self) -> list[T]:
        """Fetch the next (older) batch and make it current.

        Returns an empty list without any request when there is no next link.
        """
        if self.next_url is None:
            return []
        return await self._advance(self.next_url)

    async def prev_page(self) -> list[T]:
        """Fetch the previous (newer) batch and make it current.

        Returns an empty list without any request when there is no prev link.
        """
        if self.prev_url is None:
            return []
        return await self._advance(self.prev_url)

    async def _advance(self, url: str) -> list[T]:
        logger.debug("Fetching page", extra={"url": url})
        response = await self._dispatcher.execute(HTTPMethod.GET, url)
        items, next_url, prev_url = self._parse(self._item_type, response)
        # Cursor fields change together, only after the batch decoded
        self.items, self.next_url, self.prev_url = items, next_url, prev_url
        return list(items)

    async def items_iter(self) -> AsyncIterator[T]:
        """Yield every item of this page and all following pages, in server order.

        Drives ``next_page()`` until it returns an empty batch. Forward-only and
        not restartable: once an iteration has started, later calls yield
        nothing, whether it ran to the end, was closed early or raised. Re-issue
        the endpoint call for a fresh Page, or use ``next_page()`` directly.
        """
        if self._drained:
            return
        try:
            batch = list(self.items)
            while batch:
                for item in batch:
                    yield item
                batch = await self.next_page()
        finally:
            self._drained = True

    def __repr__(self) -> str:
        return (
            f"Page(items={len(self.items)}, next_url={self.next_url!r}, "
            f"prev_url={self.prev_url!r})"
        )

"""Query builder for an account's statuses."""

from __future__ import annotations

from urllib.parse import urlencode


class StatusesRequest:
    """Fluent filter for ``GET /api/v1/accounts/:id/statuses``.

    Example:
        >>> StatusesRequest().only_media().pinned().since_id("foo").to_querystring()
        '?only_media=1&pinned=1&since_id=foo'
    """

    def __init__(self) -> None:
        self._only_media = False
        self._exclude_replies = False
        self._pinned = False
        self._max_id: str | None = None
        self._since_id: str | None = None
        self._min_id: str | None = None
        self._limit: int | None = None

    def only_media(self) -> StatusesRequest:
        self._only_media = True
        return self

    def exclude_replies(self) -> StatusesRequest:
        self._exclude_replies = True
        return self

    def pinned(self) -> StatusesRequest:
        self._pinned = True
        return self

    def max_id(self, max_id: str) -> StatusesRequest:
        self._max_id = max_id
        return self

    def since_id(self, since_id: str) -> StatusesRequest:
        self._since_id = since_id
        return self

    def min_id(self, min_id: str) -> StatusesRequest:
        self._min_id = min_id
        return self

    def limit(self, limit: int) -> StatusesRequest:
        if limit <= 0:
            raise ValueError("limit must be a positive integer")
        self._limit = limit
        return self

    def to_query(self) -> list[tuple[str, str]]:
        """Query parameters in a stable order; unset options are omitted."""
        q: list[tuple[str, str]] = []
        if self._only_media:
            q.append(("only_media", "1"))
        if self._exclude_replies:
            q.append(("exclude_replies", "1"))
        if self._pinned:
            q.append(("pinned", "1"))
        if self._max_id is not None:
            q.append(("max_id", self._max_id))
        if self._since_id is not None:
            q.append(("since_id", self._since_id))
        if self._min_id is not None:
            q.append(("min_id", self._min_id))
        if self._limit is not None:
            q.append(("limit", str(self._limit)))
        return q

    def to_querystring(self) -> str:
        q = self.to_query()
        return f"?{urlencode(q)}" if q else ""

"""Live timelines over the streaming WebSocket.

The streaming endpoint sits next to the REST API at ``/api/v1/streaming``.
It is selected with the ``stream`` query parameter (plus ``tag`` or ``list``
for hashtag and list streams) and authenticated with ``access_token`` in the
query string rather than a header.

Frames look like ``{"event": "update", "payload": "<json>"}``; ``payload``
is itself JSON-encoded for updates and notifications, a bare status id for
deletes and absent for ``filters_changed``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode, urlsplit, urlunsplit

import websockets
from pydantic import ValidationError

from ...core.enums import StreamKind
from ...core.exceptions import UrlError
from ...models import Event, EventKind, Notification, Status

logger = logging.getLogger(__name__)

STREAMING_PATH = "/api/v1/streaming"

_SCHEME_MAP = {"http": "ws", "https": "wss", "ws": "ws", "wss": "wss"}


def streaming_url(
    base: str,
    token: str,
    stream: StreamKind | str,
    *,
    tag: str | None = None,
    list_id: str | None = None,
) -> str:
    """Build the WebSocket URL for a stream.

    Raises:
        UrlError: ``base`` has a scheme other than http(s)/ws(s)
    """
    parts = urlsplit(f"{base.rstrip('/')}{STREAMING_PATH}")
    scheme = _SCHEME_MAP.get(parts.scheme.lower())
    if scheme is None:
        raise UrlError(f"Bad URL scheme: {parts.scheme or '<none>'}")

    query: list[tuple[str, str]] = [
        ("access_token", token),
        ("stream", stream.value if isinstance(stream, StreamKind) else stream),
    ]
    if tag is not None:
        query.append(("tag", tag))
    if list_id is not None:
        query.append(("list", list_id))
    return urlunsplit((scheme, parts.netloc, parts.path, urlencode(query), ""))


def _validate(model: Any, payload: Any) -> Any:
    if isinstance(payload, (str, bytes)):
        return model.model_validate_json(payload)
    return model.model_validate(payload)


def parse_event(message: str | bytes) -> Event | None:
    """Parse one frame; returns None for frames that carry no known event."""
    try:
        frame = json.loads(message)
    except json.JSONDecodeError:
        logger.warning(f"Failed to parse message: {message!r}")
        return None
    if not isinstance(frame, dict):
        return None

    try:
        kind = EventKind(frame.get("event"))
    except ValueError:
        logger.debug("Skipping unknown event", extra={"event": frame.get("event")})
        return None

    payload: Any = frame.get("payload")
    try:
        if kind is EventKind.UPDATE:
            return Event(kind, _validate(Status, payload))
        if kind is EventKind.NOTIFICATION:
            return Event(kind, _validate(Notification, payload))
    except ValidationError as e:
        logger.warning(f"Invalid {kind.value} payload: {e}")
        return None
    if kind is EventKind.DELETE:
        return Event(kind, str(payload))
    return Event(kind)


@dataclass(frozen=True)
class StreamConfig:
    """WebSocket connection settings."""

    ping_interval: float | None = 20.0
    ping_timeout: float | None = 10.0
    max_size: int | None = 2**20
    open_timeout: float | None = 10.0


class EventReader:
    """Async iterator of events from one stream.

    Opens its own WebSocket connection on iteration and ends when the server
    closes it. There is no reconnect; start a new reader to resume.
    """

    def __init__(self, url: str, config: StreamConfig | None = None) -> None:
        self.url = url
        self._conf = config or StreamConfig()

    def _connect_kwargs(self) -> dict[str, Any]:
        return {
            "ping_interval": self._conf.ping_interval,
            "ping_timeout": self._conf.ping_timeout,
            "max_size": self._conf.max_size,
            "open_timeout": self._conf.open_timeout,
        }

    async def events(self) -> AsyncIterator[Event]:
        async with websockets.connect(self.url, **self._connect_kwargs()) as websocket:
            logger.debug("Stream connected")
            async for message in websocket:
                event = parse_event(message)
                if event is not None:
                    yield event
        logger.debug("Stream closed")

    def __aiter__(self) -> AsyncIterator[Event]:
        return self.events()

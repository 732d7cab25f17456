"""Runtime components: REST dispatch and pagination, live streaming."""

from .rest import (
    HTTPClient,
    HTTPResponse,
    Page,
    RequestDispatcher,
    RESTTransport,
    RouteSpec,
    parse_link_header,
)
from .ws import EventReader, StreamConfig, streaming_url

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "RESTTransport",
    "RequestDispatcher",
    "RouteSpec",
    "Page",
    "parse_link_header",
    "EventReader",
    "StreamConfig",
    "streaming_url",
]

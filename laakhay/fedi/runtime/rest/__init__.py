"""REST runtime abstractions."""

from . import routes
from .dispatcher import RequestDispatcher, build_form
from .envelope import decode
from .http_client import HTTPClient, HTTPResponse
from .links import parse_link_header
from .page import Page
from .routes import RouteSpec
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "RESTTransport",
    "RequestDispatcher",
    "RouteSpec",
    "Page",
    "build_form",
    "decode",
    "parse_link_header",
    "routes",
]

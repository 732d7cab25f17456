"""Core components."""

from .config import ClientConfig
from .enums import FilterContext, HTTPMethod, StreamKind, Visibility
from .exceptions import (
    ApiError,
    ClientError,
    DecodeError,
    FediError,
    HTTPStatusError,
    MissingFieldError,
    ServerError,
    TransportError,
    UrlError,
)

__all__ = [
    "ClientConfig",
    "HTTPMethod",
    "StreamKind",
    "Visibility",
    "FilterContext",
    "FediError",
    "TransportError",
    "HTTPStatusError",
    "ClientError",
    "ServerError",
    "ApiError",
    "DecodeError",
    "MissingFieldError",
    "UrlError",
]

"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.envelope import ApiErrorBody


class FediError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(FediError):
    """Network, connection or timeout failure while talking to the instance.

    The underlying aiohttp/asyncio exception is chained as ``__cause__``.
    """

    pass


class HTTPStatusError(FediError):
    """Instance answered with an error status; the body was not decoded."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class ClientError(HTTPStatusError):
    """4xx response."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Client error: HTTP {status_code}", status_code)


class ServerError(HTTPStatusError):
    """5xx response."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Server error: HTTP {status_code}", status_code)


class ApiError(FediError):
    """Response body is a well-formed API error object.

    Reached when the body does not match the expected payload type but does
    match the ``{"error": ...}`` shape.
    """

    def __init__(self, error: ApiErrorBody) -> None:
        super().__init__(error.error)
        self.error = error


class DecodeError(FediError):
    """Body matched neither the expected payload type nor the API error shape.

    Attributes:
        original: The failure raised while decoding into the expected type
        body: Raw response body
    """

    def __init__(self, original: Exception, body: bytes = b"") -> None:
        super().__init__(f"Failed to decode response: {original}")
        self.original = original
        self.body = body


class MissingFieldError(FediError):
    """A required builder or configuration field was not supplied."""

    def __init__(self, field: str) -> None:
        super().__init__(f"missing field '{field}'")
        self.field = field


class UrlError(FediError):
    """URL cannot be used for the requested operation (e.g. bad scheme)."""

    pass

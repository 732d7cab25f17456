"""Request dispatch: send, classify status, decode.

Every endpoint call goes through ``RequestDispatcher``:

1. The transport sends the request with the bearer token attached.
2. 4xx responses raise ``ClientError`` and 5xx responses raise
   ``ServerError``; the body is not decoded in either case.
3. Anything else is handed to the envelope decoder.

List endpoints go through ``get_page`` and come back wrapped in a ``Page``,
which reuses ``execute`` for later advances so status handling stays the
same on every path.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeVar

import aiohttp

from ...core.enums import HTTPMethod
from ...core.exceptions import ClientError, ServerError
from .envelope import decode
from .http_client import HTTPResponse
from .page import Page
from .transport import RESTTransport

logger = logging.getLogger(__name__)

T = TypeVar("T")

FilePart = str | Path | bytes | tuple[str, bytes]


class RequestDispatcher:
    """Generic request execution shared by all endpoint methods."""

    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    async def execute(
        self,
        method: HTTPMethod,
        url: str,
        *,
        params: Any = None,
        json_body: Any = None,
        form: Any = None,
    ) -> HTTPResponse:
        """Send a request and reject error statuses without reading the body."""
        response = await self._t.send(
            method, url, params=params, json_body=json_body, form=form
        )
        if response.is_client_error:
            logger.debug("Client error", extra={"url": url, "status": response.status})
            raise ClientError(response.status)
        if response.is_server_error:
            logger.debug("Server error", extra={"url": url, "status": response.status})
            raise ServerError(response.status)
        return response

    async def request(
        self,
        method: HTTPMethod,
        url: str,
        output_type: Any,
        *,
        params: Any = None,
        body: Any = None,
    ) -> Any:
        response = await self.execute(method, url, params=params, json_body=body)
        return decode(response.body, output_type)

    async def get(self, url: str, output_type: Any, *, params: Any = None) -> Any:
        return await self.request(HTTPMethod.GET, url, output_type, params=params)

    async def post(
        self, url: str, output_type: Any, *, params: Any = None, body: Any = None
    ) -> Any:
        return await self.request(HTTPMethod.POST, url, output_type, params=params, body=body)

    async def put(
        self, url: str, output_type: Any, *, params: Any = None, body: Any = None
    ) -> Any:
        return await self.request(HTTPMethod.PUT, url, output_type, params=params, body=body)

    async def patch(
        self, url: str, output_type: Any, *, params: Any = None, body: Any = None
    ) -> Any:
        return await self.request(HTTPMethod.PATCH, url, output_type, params=params, body=body)

    async def delete(
        self, url: str, output_type: Any, *, params: Any = None, body: Any = None
    ) -> Any:
        return await self.request(HTTPMethod.DELETE, url, output_type, params=params, body=body)

    async def multipart(
        self,
        method: HTTPMethod,
        url: str,
        output_type: Any,
        *,
        files: Mapping[str, FilePart],
        fields: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a multipart/form-data body.

        Args:
            files: Part name -> file path, raw bytes, or ``(filename, bytes)``
            fields: Plain text parts (e.g. ``description``)
        """
        form = build_form(files, fields)
        response = await self.execute(method, url, form=form)
        return decode(response.body, output_type)

    async def get_page(self, url: str, item_type: Any, *, params: Any = None) -> Page[Any]:
        response = await self.execute(HTTPMethod.GET, url, params=params)
        return Page.from_response(self, item_type, response)


def build_form(
    files: Mapping[str, FilePart], fields: Mapping[str, str] | None = None
) -> aiohttp.FormData:
    """Assemble an ``aiohttp.FormData`` from file parts and text fields."""
    form = aiohttp.FormData()
    for name, part in files.items():
        if isinstance(part, tuple):
            filename, content = part
        elif isinstance(part, bytes):
            filename, content = name, part
        else:
            path = Path(part)
            filename, content = path.name, path.read_bytes()
        form.add_field(name, content, filename=filename)
    for name, value in (fields or {}).items():
        form.add_field(name, value)
    return form

"""Unit tests for RequestDispatcher.

Tests focus on status classification happening before any decoding.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, call, patch

import aiohttp
import pytest

from laakhay.fedi.core import ApiError, ClientError, HTTPMethod, ServerError
from laakhay.fedi.models import Account, Empty
from laakhay.fedi.runtime.rest import HTTPResponse, Page, RequestDispatcher, build_form

ACCOUNT_JSON = b'{"id": "1", "username": "alice", "acct": "alice"}'
URL = "https://example.com/api/v1/accounts/1"


def _dispatcher(*responses: HTTPResponse) -> RequestDispatcher:
    transport = MagicMock()
    transport.send = AsyncMock(side_effect=list(responses))
    return RequestDispatcher(transport)


class TestStatusHandling:
    """Test error statuses short-circuit decoding."""

    @pytest.mark.asyncio
    async def test_client_error_not_decoded(self):
        """Test 4xx raises ClientError even with a valid error body."""
        d = _dispatcher(HTTPResponse(404, b'{"error": "Record not found"}'))
        with pytest.raises(ClientError) as exc_info:
            await d.get(URL, Account)
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_server_error_not_decoded(self):
        """Test 5xx raises ServerError even when the body would decode."""
        d = _dispatcher(HTTPResponse(500, ACCOUNT_JSON))
        with pytest.raises(ServerError) as exc_info:
            await d.get(URL, Account)
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_success_decoded(self):
        """Test 2xx bodies are decoded into the output type."""
        d = _dispatcher(HTTPResponse(200, ACCOUNT_JSON))
        account = await d.get(URL, Account)
        assert account.acct == "alice"

    @pytest.mark.asyncio
    async def test_success_with_error_body(self):
        """Test a 2xx error object is reported as ApiError."""
        d = _dispatcher(HTTPResponse(200, b'{"error": "nope"}'))
        with pytest.raises(ApiError):
            await d.get(URL, Account)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status,error", [(413, ClientError), (502, ServerError)])
    async def test_multipart_checks_status(self, status, error):
        """Test uploads follow the same rules, even when the body would decode."""
        d = _dispatcher(HTTPResponse(status, b"{}"))
        with pytest.raises(error) as exc_info:
            await d.multipart(
                HTTPMethod.POST,
                "https://example.com/api/v1/media",
                Empty,
                files={"file": b"img"},
            )
        assert exc_info.value.status_code == status

    @pytest.mark.asyncio
    async def test_get_page_checks_status(self):
        """Test the initial page request follows the same rules."""
        d = _dispatcher(HTTPResponse(503, b""))
        with pytest.raises(ServerError):
            await d.get_page("https://example.com/api/v1/blocks", Account)


class TestVerbs:
    """Test verb helpers forward to the transport."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "name,method",
        [
            ("post", HTTPMethod.POST),
            ("put", HTTPMethod.PUT),
            ("patch", HTTPMethod.PATCH),
            ("delete", HTTPMethod.DELETE),
        ],
    )
    async def test_body_verbs(self, name, method):
        d = _dispatcher(HTTPResponse(200, b"{}"))
        result = await getattr(d, name)(URL, Empty, body={"a": 1})
        assert result == Empty()
        d._t.send.assert_awaited_once_with(
            method, URL, params=None, json_body={"a": 1}, form=None
        )

    @pytest.mark.asyncio
    async def test_get_page_wraps_items(self):
        """Test get_page returns a Page with links from the header."""
        d = _dispatcher(
            HTTPResponse(
                200,
                b"[" + ACCOUNT_JSON + b"]",
                headers={"Link": '<https://example.com/api/v1/blocks?max_id=1>; rel="next"'},
            )
        )
        page = await d.get_page("https://example.com/api/v1/blocks", Account, params=[("limit", "1")])
        assert isinstance(page, Page)
        assert [a.id for a in page.items] == ["1"]
        assert page.next_url == "https://example.com/api/v1/blocks?max_id=1"
        assert page.prev_url is None
        d._t.send.assert_awaited_once_with(
            HTTPMethod.GET,
            "https://example.com/api/v1/blocks",
            params=[("limit", "1")],
            json_body=None,
            form=None,
        )

    @pytest.mark.asyncio
    async def test_multipart_sends_form(self):
        """Test multipart uploads go out as FormData."""
        d = _dispatcher(HTTPResponse(200, b"{}"))
        await d.multipart(
            HTTPMethod.POST, "https://example.com/api/v1/media", Empty, files={"file": b"img"}
        )
        form = d._t.send.await_args.kwargs["form"]
        assert isinstance(form, aiohttp.FormData)
        assert d._t.send.await_args.kwargs["json_body"] is None


class TestBuildForm:
    """Test build_form part handling."""

    def test_parts(self, tmp_path):
        """Test tuple, bytes and path parts plus text fields."""
        path = tmp_path / "cat.png"
        path.write_bytes(b"png-bytes")

        with patch("laakhay.fedi.runtime.rest.dispatcher.aiohttp.FormData") as form_cls:
            build_form(
                {"file": ("a.jpg", b"jpg-bytes"), "thumbnail": b"raw", "extra": path},
                {"description": "a cat"},
            )

        form_cls.return_value.add_field.assert_has_calls(
            [
                call("file", b"jpg-bytes", filename="a.jpg"),
                call("thumbnail", b"raw", filename="thumbnail"),
                call("extra", b"png-bytes", filename="cat.png"),
                call("description", "a cat"),
            ]
        )

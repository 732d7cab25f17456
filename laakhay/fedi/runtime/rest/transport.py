"""Bearer-authenticated REST transport."""

from __future__ import annotations

from typing import Any

from ...core.enums import HTTPMethod
from ...core.exceptions import MissingFieldError
from .http_client import HTTPClient, HTTPResponse


class RESTTransport:
    """Sends requests to one instance on behalf of one access token.

    Every request carries ``Authorization: Bearer <token>``. The transport
    owns its HTTPClient unless one is passed in.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str | None = None,
        timeout: float = 30.0,
        http: HTTPClient | None = None,
    ) -> None:
        if not token:
            raise MissingFieldError("token")
        self._token = token
        self._owns_http = http is None
        self._http = http or HTTPClient(base_url=base_url, timeout=timeout)

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._token}"}

    async def send(
        self,
        method: HTTPMethod | str,
        url: str,
        *,
        params: Any = None,
        json_body: Any = None,
        form: Any = None,
    ) -> HTTPResponse:
        """Execute one authenticated request."""
        verb = method.value if isinstance(method, HTTPMethod) else method.upper()
        return await self._http.request(
            verb,
            url,
            params=params,
            headers=self._auth_headers(),
            json=json_body,
            data=form,
        )

    async def close(self) -> None:
        if self._owns_http:
            await self._http.close()

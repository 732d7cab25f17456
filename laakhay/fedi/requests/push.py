"""Bodies for web push subscription management."""

from __future__ import annotations

from typing import Any

from ..core.exceptions import MissingFieldError


def _alerts(flags: dict[str, bool]) -> dict[str, Any]:
    return {"data": {"alerts": dict(flags)}} if flags else {}


class AddPushRequest:
    """Fluent body for ``POST /api/v1/push/subscription``.

    ``endpoint``, ``p256dh`` and ``auth`` are required.
    """

    def __init__(self) -> None:
        self._endpoint: str | None = None
        self._p256dh: str | None = None
        self._auth: str | None = None
        self._alerts: dict[str, bool] = {}

    def endpoint(self, url: str) -> AddPushRequest:
        self._endpoint = url
        return self

    def keys(self, p256dh: str, auth: str) -> AddPushRequest:
        self._p256dh = p256dh
        self._auth = auth
        return self

    def alert(self, kind: str, enabled: bool = True) -> AddPushRequest:
        """Toggle one alert type (``follow``, ``favourite``, ``reblog``, ``mention``)."""
        self._alerts[kind] = enabled
        return self

    def build(self) -> dict[str, Any]:
        for name in ("endpoint", "p256dh", "auth"):
            if not getattr(self, f"_{name}"):
                raise MissingFieldError(name)
        body: dict[str, Any] = {
            "subscription": {
                "endpoint": self._endpoint,
                "keys": {"p256dh": self._p256dh, "auth": self._auth},
            }
        }
        body.update(_alerts(self._alerts))
        return body


class UpdatePushRequest:
    """Body for ``PUT /api/v1/push/subscription`` (alert settings only)."""

    def __init__(self) -> None:
        self._alerts: dict[str, bool] = {}

    def alert(self, kind: str, enabled: bool = True) -> UpdatePushRequest:
        self._alerts[kind] = enabled
        return self

    def build(self) -> dict[str, Any]:
        return _alerts(self._alerts) or {"data": {"alerts": {}}}

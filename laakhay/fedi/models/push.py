"""Web push subscription models."""

from pydantic import BaseModel, ConfigDict


class Alerts(BaseModel):
    """Which notification types trigger a push."""

    follow: bool | None = None
    favourite: bool | None = None
    reblog: bool | None = None
    mention: bool | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class Subscription(BaseModel):
    """Push subscription registered for the current access token."""

    id: str | int
    endpoint: str
    server_key: str
    alerts: Alerts | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

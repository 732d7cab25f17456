"""Notification model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .account import Account
from .status import Status


class Notification(BaseModel):
    """A notification (mention, reblog, favourite, follow, ...)."""

    id: str = Field(..., min_length=1)
    type: str
    account: Account
    created_at: datetime | None = None
    status: Status | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

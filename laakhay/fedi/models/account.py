"""Account and relationship models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Account(BaseModel):
    """A user account on the instance or a remote one."""

    id: str = Field(..., min_length=1)
    username: str
    acct: str
    display_name: str = ""
    locked: bool = False
    bot: bool = False
    note: str = ""
    url: str | None = None
    avatar: str | None = None
    header: str | None = None
    created_at: datetime | None = None
    followers_count: int = 0
    following_count: int = 0
    statuses_count: int = 0

    model_config = ConfigDict(frozen=True, extra="allow")


class Relationship(BaseModel):
    """Relationship of the authenticated account to another account."""

    id: str = Field(..., min_length=1)
    following: bool = False
    followed_by: bool = False
    blocking: bool = False
    muting: bool = False
    muting_notifications: bool = False
    requested: bool = False
    domain_blocking: bool = False
    showing_reblogs: bool = True
    endorsed: bool = False

    model_config = ConfigDict(frozen=True, extra="allow")

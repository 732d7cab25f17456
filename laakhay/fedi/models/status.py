"""Status (post) models and the small entities embedded in them."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import Visibility
from .account import Account
from .attachment import Attachment


class Emoji(BaseModel):
    """Custom emoji."""

    shortcode: str
    url: str
    static_url: str | None = None
    visible_in_picker: bool = True

    model_config = ConfigDict(frozen=True, extra="allow")


class Mention(BaseModel):
    id: str
    username: str
    acct: str
    url: str

    model_config = ConfigDict(frozen=True, extra="allow")


class Tag(BaseModel):
    name: str
    url: str

    model_config = ConfigDict(frozen=True, extra="allow")


class Application(BaseModel):
    """Application a status was posted from."""

    name: str
    website: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class Status(BaseModel):
    """A status posted by an account."""

    id: str = Field(..., min_length=1)
    uri: str
    account: Account
    content: str = ""
    created_at: datetime | None = None
    url: str | None = None
    in_reply_to_id: str | None = None
    in_reply_to_account_id: str | None = None
    reblog: Status | None = None
    visibility: Visibility = Visibility.PUBLIC
    sensitive: bool = False
    spoiler_text: str = ""
    language: str | None = None
    reblogs_count: int = 0
    favourites_count: int = 0
    favourited: bool | None = None
    reblogged: bool | None = None
    pinned: bool | None = None
    media_attachments: list[Attachment] = Field(default_factory=list)
    mentions: list[Mention] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
    emojis: list[Emoji] = Field(default_factory=list)
    application: Application | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

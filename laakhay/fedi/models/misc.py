"""Smaller entities: reports, filters, thread context, cards, search results."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import FilterContext
from .account import Account
from .status import Status, Tag


class Report(BaseModel):
    """A report filed against an account."""

    id: str = Field(..., min_length=1)
    action_taken: bool | str = False

    model_config = ConfigDict(frozen=True, extra="allow")


class Filter(BaseModel):
    """Keyword filter."""

    id: str = Field(..., min_length=1)
    phrase: str
    context: list[FilterContext] = Field(default_factory=list)
    expires_at: datetime | None = None
    irreversible: bool = False
    whole_word: bool = False

    model_config = ConfigDict(frozen=True, extra="allow")


class Context(BaseModel):
    """Ancestors and descendants of a status in its thread."""

    ancestors: list[Status]
    descendants: list[Status]

    model_config = ConfigDict(frozen=True, extra="allow")


class Card(BaseModel):
    """Rich preview card for a link in a status."""

    url: str
    title: str
    description: str = ""
    image: str | None = None
    type: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class SearchResult(BaseModel):
    """v1 search result; hashtags are plain strings."""

    accounts: list[Account]
    statuses: list[Status]
    hashtags: list[str]

    model_config = ConfigDict(frozen=True, extra="allow")


class SearchResultV2(BaseModel):
    """v2 search result; hashtags are full tag objects."""

    accounts: list[Account]
    statuses: list[Status]
    hashtags: list[Tag]

    model_config = ConfigDict(frozen=True, extra="allow")

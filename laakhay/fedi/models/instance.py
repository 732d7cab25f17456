"""Instance metadata models."""

from pydantic import BaseModel, ConfigDict, Field

from .account import Account


class StreamingUrls(BaseModel):
    streaming_api: str

    model_config = ConfigDict(frozen=True, extra="allow")


class Instance(BaseModel):
    """Information about the instance itself."""

    uri: str
    title: str
    description: str = ""
    email: str | None = None
    version: str = ""
    urls: StreamingUrls | None = None
    contact_account: Account | None = None
    languages: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="allow")

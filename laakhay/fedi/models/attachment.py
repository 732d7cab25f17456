"""Media attachment model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Attachment(BaseModel):
    """Uploaded media (image, video, audio)."""

    id: str = Field(..., min_length=1)
    type: str
    url: str | None = None
    preview_url: str | None = None
    remote_url: str | None = None
    text_url: str | None = None
    description: str | None = None
    meta: dict[str, Any] | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

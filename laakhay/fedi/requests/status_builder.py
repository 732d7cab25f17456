"""Builder for new statuses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ..core.enums import Visibility
from ..core.exceptions import MissingFieldError


class NewStatus(BaseModel):
    """JSON body of ``POST /api/v1/statuses``."""

    status: str | None = None
    in_reply_to_id: str | None = None
    media_ids: list[str] | None = None
    sensitive: bool | None = None
    spoiler_text: str | None = None
    visibility: Visibility | None = None
    language: str | None = None

    model_config = ConfigDict(frozen=True)

    def to_body(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class StatusBuilder:
    """Fluent builder producing a ``NewStatus``.

    Example:
        >>> status = StatusBuilder().status("hello").visibility(Visibility.UNLISTED).build()
    """

    def __init__(self) -> None:
        self._fields: dict = {}

    def status(self, text: str) -> StatusBuilder:
        self._fields["status"] = text
        return self

    def in_reply_to(self, status_id: str) -> StatusBuilder:
        self._fields["in_reply_to_id"] = status_id
        return self

    def media_ids(self, ids: list[str]) -> StatusBuilder:
        self._fields["media_ids"] = list(ids)
        return self

    def sensitive(self, flag: bool = True) -> StatusBuilder:
        self._fields["sensitive"] = flag
        return self

    def spoiler_text(self, text: str) -> StatusBuilder:
        self._fields["spoiler_text"] = text
        return self

    def visibility(self, visibility: Visibility) -> StatusBuilder:
        self._fields["visibility"] = visibility
        return self

    def language(self, code: str) -> StatusBuilder:
        self._fields["language"] = code
        return self

    def build(self) -> NewStatus:
        """Raises MissingFieldError when there is neither text nor media."""
        if not self._fields.get("status") and not self._fields.get("media_ids"):
            raise MissingFieldError("status")
        return NewStatus(**self._fields)

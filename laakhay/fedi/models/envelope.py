"""Response envelope models: the API error body and the empty payload."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class ApiErrorBody(BaseModel):
    """Error object returned by the instance, e.g. ``{"error": "Record not found"}``.

    Additional fields are preserved for diagnostics.
    """

    error: str
    error_description: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class Empty(BaseModel):
    """Payload of endpoints whose success body carries no information.

    Accepts any JSON value (``{}``, ``{"anything": true}``, ``[]``, ``null``).
    """

    @model_validator(mode="before")
    @classmethod
    def discard_payload(cls, data: Any) -> dict[str, Any]:
        return {}

    model_config = ConfigDict(frozen=True)

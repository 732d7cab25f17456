"""Body for creating or updating a keyword filter."""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import FilterContext


class AddFilterRequest(BaseModel):
    """JSON body of ``POST /api/v1/filters`` and ``PUT /api/v1/filters/:id``.

    ``expires_in`` is in seconds.
    """

    phrase: str = Field(..., min_length=1)
    context: list[FilterContext] = Field(..., min_length=1)
    irreversible: bool | None = None
    whole_word: bool | None = None
    expires_in: int | None = Field(None, gt=0)

    model_config = ConfigDict(frozen=True)

    def expires_after(self, delta: timedelta) -> AddFilterRequest:
        return self.model_copy(update={"expires_in": int(delta.total_seconds())})

    def to_body(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)

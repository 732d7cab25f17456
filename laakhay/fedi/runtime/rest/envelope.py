"""Response envelope decoding.

Turns a raw response body into the payload type an endpoint promises, while
telling apart "the server sent a structured error" from "the body is garbage":

1. Validate the body as the expected type. Success is returned.
2. Otherwise validate the same bytes as ``ApiErrorBody``; a match raises
   ``ApiError``.
3. Otherwise raise ``DecodeError`` carrying the failure from step 1.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from ...core.exceptions import ApiError, DecodeError
from ...models.envelope import ApiErrorBody, Empty

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(output_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(output_type)


def decode(body: bytes, output_type: type[T] | Any) -> T:
    """Decode ``body`` into ``output_type``.

    Args:
        body: Raw response body
        output_type: Model class or typing construct (``list[Status]``, ``str``, ...)

    Raises:
        ApiError: Body is an API error object
        DecodeError: Body matches neither shape; ``original`` is the first failure
    """
    if output_type is Empty and not body.strip():
        return Empty()  # type: ignore[return-value]

    try:
        value = _adapter(output_type).validate_json(body)
    except ValidationError as e:
        text = body.decode("utf-8", errors="replace")
        logger.error(f"Failed to decode response body: {text}")
        try:
            error = ApiErrorBody.model_validate_json(body)
        except ValidationError:
            raise DecodeError(e, body) from e
        raise ApiError(error) from e

    logger.debug(
        "Decoded response body",
        extra={
            "output_type": getattr(output_type, "__name__", str(output_type)),
            "body": body.decode("utf-8", errors="replace"),
        },
    )
    return value

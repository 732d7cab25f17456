"""Events delivered by the streaming API."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class EventKind(Enum):
    """Types of streaming events."""

    UPDATE = "update"
    NOTIFICATION = "notification"
    DELETE = "delete"
    FILTERS_CHANGED = "filters_changed"


@dataclass(frozen=True)
class Event:
    """Structured event from a live timeline.

    ``payload`` is a ``Status`` for UPDATE, a ``Notification`` for
    NOTIFICATION, the deleted status id for DELETE and ``None`` for
    FILTERS_CHANGED.
    """

    kind: EventKind
    payload: Any = None

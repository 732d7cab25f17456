"""Request payload builders."""

from .credentials import UpdateCredsRequest
from .filters import AddFilterRequest
from .media import MediaBuilder
from .push import AddPushRequest, UpdatePushRequest
from .status_builder import NewStatus, StatusBuilder
from .statuses import StatusesRequest

__all__ = [
    "AddFilterRequest",
    "AddPushRequest",
    "MediaBuilder",
    "NewStatus",
    "StatusBuilder",
    "StatusesRequest",
    "UpdateCredsRequest",
    "UpdatePushRequest",
]

"""Laakhay Fedi - Typed async client for federated social instances."""

from .clients.instance_client import InstanceClient, InstanceClientBuilder
from .core import (
    ApiError,
    ClientConfig,
    ClientError,
    DecodeError,
    FediError,
    FilterContext,
    HTTPMethod,
    HTTPStatusError,
    MissingFieldError,
    ServerError,
    StreamKind,
    TransportError,
    UrlError,
    Visibility,
)
from .models import (
    Account,
    ApiErrorBody,
    Attachment,
    Card,
    Context,
    Emoji,
    Empty,
    Event,
    EventKind,
    Filter,
    Instance,
    Notification,
    Relationship,
    Report,
    SearchResult,
    SearchResultV2,
    Status,
    Subscription,
)
from .requests import (
    AddFilterRequest,
    AddPushRequest,
    MediaBuilder,
    NewStatus,
    StatusBuilder,
    StatusesRequest,
    UpdateCredsRequest,
    UpdatePushRequest,
)
from .runtime import EventReader, Page, RouteSpec, StreamConfig

__version__ = "0.1.0"

__all__ = [
    # Client
    "InstanceClient",
    "InstanceClientBuilder",
    "ClientConfig",
    # Runtime
    "Page",
    "RouteSpec",
    "EventReader",
    "StreamConfig",
    # Enums
    "HTTPMethod",
    "StreamKind",
    "Visibility",
    "FilterContext",
    # Models
    "Account",
    "ApiErrorBody",
    "Attachment",
    "Card",
    "Context",
    "Emoji",
    "Empty",
    "Event",
    "EventKind",
    "Filter",
    "Instance",
    "Notification",
    "Relationship",
    "Report",
    "SearchResult",
    "SearchResultV2",
    "Status",
    "Subscription",
    # Requests
    "AddFilterRequest",
    "AddPushRequest",
    "MediaBuilder",
    "NewStatus",
    "StatusBuilder",
    "StatusesRequest",
    "UpdateCredsRequest",
    "UpdatePushRequest",
    # Exceptions
    "FediError",
    "TransportError",
    "HTTPStatusError",
    "ClientError",
    "ServerError",
    "ApiError",
    "DecodeError",
    "MissingFieldError",
    "UrlError",
]

"""Entity models returned by the instance API.

Architecture:
    Pydantic v2 models, immutable (frozen=True). Entities declare only the
    fields the library relies on and keep everything else as extra attributes
    (extra="allow"), so unknown server fields never break decoding.

Model Categories:
    - Envelope: ApiErrorBody, Empty
    - Accounts: Account, Relationship
    - Statuses: Status, Attachment, Emoji, Mention, Tag, Application, Card, Context
    - Other: Notification, Instance, Report, Filter, SearchResult(V2), Subscription
    - Streaming: Event, EventKind
"""

from .account import Account, Relationship
from .attachment import Attachment
from .envelope import ApiErrorBody, Empty
from .events import Event, EventKind
from .instance import Instance, StreamingUrls
from .misc import Card, Context, Filter, Report, SearchResult, SearchResultV2
from .notification import Notification
from .push import Alerts, Subscription
from .status import Application, Emoji, Mention, Status, Tag

__all__ = [
    "Account",
    "Alerts",
    "ApiErrorBody",
    "Application",
    "Attachment",
    "Card",
    "Context",
    "Emoji",
    "Empty",
    "Event",
    "EventKind",
    "Filter",
    "Instance",
    "Mention",
    "Notification",
    "Relationship",
    "Report",
    "SearchResult",
    "SearchResultV2",
    "Status",
    "StreamingUrls",
    "Subscription",
    "Tag",
]

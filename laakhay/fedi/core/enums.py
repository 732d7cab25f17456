"""Core enumerations shared across the REST and streaming layers.

Key Types:
    - HTTPMethod: Verbs used by route descriptors
    - StreamKind: Values of the ``stream`` query parameter for live timelines
    - Visibility: Audience of a posted status
    - FilterContext: Where a keyword filter applies
"""

from enum import Enum


class HTTPMethod(str, Enum):
    """HTTP verbs used by the instance API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class StreamKind(str, Enum):
    """Live timelines exposed by the streaming endpoint."""

    USER = "user"
    PUBLIC = "public"
    PUBLIC_LOCAL = "public:local"
    HASHTAG = "hashtag"
    HASHTAG_LOCAL = "hashtag:local"
    LIST = "list"
    DIRECT = "direct"


class Visibility(str, Enum):
    """Status visibility."""

    PUBLIC = "public"
    UNLISTED = "unlisted"
    PRIVATE = "private"
    DIRECT = "direct"


class FilterContext(str, Enum):
    """Contexts in which a keyword filter is applied."""

    HOME = "home"
    NOTIFICATIONS = "notifications"
    PUBLIC = "public"
    THREAD = "thread"

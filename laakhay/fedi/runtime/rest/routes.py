"""Route descriptors for the instance REST API.

Each endpoint is a module-level ``RouteSpec`` constant: the HTTP method, the
path template (relative to the instance base, with at most one ``{id}``
placeholder) and the type the success body decodes to. The client is generic
over these descriptors instead of carrying per-endpoint request plumbing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...core.enums import HTTPMethod
from ...models import (
    Account,
    Attachment,
    Card,
    Context,
    Emoji,
    Empty,
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

ID_PLACEHOLDER = "{id}"


@dataclass(frozen=True)
class RouteSpec:
    """Static description of one endpoint.

    For paged routes ``output`` is the item type; the body decodes to a list
    of it.
    """

    id: str
    method: HTTPMethod
    path: str
    output: Any
    paged: bool = False
    query: tuple[tuple[str, str], ...] = field(default=())

    @property
    def takes_id(self) -> bool:
        return ID_PLACEHOLDER in self.path

    def build_path(self, id: str | None = None) -> str:
        """Substitute ``id`` into the template verbatim (no validation)."""
        if self.takes_id:
            if id is None:
                raise ValueError(f"Route {self.id!r} requires an id")
            return self.path.replace(ID_PLACEHOLDER, id)
        if id is not None:
            raise ValueError(f"Route {self.id!r} does not take an id")
        return self.path

    def build_url(self, base: str, id: str | None = None) -> str:
        return f"{base}{self.build_path(id)}"


def _get(id: str, path: str, output: Any, **kw: Any) -> RouteSpec:
    return RouteSpec(id=id, method=HTTPMethod.GET, path=path, output=output, **kw)


def _post(id: str, path: str, output: Any, **kw: Any) -> RouteSpec:
    return RouteSpec(id=id, method=HTTPMethod.POST, path=path, output=output, **kw)


def _delete(id: str, path: str, output: Any, **kw: Any) -> RouteSpec:
    return RouteSpec(id=id, method=HTTPMethod.DELETE, path=path, output=output, **kw)


# Paged routes
FAVOURITES = _get("favourites", "/api/v1/favourites", Status, paged=True)
BLOCKS = _get("blocks", "/api/v1/blocks", Account, paged=True)
DOMAIN_BLOCKS = _get("domain_blocks", "/api/v1/domain_blocks", str, paged=True)
FOLLOW_REQUESTS = _get("follow_requests", "/api/v1/follow_requests", Account, paged=True)
HOME_TIMELINE = _get("home_timeline", "/api/v1/timelines/home", Status, paged=True)
LOCAL_TIMELINE = _get(
    "local_timeline", "/api/v1/timelines/public", Status, paged=True, query=(("local", "true"),)
)
FEDERATED_TIMELINE = _get(
    "federated_timeline",
    "/api/v1/timelines/public",
    Status,
    paged=True,
    query=(("local", "false"),),
)
HASHTAG_TIMELINE = _get("hashtag_timeline", "/api/v1/timelines/tag/{id}", Status, paged=True)
EMOJIS = _get("custom_emojis", "/api/v1/custom_emojis", Emoji, paged=True)
MUTES = _get("mutes", "/api/v1/mutes", Account, paged=True)
NOTIFICATIONS = _get("notifications", "/api/v1/notifications", Notification, paged=True)
REPORTS = _get("reports", "/api/v1/reports", Report, paged=True)
SEARCH_ACCOUNTS = _get("search_accounts", "/api/v1/accounts/search", Account, paged=True)
ENDORSEMENTS = _get("endorsements", "/api/v1/endorsements", Account, paged=True)
RELATIONSHIPS = _get(
    "relationships", "/api/v1/accounts/relationships", Relationship, paged=True
)

# Paged routes with id
FOLLOWERS = _get("followers", "/api/v1/accounts/{id}/followers", Account, paged=True)
FOLLOWING = _get("following", "/api/v1/accounts/{id}/following", Account, paged=True)
ACCOUNT_STATUSES = _get("statuses", "/api/v1/accounts/{id}/statuses", Status, paged=True)
REBLOGGED_BY = _get("reblogged_by", "/api/v1/statuses/{id}/reblogged_by", Account, paged=True)
FAVOURITED_BY = _get(
    "favourited_by", "/api/v1/statuses/{id}/favourited_by", Account, paged=True
)

# Plain routes
UNBLOCK_DOMAIN = _delete("unblock_domain", "/api/v1/domain_blocks", Empty)
INSTANCE = _get("instance", "/api/v1/instance", Instance)
VERIFY_CREDENTIALS = _get("verify_credentials", "/api/v1/accounts/verify_credentials", Account)
REPORT = _post("report", "/api/v1/reports", Report)
BLOCK_DOMAIN = _post("block_domain", "/api/v1/domain_blocks", Empty)
AUTHORIZE_FOLLOW_REQUEST = _post(
    "authorize_follow_request", "/api/v1/accounts/follow_requests/authorize", Empty
)
REJECT_FOLLOW_REQUEST = _post(
    "reject_follow_request", "/api/v1/accounts/follow_requests/reject", Empty
)
SEARCH = _get("search", "/api/v1/search", SearchResult)
SEARCH_V2 = _get("search_v2", "/api/v2/search", SearchResultV2)
FOLLOWS = _post("follows", "/api/v1/follows", Account)
CLEAR_NOTIFICATIONS = _post("clear_notifications", "/api/v1/notifications/clear", Empty)
DISMISS_NOTIFICATION = _post("dismiss_notification", "/api/v1/notifications/dismiss", Empty)
GET_PUSH_SUBSCRIPTION = _get("get_push_subscription", "/api/v1/push/subscription", Subscription)
ADD_PUSH_SUBSCRIPTION = _post("add_push_subscription", "/api/v1/push/subscription", Subscription)
UPDATE_PUSH_DATA = RouteSpec(
    id="update_push_data",
    method=HTTPMethod.PUT,
    path="/api/v1/push/subscription",
    output=Subscription,
)
DELETE_PUSH_SUBSCRIPTION = _delete(
    "delete_push_subscription", "/api/v1/push/subscription", Empty
)
GET_FILTERS = _get("get_filters", "/api/v1/filters", list[Filter])
ADD_FILTER = _post("add_filter", "/api/v1/filters", Filter)
UPDATE_FILTER = RouteSpec(
    id="update_filter", method=HTTPMethod.PUT, path="/api/v1/filters/{id}", output=Filter
)
GET_FOLLOW_SUGGESTIONS = _get("get_follow_suggestions", "/api/v1/suggestions", list[Account])
UPDATE_CREDENTIALS = RouteSpec(
    id="update_credentials",
    method=HTTPMethod.PATCH,
    path="/api/v1/accounts/update_credentials",
    output=Account,
)
NEW_STATUS = _post("new_status", "/api/v1/statuses", Status)
MEDIA = _post("media", "/api/v1/media", Attachment)

# Id routes
DELETE_FILTER = _delete("delete_filter", "/api/v1/filters/{id}", Empty)
DELETE_FROM_SUGGESTIONS = _delete("delete_from_suggestions", "/api/v1/suggestions/{id}", Empty)
DELETE_STATUS = _delete("delete_status", "/api/v1/statuses/{id}", Empty)
GET_ACCOUNT = _get("get_account", "/api/v1/accounts/{id}", Account)
GET_CARD = _get("get_card", "/api/v1/statuses/{id}/card", Card)
GET_CONTEXT = _get("get_context", "/api/v1/statuses/{id}/context", Context)
GET_FILTER = _get("get_filter", "/api/v1/filters/{id}", Filter)
GET_NOTIFICATION = _get("get_notification", "/api/v1/notifications/{id}", Notification)
GET_STATUS = _get("get_status", "/api/v1/statuses/{id}", Status)
MUTE = _post("mute", "/api/v1/accounts/{id}/mute", Relationship)
UNMUTE = _post("unmute", "/api/v1/accounts/{id}/unmute", Relationship)
BLOCK = _post("block", "/api/v1/accounts/{id}/block", Relationship)
ENDORSE_USER = _post("endorse_user", "/api/v1/accounts/{id}/pin", Relationship)
FAVOURITE = _post("favourite", "/api/v1/statuses/{id}/favourite", Status)
FOLLOW = _post("follow", "/api/v1/accounts/{id}/follow", Relationship)
REBLOG = _post("reblog", "/api/v1/statuses/{id}/reblog", Status)
UNBLOCK = _post("unblock", "/api/v1/accounts/{id}/unblock", Relationship)
UNENDORSE_USER = _post("unendorse_user", "/api/v1/accounts/{id}/unpin", Relationship)
UNFAVOURITE = _post("unfavourite", "/api/v1/statuses/{id}/unfavourite", Status)
UNFOLLOW = _post("unfollow", "/api/v1/accounts/{id}/unfollow", Relationship)
UNREBLOG = _post("unreblog", "/api/v1/statuses/{id}/unreblog", Status)


ROUTES: dict[str, RouteSpec] = {
    spec.id: spec for spec in list(globals().values()) if isinstance(spec, RouteSpec)
}

"""High-level client for one instance.

Architecture:
    ``InstanceClient`` owns a RESTTransport (aiohttp session + bearer token)
    and a RequestDispatcher. Endpoint methods are thin wrappers that pick a
    RouteSpec from ``runtime.rest.routes`` and call one of two generic
    entry points:

    - ``call(route, ...)``: single resource, decoded to ``route.output``
    - ``call_paged(route, ...)``: list wrapped in a ``Page`` cursor

    Pages returned by the client keep using its session; keep the client
    open (``async with``) while iterating them.

Example:
    >>> async with InstanceClient(ClientConfig.from_env()) as client:
    ...     page = await client.get_home_timeline()
    ...     async for status in page.items_iter():
    ...         print(status.content)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..core.config import ClientConfig
from ..core.enums import HTTPMethod, StreamKind
from ..core.exceptions import MissingFieldError
from ..models import (
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
from ..requests import (
    AddFilterRequest,
    AddPushRequest,
    MediaBuilder,
    NewStatus,
    StatusBuilder,
    StatusesRequest,
    UpdateCredsRequest,
    UpdatePushRequest,
)
from ..runtime.rest import routes as r
from ..runtime.rest.dispatcher import RequestDispatcher
from ..runtime.rest.http_client import HTTPClient
from ..runtime.rest.page import Page
from ..runtime.rest.routes import RouteSpec
from ..runtime.rest.transport import RESTTransport
from ..runtime.ws.streaming import EventReader, StreamConfig, streaming_url

logger = logging.getLogger(__name__)

QueryParams = Mapping[str, Any] | Iterable[tuple[str, Any]]


def _query(route: RouteSpec, params: QueryParams | None) -> list[tuple[str, str]] | None:
    """Merge the route's static query with call parameters; drops ``None`` values."""
    q: list[tuple[str, str]] = list(route.query)
    if params:
        items = params.items() if isinstance(params, Mapping) else params
        for key, value in items:
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            q.append((key, str(value)))
    return q or None


class InstanceClient:
    """Typed async client for the instance REST and streaming APIs."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        http: HTTPClient | None = None,
        stream_config: StreamConfig | None = None,
    ) -> None:
        self.config = config
        self._transport = RESTTransport(config.token, timeout=config.timeout, http=http)
        self._dispatcher = RequestDispatcher(self._transport)
        self._stream_config = stream_config

    @property
    def base(self) -> str:
        return self.config.base

    @property
    def token(self) -> str:
        return self.config.token

    def route(self, path: str) -> str:
        """Absolute URL for ``path`` on this instance."""
        return f"{self.config.base}{path}"

    # ------------------------------------------------------------------
    # Generic entry points
    # ------------------------------------------------------------------

    async def call(
        self,
        route: RouteSpec,
        *,
        id: str | None = None,
        params: QueryParams | None = None,
        body: Any = None,
    ) -> Any:
        """Execute a single-resource route and decode its payload."""
        if route.paged:
            raise ValueError(f"Route {route.id!r} is paged; use call_paged()")
        url = route.build_url(self.config.base, id)
        logger.debug("Calling route", extra={"route": route.id, "method": route.method.value})
        return await self._dispatcher.request(
            route.method, url, route.output, params=_query(route, params), body=body
        )

    async def call_paged(
        self,
        route: RouteSpec,
        *,
        id: str | None = None,
        params: QueryParams | None = None,
    ) -> Page[Any]:
        """Execute a list route and wrap the first batch in a Page."""
        if not route.paged or route.method is not HTTPMethod.GET:
            raise ValueError(f"Route {route.id!r} is not a paged GET route")
        url = route.build_url(self.config.base, id)
        logger.debug("Calling paged route", extra={"route": route.id})
        return await self._dispatcher.get_page(url, route.output, params=_query(route, params))

    # ------------------------------------------------------------------
    # Paged routes
    # ------------------------------------------------------------------

    async def favourites(self) -> Page[Status]:
        return await self.call_paged(r.FAVOURITES)

    async def blocks(self) -> Page[Account]:
        return await self.call_paged(r.BLOCKS)

    async def domain_blocks(self) -> Page[str]:
        return await self.call_paged(r.DOMAIN_BLOCKS)

    async def follow_requests(self) -> Page[Account]:
        return await self.call_paged(r.FOLLOW_REQUESTS)

    async def get_home_timeline(self) -> Page[Status]:
        return await self.call_paged(r.HOME_TIMELINE)

    async def get_local_timeline(self) -> Page[Status]:
        return await self.call_paged(r.LOCAL_TIMELINE)

    async def get_federated_timeline(self) -> Page[Status]:
        return await self.call_paged(r.FEDERATED_TIMELINE)

    async def get_emojis(self) -> Page[Emoji]:
        return await self.call_paged(r.EMOJIS)

    async def mutes(self) -> Page[Account]:
        return await self.call_paged(r.MUTES)

    async def notifications(self) -> Page[Notification]:
        return await self.call_paged(r.NOTIFICATIONS)

    async def reports(self) -> Page[Report]:
        return await self.call_paged(r.REPORTS)

    async def get_endorsements(self) -> Page[Account]:
        return await self.call_paged(r.ENDORSEMENTS)

    async def search_accounts(
        self, q: str, limit: int | None = None, following: bool = False
    ) -> Page[Account]:
        """Search accounts by name; ``user@domain`` terms may trigger a remote lookup."""
        return await self.call_paged(
            r.SEARCH_ACCOUNTS, params={"q": q, "limit": limit, "following": following}
        )

    async def followers(self, id: str) -> Page[Account]:
        return await self.call_paged(r.FOLLOWERS, id=id)

    async def following(self, id: str) -> Page[Account]:
        return await self.call_paged(r.FOLLOWING, id=id)

    async def reblogged_by(self, id: str) -> Page[Account]:
        return await self.call_paged(r.REBLOGGED_BY, id=id)

    async def favourited_by(self, id: str) -> Page[Account]:
        return await self.call_paged(r.FAVOURITED_BY, id=id)

    async def get_hashtag_timeline(self, hashtag: str, local: bool = False) -> Page[Status]:
        """Timeline of a hashtag (without the leading ``#``), local or federated."""
        params = {"local": "1"} if local else None
        return await self.call_paged(r.HASHTAG_TIMELINE, id=hashtag, params=params)

    async def statuses(self, id: str, request: StatusesRequest | None = None) -> Page[Status]:
        """Statuses of one account, optionally filtered.

        Example:
            >>> page = await client.statuses("42", StatusesRequest().only_media())
        """
        params = request.to_query() if request is not None else None
        return await self.call_paged(r.ACCOUNT_STATUSES, id=id, params=params)

    async def relationships(self, ids: list[str]) -> Page[Relationship]:
        """Relationships of the authenticated account to each of ``ids``."""
        if not ids:
            raise ValueError("ids must not be empty")
        key = "id" if len(ids) == 1 else "id[]"
        return await self.call_paged(r.RELATIONSHIPS, params=[(key, i) for i in ids])

    async def follows_me(self) -> Page[Account]:
        """Accounts following the authenticated account."""
        me = await self.verify_credentials()
        return await self.followers(me.id)

    async def followed_by_me(self) -> Page[Account]:
        """Accounts the authenticated account follows."""
        me = await self.verify_credentials()
        return await self.following(me.id)

    # ------------------------------------------------------------------
    # Single-resource routes
    # ------------------------------------------------------------------

    async def instance(self) -> Instance:
        return await self.call(r.INSTANCE)

    async def verify_credentials(self) -> Account:
        return await self.call(r.VERIFY_CREDENTIALS)

    async def block_domain(self, domain: str) -> Empty:
        return await self.call(r.BLOCK_DOMAIN, body={"domain": domain})

    async def unblock_domain(self, domain: str) -> Empty:
        return await self.call(r.UNBLOCK_DOMAIN, body={"domain": domain})

    async def report(self, account_id: str, status_ids: list[str], comment: str) -> Report:
        return await self.call(
            r.REPORT,
            body={"account_id": account_id, "status_ids": list(status_ids), "comment": comment},
        )

    async def authorize_follow_request(self, id: str) -> Empty:
        return await self.call(r.AUTHORIZE_FOLLOW_REQUEST, body={"id": id})

    async def reject_follow_request(self, id: str) -> Empty:
        return await self.call(r.REJECT_FOLLOW_REQUEST, body={"id": id})

    async def search(self, q: str, resolve: bool = False) -> SearchResult:
        return await self.call(r.SEARCH, params={"q": q, "resolve": resolve})

    async def search_v2(self, q: str, resolve: bool = False) -> SearchResultV2:
        return await self.call(r.SEARCH_V2, params={"q": q, "resolve": resolve})

    async def follows(self, uri: str) -> Account:
        """Follow a remote account by ``user@domain``."""
        return await self.call(r.FOLLOWS, body={"uri": uri})

    async def clear_notifications(self) -> Empty:
        return await self.call(r.CLEAR_NOTIFICATIONS)

    async def dismiss_notification(self, id: str) -> Empty:
        return await self.call(r.DISMISS_NOTIFICATION, body={"id": id})

    async def get_push_subscription(self) -> Subscription:
        return await self.call(r.GET_PUSH_SUBSCRIPTION)

    async def delete_push_subscription(self) -> Empty:
        return await self.call(r.DELETE_PUSH_SUBSCRIPTION)

    async def add_push_subscription(self, request: AddPushRequest) -> Subscription:
        return await self.call(r.ADD_PUSH_SUBSCRIPTION, body=request.build())

    async def update_push_data(self, request: UpdatePushRequest) -> Subscription:
        return await self.call(r.UPDATE_PUSH_DATA, body=request.build())

    async def get_filters(self) -> list[Filter]:
        return await self.call(r.GET_FILTERS)

    async def add_filter(self, request: AddFilterRequest) -> Filter:
        return await self.call(r.ADD_FILTER, body=request.to_body())

    async def update_filter(self, id: str, request: AddFilterRequest) -> Filter:
        return await self.call(r.UPDATE_FILTER, id=id, body=request.to_body())

    async def get_follow_suggestions(self) -> list[Account]:
        return await self.call(r.GET_FOLLOW_SUGGESTIONS)

    async def update_credentials(self, request: UpdateCredsRequest) -> Account:
        return await self.call(r.UPDATE_CREDENTIALS, body=request.build())

    async def new_status(self, status: NewStatus | StatusBuilder) -> Status:
        """Post a new status."""
        if isinstance(status, StatusBuilder):
            status = status.build()
        return await self.call(r.NEW_STATUS, body=status.to_body())

    async def media(self, media: MediaBuilder) -> Attachment:
        """Upload a media file; attach it later via ``StatusBuilder.media_ids``."""
        route = r.MEDIA
        return await self._dispatcher.multipart(
            route.method,
            route.build_url(self.config.base),
            route.output,
            files=media.files(),
            fields=media.fields(),
        )

    # ------------------------------------------------------------------
    # Id routes
    # ------------------------------------------------------------------

    async def get_account(self, id: str) -> Account:
        return await self.call(r.GET_ACCOUNT, id=id)

    async def get_status(self, id: str) -> Status:
        return await self.call(r.GET_STATUS, id=id)

    async def get_context(self, id: str) -> Context:
        return await self.call(r.GET_CONTEXT, id=id)

    async def get_card(self, id: str) -> Card:
        return await self.call(r.GET_CARD, id=id)

    async def get_notification(self, id: str) -> Notification:
        return await self.call(r.GET_NOTIFICATION, id=id)

    async def get_filter(self, id: str) -> Filter:
        return await self.call(r.GET_FILTER, id=id)

    async def delete_filter(self, id: str) -> Empty:
        return await self.call(r.DELETE_FILTER, id=id)

    async def delete_from_suggestions(self, id: str) -> Empty:
        return await self.call(r.DELETE_FROM_SUGGESTIONS, id=id)

    async def delete_status(self, id: str) -> Empty:
        return await self.call(r.DELETE_STATUS, id=id)

    async def follow(self, id: str) -> Relationship:
        return await self.call(r.FOLLOW, id=id)

    async def unfollow(self, id: str) -> Relationship:
        return await self.call(r.UNFOLLOW, id=id)

    async def block(self, id: str) -> Relationship:
        return await self.call(r.BLOCK, id=id)

    async def unblock(self, id: str) -> Relationship:
        return await self.call(r.UNBLOCK, id=id)

    async def mute(self, id: str) -> Relationship:
        return await self.call(r.MUTE, id=id)

    async def unmute(self, id: str) -> Relationship:
        return await self.call(r.UNMUTE, id=id)

    async def endorse_user(self, id: str) -> Relationship:
        return await self.call(r.ENDORSE_USER, id=id)

    async def unendorse_user(self, id: str) -> Relationship:
        return await self.call(r.UNENDORSE_USER, id=id)

    async def favourite(self, id: str) -> Status:
        return await self.call(r.FAVOURITE, id=id)

    async def unfavourite(self, id: str) -> Status:
        return await self.call(r.UNFAVOURITE, id=id)

    async def reblog(self, id: str) -> Status:
        return await self.call(r.REBLOG, id=id)

    async def unreblog(self, id: str) -> Status:
        return await self.call(r.UNREBLOG, id=id)

    # ------------------------------------------------------------------
    # Streaming
    # ------------------------------------------------------------------

    def _stream(
        self, kind: StreamKind, *, tag: str | None = None, list_id: str | None = None
    ) -> EventReader:
        url = streaming_url(self.config.base, self.config.token, kind, tag=tag, list_id=list_id)
        return EventReader(url, self._stream_config)

    def streaming_user(self) -> EventReader:
        """Home timeline updates and notifications of the authenticated account."""
        return self._stream(StreamKind.USER)

    def streaming_public(self) -> EventReader:
        return self._stream(StreamKind.PUBLIC)

    def streaming_local(self) -> EventReader:
        return self._stream(StreamKind.PUBLIC_LOCAL)

    def streaming_public_hashtag(self, hashtag: str) -> EventReader:
        return self._stream(StreamKind.HASHTAG, tag=hashtag)

    def streaming_local_hashtag(self, hashtag: str) -> EventReader:
        return self._stream(StreamKind.HASHTAG_LOCAL, tag=hashtag)

    def streaming_list(self, list_id: str) -> EventReader:
        return self._stream(StreamKind.LIST, list_id=list_id)

    def streaming_direct(self) -> EventReader:
        return self._stream(StreamKind.DIRECT)

    # ------------------------------------------------------------------

    async def close(self) -> None:
        """Close the underlying HTTP session (if the client created it)."""
        await self._transport.close()

    async def __aenter__(self) -> InstanceClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class InstanceClientBuilder:
    """Assembles an InstanceClient; ``build()`` fails fast without a config."""

    def __init__(self) -> None:
        self._config: ClientConfig | None = None
        self._http: HTTPClient | None = None
        self._stream_config: StreamConfig | None = None

    def config(self, config: ClientConfig) -> InstanceClientBuilder:
        self._config = config
        return self

    def http_client(self, http: HTTPClient) -> InstanceClientBuilder:
        self._http = http
        return self

    def stream_config(self, stream_config: StreamConfig) -> InstanceClientBuilder:
        self._stream_config = stream_config
        return self

    def build(self) -> InstanceClient:
        if self._config is None:
            raise MissingFieldError("config")
        return InstanceClient(self._config, http=self._http, stream_config=self._stream_config)

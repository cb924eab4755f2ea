"""Observable store for the admin UI's link list

This module provides LinkStore, the single source of truth for the current
page of links and for the status of the most recent operation against it.

Responsibilities:
    - Fetch, create, update and delete links through an injected ApiClient;
    - Expose one consistent snapshot (records, total, status, last_error) to
      any number of subscribers;
    - Re-fetch the list after every successful mutation instead of patching
      records locally;
    - Accept both wire shapes of the list endpoint;
    - Record every failure in the snapshot, re-raising it from mutations only.

Classes:
    LinkStore:
        Stateful, observable container over a link service API client.

Example:
    >>> store = LinkStore(api_client)
    >>> unsubscribe = store.subscribe(lambda state: render(state))

    >>> await store.list(ListQuery(page=1, page_size=20, sort_by='created_at'))
    >>> store.status
    <StoreStatus.IDLE: 'idle'>
    >>> store.total
    42

    >>> await store.create('promo', 'https://example.com/promo')
    >>> any(link.slug == 'promo' for link in store.records)
    True

    >>> await store.remove('missing')
    Traceback (most recent call last):
        ...
    linkhub.api.exceptions.LinkNotFoundError: not found
    >>> store.last_error
    'not found'

NOTE:
    Operations are not serialized. When two operations overlap, the last one
    to complete decides the final snapshot, and a superseded list response is
    still applied when it arrives. Callers should disable triggers while
    status is 'loading'.
"""

import logging
from dataclasses import replace
from typing import Any, Optional
from collections.abc import Awaitable, Callable, Mapping

from beartype import beartype

from linkhub.api import ApiClient, ApiResponse
from linkhub.models import LinkRecord, LinkPatch, ListQuery, StoreState, StoreStatus
from linkhub.store.helpers import WireShape, error_message, link_path, normalize_list_payload
from linkhub.types import StateListener, Unsubscribe
from linkhub.utils.constants import (
    LINKS_PATH,
    FETCH_LINKS_FAILED,
    FETCH_LINK_FAILED,
    CREATE_LINK_FAILED,
    UPDATE_LINK_FAILED,
    DELETE_LINK_FAILED,
)


logger = logging.getLogger(__name__)


class LinkStore:
    """Observable store of links backed by a link service API client

    Attributes:
        api (ApiClient):
            Collaborator performing the HTTP calls.
        legacy_payloads_seen (int):
            Number of list responses received in the legacy (bare array)
            shape. Used to track the backend migration.

    Properties:
        state (StoreState): current immutable snapshot.
        records, total, status, last_error: fields of the current snapshot.
        query (ListQuery): query of the most recently issued list() call.

    Methods:
        subscribe(listener) -> Callable[[], None]:
            Call listener with every new snapshot. Returns an unsubscribe function.

        list(query: Optional[ListQuery] = None) -> None:
            Replace records and total with a fresh page. Never raises on API failure.

        get(slug: str) -> LinkRecord:
            Fetch one link without touching records. Raises on failure.

        create(slug: str, url: str) -> None:
        update(slug: str, patch: LinkPatch | Mapping) -> None:
        remove(slug: str) -> None:
            Perform the mutation, then re-list with the last query. Raise on failure.
    """

    def __init__(self, api: ApiClient, query: Optional[ListQuery] = None):
        """Initialize an empty store

        Args:
            api (ApiClient):
                Link service API client.
            query (Optional[ListQuery]):
                Initial query remembered for re-lists. Defaults to ListQuery()
                (server defaults).
        """
        self.api = api
        self.legacy_payloads_seen = 0
        self._state = StoreState()
        self._query = ListQuery() if query is None else query
        self._listeners: list[StateListener] = []

    # -------------------------------
    # Observable state
    # -------------------------------

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def records(self) -> tuple[LinkRecord, ...]:
        return self._state.records

    @property
    def total(self) -> int:
        return self._state.total

    @property
    def status(self) -> StoreStatus:
        return self._state.status

    @property
    def last_error(self) -> Optional[str]:
        return self._state.last_error

    @property
    def query(self) -> ListQuery:
        return self._query

    def subscribe(self, listener: StateListener) -> Unsubscribe:
        """Register a listener called with every new snapshot

        Listeners run synchronously, in registration order, right after the
        snapshot changes. A failing listener is logged and does not affect the
        store or the other listeners.

        Args:
            listener (StateListener):
                Callback receiving the new StoreState.

        Returns:
            Unsubscribe: function removing the listener (safe to call twice).
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, **changes: Any) -> None:
        state = replace(self._state, **changes)
        if state == self._state:
            return

        self._state = state
        for listener in tuple(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception('State listener failed.', extra={'status': str(state.status)})

    def _begin(self) -> None:
        self._set_state(status=StoreStatus.LOADING, last_error=None)

    def _fail(self, exc: BaseException, fallback: str) -> str:
        message = error_message(exc, fallback)
        self._set_state(status=StoreStatus.ERROR, last_error=message)
        return message

    # -------------------------------
    # Synchronization
    # -------------------------------

    async def _fetch(self, query: ListQuery) -> tuple[tuple[LinkRecord, ...], int]:
        response = await self.api.get(LINKS_PATH, query.to_params())
        normalized = normalize_list_payload(response.data)

        if normalized.shape is WireShape.LEGACY:
            self.legacy_payloads_seen += 1
            logger.warning(
                'Received legacy list payload.',
                extra={'recordCount': len(normalized.records), 'legacyPayloadsSeen': self.legacy_payloads_seen},
            )

        return normalized.records, normalized.total

    async def _sync(self, query: ListQuery) -> None:
        """Fetch a page and apply it together with the terminal status

        Failures are recorded and logged, never raised.
        """
        try:
            records, total = await self._fetch(query)
        except Exception as e:
            message = self._fail(e, FETCH_LINKS_FAILED)
            logger.warning('Failed to fetch links.', exc_info=True, extra={'query': query.to_params(), 'errorMessage': message})
        else:
            self._set_state(records=records, total=total, status=StoreStatus.IDLE, last_error=None)

    async def _mutate(self, request: Callable[[], Awaitable[ApiResponse]], fallback: str, slug: str) -> None:
        self._begin()
        try:
            await request()
        except Exception as e:
            message = self._fail(e, fallback)
            logger.info('Link mutation failed.', extra={'slug': slug, 'errorMessage': message})
            raise

        # NOTE: records are never patched from the mutation response, the
        #       page is always re-fetched with the remembered query.
        await self._sync(self._query)

    # -------------------------------
    # Operations
    # -------------------------------

    @beartype
    async def list(self, query: Optional[ListQuery] = None) -> None:
        """Fetch one page of links and replace records and total

        On failure, records and total are kept (stale but valid), status
        becomes 'error' and last_error holds the message. Nothing is raised.

        Args:
            query (Optional[ListQuery]):
                Filter/sort/pagination parameters. Defaults to the last query
                used, so list() alone refreshes the current view.
        """
        query = self._query if query is None else query
        self._query = query
        self._begin()
        await self._sync(query)

    @beartype
    async def get(self, slug: str) -> LinkRecord:
        """Fetch a single link by slug

        Does not touch records or total.

        Raises:
            ApiError (or whatever the API client raises):
                If the request fails. The failure is recorded first.
            ValueError:
                If the response is not a link object.
        """
        self._begin()
        try:
            response = await self.api.get(link_path(slug))
            try:
                record = LinkRecord.from_dict(response.data)
            except (TypeError, KeyError, ValueError) as e:
                raise ValueError(f"Unexpected payload for link '{slug}'.") from e
        except Exception as e:
            message = self._fail(e, FETCH_LINK_FAILED)
            logger.info('Failed to fetch link.', extra={'slug': slug, 'errorMessage': message})
            raise

        self._set_state(status=StoreStatus.IDLE, last_error=None)
        return record

    @beartype
    async def create(self, slug: str, url: str) -> None:
        """Create a link, then re-list with the last query

        Slug and URL rules are enforced by the server; its rejection is
        propagated unchanged.

        Raises:
            ApiError (or whatever the API client raises):
                If the creation request fails. The failure is recorded first.
        """
        body = {'slug': slug, 'url': url}
        await self._mutate(lambda: self.api.post(LINKS_PATH, body), CREATE_LINK_FAILED, slug)

    @beartype
    async def update(self, slug: str, patch: LinkPatch | Mapping[str, Any]) -> None:
        """Partially update a link, then re-list with the last query

        Args:
            slug (str):
                Slug of the link to update.
            patch (LinkPatch | Mapping[str, Any]):
                Fields to change ('url', 'is_active'); omitted fields are
                left unchanged.

        Raises:
            TypeError:
                If a mapping patch contains unknown fields (before any request).
            ApiError (or whatever the API client raises):
                If the update request fails. The failure is recorded first.
        """
        if not isinstance(patch, LinkPatch):
            patch = LinkPatch(**patch)
        body = patch.to_body()
        await self._mutate(lambda: self.api.patch(link_path(slug), body), UPDATE_LINK_FAILED, slug)

    @beartype
    async def remove(self, slug: str) -> None:
        """Delete a link, then re-list with the last query

        Raises:
            ApiError (or whatever the API client raises):
                If the deletion fails, e.g. unknown slug. The failure is recorded first.
        """
        await self._mutate(lambda: self.api.delete(link_path(slug)), DELETE_LINK_FAILED, slug)

from datetime import datetime, timedelta, UTC
from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from linkhub.api import ApiClient, ApiResponse, ApiValidationError, LinkNotFoundError, SlugTakenError
from linkhub.models import StoreState
from linkhub.store import LinkStore


SORTABLE = {'id', 'slug', 'created_at', 'updated_at'}


class FakeLinkServer(ApiClient):
    """In-memory link service behaving like the LinkHub backend.

    - list: ILIKE-style keyword filter on slug/url, is_active filter,
      'created_at DESC' by default, page/page_size pagination.
    - 404 for unknown slugs, 409 for taken slugs, 400 for empty urls.
    - `shape` selects the list wire format: 'current' or 'legacy'.
    """

    def __init__(self, shape: str = 'current'):
        self.shape = shape
        self.links: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple[str, str, Any]] = []
        self._next_id = 1
        self._clock = datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)

    def _tick(self) -> str:
        self._clock += timedelta(seconds=1)
        return self._clock.isoformat().replace('+00:00', 'Z')

    def seed(self, slug: str, url: str, is_active: bool = True) -> dict[str, Any]:
        now = self._tick()
        link = {'id': self._next_id, 'slug': slug, 'url': url, 'is_active': is_active, 'created_at': now, 'updated_at': now}
        self._next_id += 1
        self.links[slug] = link
        return link

    def _lookup(self, path: str) -> dict[str, Any]:
        slug = path.rsplit('/', 1)[-1]
        if slug not in self.links:
            raise LinkNotFoundError('link not found', status_code=404, payload={'error': 'link not found'})
        return self.links[slug]

    async def get(self, path: str, params: Optional[dict[str, Any]] = None) -> ApiResponse:
        self.calls.append(('GET', path, dict(params or {})))
        if path != '/links':
            return ApiResponse(data=dict(self._lookup(path)))

        params = params or {}
        links = list(self.links.values())
        if params.get('is_active') is not None:
            links = [link for link in links if link['is_active'] is params['is_active']]
        if params.get('keyword'):
            keyword = params['keyword'].lower()
            links = [link for link in links if keyword in link['slug'].lower() or keyword in link['url'].lower()]

        sort_by = params.get('sort_by') if params.get('sort_by') in SORTABLE else 'created_at'
        descending = str(params.get('sort_order', 'desc')).lower() != 'asc'
        links.sort(key=lambda link: (link[sort_by], link['id']), reverse=descending)

        total = len(links)
        page = params.get('page', 1)
        page_size = params.get('page_size', 20)
        page_links = [dict(link) for link in links[(page - 1) * page_size : page * page_size]]

        if self.shape == 'legacy':
            return ApiResponse(data=page_links)
        return ApiResponse(data={'links': page_links, 'total': total})

    async def post(self, path: str, body: dict[str, Any]) -> ApiResponse:
        self.calls.append(('POST', path, dict(body)))
        if not body.get('url'):
            raise ApiValidationError('url is required', status_code=400, payload={'error': 'url is required'})
        if body['slug'] in self.links:
            raise SlugTakenError('slug already taken', status_code=409, payload={'error': 'slug already taken'})
        self.seed(body['slug'], body['url'])
        return ApiResponse(status_code=201)

    async def patch(self, path: str, body: dict[str, Any]) -> ApiResponse:
        self.calls.append(('PATCH', path, dict(body)))
        link = self._lookup(path)
        if 'url' in body:
            link['url'] = body['url']
        if 'is_active' in body:
            link['is_active'] = body['is_active']
        link['updated_at'] = self._tick()
        return ApiResponse()

    async def delete(self, path: str) -> ApiResponse:
        self.calls.append(('DELETE', path, None))
        link = self._lookup(path)
        del self.links[link['slug']]
        return ApiResponse()


@pytest.fixture
def server() -> FakeLinkServer:
    """Provide a fake link server seeded with three links."""
    _server = FakeLinkServer()
    _server.seed('docs', 'https://example.com/docs')
    _server.seed('blog', 'https://example.com/blog')
    _server.seed('old', 'https://example.com/old', is_active=False)
    return _server


@pytest.fixture
def store(server) -> LinkStore:
    return LinkStore(server)


@pytest.fixture
def api() -> MagicMock:
    """Mock an ApiClient whose verbs are AsyncMocks."""
    client = MagicMock(spec=ApiClient)
    client.get = AsyncMock(return_value=ApiResponse(data={'links': [], 'total': 0}))
    client.post = AsyncMock(return_value=ApiResponse(status_code=201))
    client.patch = AsyncMock(return_value=ApiResponse())
    client.delete = AsyncMock(return_value=ApiResponse())
    return client


@pytest.fixture
def mock_store(api) -> LinkStore:
    return LinkStore(api)


@pytest.fixture
def record_states():
    """Subscribe to a store and collect every emitted snapshot."""

    def _record(link_store: LinkStore) -> list[StoreState]:
        recorded: list[StoreState] = []
        link_store.subscribe(recorded.append)
        return recorded

    return _record


@pytest.fixture
def make_link():
    """Build a wire-format link object."""

    def _make_link(id: int, slug: str, url: Optional[str] = None, is_active: bool = True) -> dict[str, Any]:
        return {
            'id': id,
            'slug': slug,
            'url': url or f'https://example.com/{slug}',
            'is_active': is_active,
            'created_at': '2025-10-15T12:00:00Z',
            'updated_at': '2025-10-15T12:00:00Z',
        }

    return _make_link

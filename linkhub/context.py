"""Per-session wiring of the admin client

One AppContext is created per admin session and handed explicitly to every
consumer. There is no module-level store instance.

Example:
    >>> from linkhub.context import create_context
    >>> ctx = create_context(MyHttpApiClient(...))
    >>> await ctx.links.list()
    >>> ctx.short_url('promo')
    'https://go.example.com/promo'
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from linkhub.api import ApiClient
from linkhub.models import ListQuery
from linkhub.store import LinkStore
from linkhub.utils import load_config, get_short_url, initialize_logging, app_env


logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Objects shared by the UI during one admin session.

    Attributes:
        links (LinkStore):
            The session's only link store.
        short_base_url (Optional[str]):
            Public base URL of short links, None when not configured.
    """

    links: LinkStore
    short_base_url: Optional[str] = None

    def short_url(self, slug: str) -> str:
        """Return the public short URL of a slug

        Raises:
            KeyError: if no short link base URL is configured.
        """
        return get_short_url(slug, self.short_base_url)


def create_context(api: ApiClient, config: Optional[dict[str, Any]] = None, configure_logging: bool = True) -> AppContext:
    """Create the AppContext for an admin session

    Args:
        api (ApiClient):
            Link service API client shared by the session.
        config (Optional[dict[str, Any]]):
            Configuration as returned by `load_config()`. Loaded from the
            environment when omitted.
        configure_logging (bool):
            If True, initialize JSON logging first.

    Returns:
        AppContext: wired context; the link store starts empty and idle with
        the first page as its remembered query.
    """
    if configure_logging:
        initialize_logging()

    config = load_config() if config is None else config
    query = ListQuery(page=1, page_size=config['page_size'])

    logger.debug('Created admin session.', extra={'appEnv': app_env(), 'pageSize': config['page_size']})
    return AppContext(
        links=LinkStore(api, query=query),
        short_base_url=config.get('short_base_url'),
    )

"""Utility functions for application configuration management.

Configuration comes from environment variables only. The admin client keeps
no configuration files and no persisted state.

    APP_ENV                  deployment environment, 'local' by default
    APP_NAME                 application name (optional)
    LOG_LEVEL                root log level, 'INFO' by default
    LINKHUB_SHORT_BASE_URL   public base URL of short links
    LINKHUB_PAGE_SIZE        default page size of the initial list query

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    short_base_url() -> str
        Return the public base URL for short links. Raises KeyError when
        `LINKHUB_SHORT_BASE_URL` is not set.

    page_size() -> int
        Return the default page size, `DEFAULT_PAGE_SIZE` when unset.

    load_config() -> dict
        Collect the configuration used to wire an admin session.

Example:
    >>> from linkhub.utils.config import load_config
    >>> os.environ['LINKHUB_SHORT_BASE_URL'] = 'https://go.example.com'
    >>> load_config()
    {'short_base_url': 'https://go.example.com', 'page_size': 20}
"""

import os
import logging
from typing import Any

from linkhub.utils.helpers import require_environment
from linkhub.utils.constants import (
    APP_ENV_ENV,
    APP_NAME_ENV,
    SHORT_BASE_URL_ENV,
    PAGE_SIZE_ENV,
    DEFAULT_PAGE_SIZE,
)


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(APP_ENV_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'

    Returns:
        str:
            Value of `APP_NAME` environment variable.
            None if variable is not set.
    """
    return os.environ.get(APP_NAME_ENV)


@require_environment(SHORT_BASE_URL_ENV)
def short_base_url() -> str:
    """Return the public base URL for short links

    Returns:
        str: value of `LINKHUB_SHORT_BASE_URL`.

    Raises:
        KeyError: if `LINKHUB_SHORT_BASE_URL` is missing or empty.
    """
    return os.environ[SHORT_BASE_URL_ENV]


def page_size() -> int:
    """Return the default page size for the session's first list query

    Returns:
        int: value of `LINKHUB_PAGE_SIZE`, `DEFAULT_PAGE_SIZE` when unset.

    Raises:
        ValueError: if the variable is not a positive integer.
    """
    raw = os.environ.get(PAGE_SIZE_ENV)
    if not raw:
        return DEFAULT_PAGE_SIZE

    value = int(raw)
    if value < 1:
        raise ValueError(f'{PAGE_SIZE_ENV} must be a positive integer, got {raw!r}')
    return value


def load_config() -> dict[str, Any]:
    """Load configuration for an admin session

    The short link base URL is optional at this point: a session without it
    can still manage links, it just cannot render public short URLs.

    Returns:
        dict: {'short_base_url': str | None, 'page_size': int}

    Raises:
        ValueError: if `LINKHUB_PAGE_SIZE` is invalid.
    """
    try:
        base = short_base_url()
    except KeyError:
        logger.debug('Short link base URL is not configured.', extra={'appEnv': app_env()})
        base = None

    return {
        'short_base_url': base,
        'page_size': page_size(),
    }

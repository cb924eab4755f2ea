"""Helper utilities for the admin client.

Functions:
    get_short_url(slug: str, base: str | None = None) -> str
        Build the public short URL for a slug
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present

Example:
    >>> from linkhub.utils.helpers import get_short_url
    >>> get_short_url('promo', 'https://go.example.com/')
    'https://go.example.com/promo'
"""

import os
import functools
from typing import Optional
from collections.abc import Callable


def get_short_url(slug: str, base: Optional[str] = None) -> str:
    """Get string representation of the public short URL

    Args:
        slug (str): link slug
        base (Optional[str]): public base URL. Defaults to `short_base_url()`.

    Returns:
        str: short url string representation

    Raises:
        KeyError: if base is omitted and LINKHUB_SHORT_BASE_URL is not set.
    """
    if base is None:
        from linkhub.utils.config import short_base_url

        base = short_base_url()
    return f'{base.rstrip("/")}/{slug}'


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        KeyError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('LINKHUB_SHORT_BASE_URL')
        ... def my_function():
        ...     pass
        >>> my_function()
        KeyError: "Missing required environment variables: 'LINKHUB_SHORT_BASE_URL'"
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise KeyError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator

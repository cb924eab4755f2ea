"""Exceptions raised by API client implementations.

The link store never raises these itself. It records them in its state and
propagates whatever the API client raised, unchanged.

Classes:
    ApiError:
        Generic base class for API client failures.

    ApiTransportError:
        Raised when the request never produced a response (connection
        issues, timeouts, etc.).

    ApiValidationError:
        Raised when the server rejects a request body or query (HTTP 400).

    LinkNotFoundError:
        Raised when the addressed slug does not exist (HTTP 404).

    SlugTakenError:
        Raised when creating a link whose slug is already in use (HTTP 409).

Example:
    >>> from linkhub.api.exceptions import LinkNotFoundError
    >>> raise LinkNotFoundError('link not found', status_code=404)
    Traceback (most recent call last):
        ...
    linkhub.api.exceptions.LinkNotFoundError: link not found
"""

from typing import Any, Optional


class ApiError(Exception):
    """Generic base class for API client failures.

    Attributes:
        message (Optional[str]):
            Human-readable failure message, if the transport provided one.
        status_code (Optional[int]):
            HTTP status code, None when no response was received.
        payload (Any):
            Decoded error body, e.g. {"error": "slug already taken"}.
    """

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(*([message] if message else []))
        self.message = message
        self.status_code = status_code
        self.payload = payload


class ApiTransportError(ApiError):
    """Exception raised when a request could not be completed (network, timeout)."""

    pass


class ApiValidationError(ApiError):
    """Exception raised when the server rejects the request (HTTP 400)."""

    pass


class LinkNotFoundError(ApiError):
    """Exception raised when the addressed link does not exist (HTTP 404)."""

    pass


class SlugTakenError(ApiError):
    """Exception raised when a slug is already taken (HTTP 409)."""

    pass

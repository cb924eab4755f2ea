from linkhub.api.base import ApiClient, ApiResponse
from linkhub.api.exceptions import (
    ApiError,
    ApiTransportError,
    ApiValidationError,
    LinkNotFoundError,
    SlugTakenError,
)


__all__ = [
    'ApiClient',
    'ApiResponse',
    'ApiError',
    'ApiTransportError',
    'ApiValidationError',
    'LinkNotFoundError',
    'SlugTakenError',
]

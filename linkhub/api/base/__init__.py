from linkhub.api.base.api_base_client import ApiClient, ApiResponse


__all__ = [
    'ApiClient',
    'ApiResponse',
]

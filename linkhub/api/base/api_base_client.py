"""Abstract base class for link service API clients.

This class establishes the contract the LinkStore relies on, regardless of
the underlying transport (HTTP library, test double, in-process server).

Responsibilities:
    - Expose the four HTTP verbs used by the store as coroutines.
    - Return a structured ApiResponse on any 2xx outcome.
    - Raise an ApiError subclass (or any exception carrying an optional
      `.message`) on every other outcome.

Retries, timeouts and authentication belong to implementations of this class.

Example:
    Typical usage with a transport-specific implementation:

        >>> client = MyHttpApiClient(base_url='https://links.example.com/private')
        >>> response = await client.get('/links', {'page': 1})
        >>> response.data
        {'links': [...], 'total': 42}
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from linkhub.types import JsonObject, QueryParams


@dataclass(frozen=True)
class ApiResponse:
    """Successful response from the link service.

    Attributes:
        data (Any):
            Decoded response body (None for empty bodies).
        status_code (int):
            HTTP status code, 200 by default.
    """

    data: Any = None
    status_code: int = 200


class ApiClient(ABC):
    """Interface for link service API clients.

    Methods:
        get(path: str, params: Optional[dict] = None) -> ApiResponse
        post(path: str, body: dict) -> ApiResponse
        patch(path: str, body: dict) -> ApiResponse
        delete(path: str) -> ApiResponse

    Every method raises on a non-2xx outcome. The raised exception may carry
    a `.message` attribute used for user-facing error text.
    """

    @abstractmethod
    async def get(self, path: str, params: Optional[QueryParams] = None) -> ApiResponse:
        """Send a GET request.

        Args:
            path (str):
                Resource path, e.g. '/links'.
            params (Optional[QueryParams]):
                Query parameters, passed through verbatim.

        Returns:
            ApiResponse: decoded response.

        Raises:
            ApiError: on any non-2xx outcome.
        """
        pass

    @abstractmethod
    async def post(self, path: str, body: JsonObject) -> ApiResponse:
        """Send a POST request with a JSON body."""
        pass

    @abstractmethod
    async def patch(self, path: str, body: JsonObject) -> ApiResponse:
        """Send a PATCH request with a JSON body."""
        pass

    @abstractmethod
    async def delete(self, path: str) -> ApiResponse:
        """Send a DELETE request."""
        pass

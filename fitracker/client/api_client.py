"""
HTTP client for the progress endpoint.

Used by the view model; every call opens a short-lived httpx.AsyncClient.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

PROGRESS_PATH = "/api/progress"


class ProgressAPIError(Exception):
    """Raised when the progress endpoint cannot be reached or refuses a request."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def _payload_data(response: httpx.Response, message: str, expected: type) -> Any:
    try:
        data = response.json()["data"]
    except (ValueError, KeyError, TypeError) as e:
        logger.error(f"Malformed progress response: {e}")
        raise ProgressAPIError(message, response.status_code)

    if not isinstance(data, expected):
        logger.error(f"Malformed progress response: data is {type(data).__name__}")
        raise ProgressAPIError(message, response.status_code)
    return data


class ProgressAPIClient:
    """Thin async wrapper around GET/POST on the progress endpoint."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize ProgressAPIClient.

        Args:
            base_url: Server root, e.g. "http://localhost:8000"
            timeout: Seconds before a request is abandoned
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def fetch_progress(self) -> List[Dict[str, Any]]:
        """
        Load every progress record.

        Returns:
            Records as returned by the server (date descending)

        Raises:
            ProgressAPIError: Network failure, non-2xx response or malformed body
        """
        try:
            async with self._client() as client:
                response = await client.get(PROGRESS_PATH)
        except httpx.RequestError as e:
            logger.error(f"Progress list request error: {e}")
            raise ProgressAPIError("Failed to load progress records")

        if not response.is_success:
            logger.error(f"Progress list failed: {response.status_code}")
            raise ProgressAPIError("Failed to load progress records", response.status_code)

        return _payload_data(response, "Failed to load progress records", list)

    async def create_progress(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """
        Save one progress record.

        Args:
            record: Draft record (date, food, exercise, grams, optional image)

        Returns:
            The stored record with server-assigned _id and createdAt

        Raises:
            ProgressAPIError: Network failure, non-2xx response or malformed body
        """
        try:
            async with self._client() as client:
                response = await client.post(PROGRESS_PATH, json=record)
        except httpx.RequestError as e:
            logger.error(f"Progress create request error: {e}")
            raise ProgressAPIError("Failed to save progress record")

        if not response.is_success:
            logger.error(f"Progress create failed: {response.status_code}")
            raise ProgressAPIError("Failed to save progress record", response.status_code)

        return _payload_data(response, "Failed to save progress record", dict)

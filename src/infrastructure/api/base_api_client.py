"""Base API client for Midas API HTTP communication.

Handles what every Midas endpoint client shares:
- Per-call ``httpx.AsyncClient`` with the configured timeouts
- Structured logging of transport failures and error statuses
- JSON parsing with type validation

Failures are raised, not returned: ``httpx.HTTPStatusError`` for error
statuses, ``httpx.TransportError`` for transport failures, ``ValueError``
for unusable bodies. The application layer's ErrorClassifier turns them
into data.

Architecture:
    - Infrastructure layer (adapter for the Midas API ports)
    - Uses httpx for async HTTP
"""

from typing import Any

import httpx
import structlog

from src.core.constants import AUTHORIZATION_HEADER, RESPONSE_BODY_MAX_LENGTH


class BaseMidasAPIClient:
    """Base class for Midas API clients.

    Attributes:
        _base_url: API base URL (without trailing slash).
        _timeout: httpx timeout applied to every call.
        _logger: Structured logger named after the client.

    Example:
        >>> class PagesAPI(BaseMidasAPIClient):
        ...     async def list_pages(self, authorization: str):
        ...         response = await self._send(
        ...             method="GET",
        ...             path="/pages",
        ...             authorization=authorization,
        ...             operation="list_pages",
        ...         )
        ...         return self._parse_json_list(response, "list_pages")
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: httpx.Timeout | float,
        logger_name: str = "midas_api",
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._logger = structlog.get_logger(logger_name)

    async def _execute_request(
        self,
        *,
        method: str,
        path: str,
        authorization: str | None = None,
        json_data: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
        operation: str,
    ) -> httpx.Response:
        """Execute an HTTP request and return the response whatever its status.

        Raises:
            httpx.TransportError: No response could be obtained.
        """
        url = f"{self._base_url}{path}"
        headers = {AUTHORIZATION_HEADER: authorization} if authorization else {}

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                return await client.request(
                    method=method,
                    url=url,
                    headers=headers,
                    json=json_data,
                    params=params,
                )
        except httpx.TimeoutException as e:
            self._logger.warning("midas_api_timeout", operation=operation, error=str(e))
            raise
        except httpx.TransportError as e:
            self._logger.warning(
                "midas_api_connection_error",
                operation=operation,
                error=str(e) or type(e).__name__,
            )
            raise

    async def _send(
        self,
        *,
        method: str,
        path: str,
        authorization: str | None = None,
        json_data: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
        operation: str,
    ) -> httpx.Response:
        """Execute a request and raise for any non-2xx status.

        Raises:
            httpx.HTTPStatusError: The API answered with an error status.
            httpx.TransportError: No response could be obtained.
        """
        response = await self._execute_request(
            method=method,
            path=path,
            authorization=authorization,
            json_data=json_data,
            params=params,
            operation=operation,
        )
        if response.is_error:
            self._logger.warning(
                "midas_api_error_status",
                operation=operation,
                status_code=response.status_code,
            )
        response.raise_for_status()
        return response

    def _parse_json(self, response: httpx.Response, operation: str) -> Any:
        try:
            return response.json()
        except ValueError:
            self._logger.error(
                "midas_api_invalid_json",
                operation=operation,
                response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )
            raise

    def _parse_json_object(self, response: httpx.Response, operation: str) -> dict[str, Any]:
        """Parse the body as a JSON object.

        Raises:
            ValueError: Body is not JSON or not an object.
        """
        data = self._parse_json(response, operation)
        if not isinstance(data, dict):
            self._logger.warning(
                "midas_api_unexpected_format",
                operation=operation,
                data_type=type(data).__name__,
            )
            raise ValueError(f"Expected JSON object from {operation}, got {type(data).__name__}")
        return data

    def _parse_json_list(self, response: httpx.Response, operation: str) -> list[dict[str, Any]]:
        """Parse the body as a JSON list of objects.

        Raises:
            ValueError: Body is not JSON or not a list.
        """
        data = self._parse_json(response, operation)
        if not isinstance(data, list):
            self._logger.warning(
                "midas_api_unexpected_format",
                operation=operation,
                data_type=type(data).__name__,
            )
            raise ValueError(f"Expected JSON list from {operation}, got {type(data).__name__}")
        self._logger.debug("midas_api_succeeded", operation=operation, count=len(data))
        return data

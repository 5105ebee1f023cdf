"""Client for the Midas API credential check (``HEAD /auth``)."""

import httpx

from src.infrastructure.api.base_api_client import BaseMidasAPIClient


class AuthApiClient(BaseMidasAPIClient):
    """Implements AuthApiProtocol."""

    def __init__(self, *, base_url: str, timeout: httpx.Timeout | float) -> None:
        super().__init__(base_url=base_url, timeout=timeout, logger_name="midas_auth_api")

    async def validate_credentials(self, authorization: str) -> httpx.Response:
        """Send the credential and return the 2xx response.

        Raises:
            httpx.HTTPStatusError: 401 for rejected credentials, or any
                other error status.
            httpx.TransportError: The API could not be reached.
        """
        return await self._send(
            method="HEAD",
            path="/auth",
            authorization=authorization,
            operation="validate_credentials",
        )

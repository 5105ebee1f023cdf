"""Client for the Midas API liveness endpoint (``HEAD /health``)."""

import httpx

from src.infrastructure.api.base_api_client import BaseMidasAPIClient


class HealthApiClient(BaseMidasAPIClient):
    """Implements HealthApiProtocol.

    Unlike the other clients it never raises for a status code: the probe
    interprets the status itself.
    """

    def __init__(self, *, base_url: str, timeout: httpx.Timeout | float) -> None:
        super().__init__(base_url=base_url, timeout=timeout, logger_name="midas_health_api")

    async def check_health(self) -> httpx.Response:
        return await self._execute_request(
            method="HEAD",
            path="/health",
            operation="check_health",
        )

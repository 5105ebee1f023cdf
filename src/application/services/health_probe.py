"""Liveness check against the Midas API.

A single ``HEAD /health`` decides whether the backend is reachable:

    status < 500            -> available
    transport failure       -> unavailable
    any other exception     -> available (fail-open)

The fail-open branch keeps compatibility with the console's historical
behavior; it is logged at debug so the anomaly stays visible.
"""

import httpx

from src.core.constants import HEALTH_UNAVAILABLE_STATUS_FLOOR
from src.domain.protocols import HealthApiProtocol, LoggerProtocol


class HealthProbe:
    """Implements HealthProbeProtocol over the ``/health`` endpoint.

    Not bounded by itself; NavigationGuard runs it through ``run_bounded``.
    """

    def __init__(self, *, health_api: HealthApiProtocol, logger: LoggerProtocol) -> None:
        self._health_api = health_api
        self._logger = logger

    async def is_backend_available(self) -> bool:
        try:
            response = await self._health_api.check_health()
        except httpx.TransportError as e:
            self._logger.warning(
                "health_check_transport_failure",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False
        except Exception as e:
            self._logger.debug(
                "health_check_unexpected_error_fail_open",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return True

        available = response.status_code < HEALTH_UNAVAILABLE_STATUS_FLOOR
        self._logger.debug(
            "health_check_completed",
            status_code=response.status_code,
            available=available,
        )
        return available

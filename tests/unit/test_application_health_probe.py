"""Tests for src/application/services/health_probe.py."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from src.application.services import HealthProbe

HEALTH_URL = "http://midas-api.test/health"


def _probe(health_api: AsyncMock, logger: MagicMock) -> HealthProbe:
    return HealthProbe(health_api=health_api, logger=logger)


class TestIsBackendAvailable:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [200, 204, 401, 404, 499])
    async def test_status_below_500_is_available(
        self, mock_logger: MagicMock, status_code: int
    ) -> None:
        api = AsyncMock()
        api.check_health.return_value = httpx.Response(
            status_code, request=httpx.Request("HEAD", HEALTH_URL)
        )

        assert await _probe(api, mock_logger).is_backend_available() is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [500, 502, 503])
    async def test_status_500_and_above_is_unavailable(
        self, mock_logger: MagicMock, status_code: int
    ) -> None:
        api = AsyncMock()
        api.check_health.return_value = httpx.Response(
            status_code, request=httpx.Request("HEAD", HEALTH_URL)
        )

        assert await _probe(api, mock_logger).is_backend_available() is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc", [httpx.ConnectError("refused"), httpx.ConnectTimeout("slow")]
    )
    async def test_transport_failure_is_unavailable(
        self, mock_logger: MagicMock, exc: Exception
    ) -> None:
        api = AsyncMock()
        api.check_health.side_effect = exc

        assert await _probe(api, mock_logger).is_backend_available() is False

    @pytest.mark.asyncio
    async def test_other_exception_fails_open(self, mock_logger: MagicMock) -> None:
        api = AsyncMock()
        api.check_health.side_effect = ValueError("malformed status line")

        assert await _probe(api, mock_logger).is_backend_available() is True
        mock_logger.debug.assert_called()

    @pytest.mark.asyncio
    async def test_single_request_per_check(self, mock_logger: MagicMock) -> None:
        api = AsyncMock()
        api.check_health.return_value = httpx.Response(
            200, request=httpx.Request("HEAD", HEALTH_URL)
        )

        await _probe(api, mock_logger).is_backend_available()

        api.check_health.assert_awaited_once()

"""Tests for src/application/services/resource_service.py."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from src.application.services import (
    AuthGateway,
    CredentialStore,
    ErrorClassifier,
    ResourceService,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import ErrorKind

BASE = "http://midas-api.test"


def _status_error(status_code: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", f"{BASE}/pages")
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(str(status_code), request=request, response=response)


@pytest.fixture
def resource_api() -> AsyncMock:
    api = AsyncMock()
    api.resource = "pages"
    api.list_all.return_value = [{"id": 1, "title": "Home"}]
    api.get.return_value = {"id": 1, "title": "Home"}
    api.create.return_value = {"id": 2, "title": "New"}
    api.update.return_value = {"id": 1, "title": "Renamed"}
    api.delete.return_value = None
    api.list_where.return_value = [{"id": 5, "published": True}]
    return api


@pytest.fixture
def gateway(store: CredentialStore, mock_logger: MagicMock) -> AuthGateway:
    return AuthGateway(store=store, auth_api=AsyncMock(), logger=mock_logger)


@pytest.fixture
def service(
    resource_api: AsyncMock, gateway: AuthGateway, mock_logger: MagicMock
) -> ResourceService:
    return ResourceService(
        resource_api=resource_api,
        gateway=gateway,
        classifier=ErrorClassifier(on_session_expired=gateway.logout, logger=mock_logger),
        load_timeout=1.0,
        logger=mock_logger,
    )


class TestNotAuthenticated:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "args"),
        [
            ("list_all", ()),
            ("list_where", ("published",)),
            ("get", (1,)),
            ("create", ({"title": "x"},)),
            ("update", (1, {"title": "x"})),
            ("delete", (1,)),
        ],
    )
    async def test_refuses_without_network_call(
        self, service: ResourceService, resource_api: AsyncMock, method: str, args: tuple
    ) -> None:
        result = await getattr(service, method)(*args)

        assert isinstance(result, Failure)
        assert result.error.kind is ErrorKind.AUTHENTICATION_ERROR
        assert result.error.code is ErrorCode.NOT_AUTHENTICATED
        assert result.error.message == "User is not authenticated"
        getattr(resource_api, method).assert_not_called()


class TestAuthenticatedCalls:
    @pytest.fixture(autouse=True)
    def _login(self, store: CredentialStore) -> None:
        store.store("admin", "correct")

    @pytest.mark.asyncio
    async def test_list_all_success(
        self, service: ResourceService, resource_api: AsyncMock, store: CredentialStore
    ) -> None:
        result = await service.list_all()

        assert result == Success(value=[{"id": 1, "title": "Home"}])
        resource_api.list_all.assert_awaited_once_with(store.basic_auth_header())

    @pytest.mark.asyncio
    async def test_crud_success(self, service: ResourceService, resource_api: AsyncMock) -> None:
        assert await service.get(1) == Success(value={"id": 1, "title": "Home"})
        assert await service.create({"title": "New"}) == Success(value={"id": 2, "title": "New"})
        assert await service.update(1, {"title": "Renamed"}) == Success(
            value={"id": 1, "title": "Renamed"}
        )
        assert await service.delete(1) == Success(value=None)
        resource_api.update.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_401_logs_out_and_returns_authentication_error(
        self, service: ResourceService, resource_api: AsyncMock, store: CredentialStore
    ) -> None:
        resource_api.get.side_effect = _status_error(401)

        result = await service.get(1)

        assert isinstance(result, Failure)
        assert result.error.kind is ErrorKind.AUTHENTICATION_ERROR
        assert result.error.message == "Session expired"
        assert store.is_authenticated() is False

    @pytest.mark.asyncio
    async def test_401_on_bulk_load_logs_out(
        self, service: ResourceService, resource_api: AsyncMock, store: CredentialStore
    ) -> None:
        resource_api.list_all.side_effect = _status_error(401)

        result = await service.list_all()

        assert isinstance(result, Failure)
        assert result.error.kind is ErrorKind.AUTHENTICATION_ERROR
        assert store.is_authenticated() is False

    @pytest.mark.asyncio
    async def test_service_error_keeps_session(
        self, service: ResourceService, resource_api: AsyncMock, store: CredentialStore
    ) -> None:
        resource_api.create.side_effect = _status_error(500)

        result = await service.create({"title": "x"})

        assert isinstance(result, Failure)
        assert result.error.kind is ErrorKind.SERVICE_ERROR
        assert result.error.message == "Backend error: 500"
        assert store.is_authenticated() is True

    @pytest.mark.asyncio
    async def test_connection_error_keeps_session(
        self, service: ResourceService, resource_api: AsyncMock, store: CredentialStore
    ) -> None:
        resource_api.delete.side_effect = httpx.ConnectError("refused")

        result = await service.delete(1)

        assert isinstance(result, Failure)
        assert result.error.kind is ErrorKind.CONNECTION_ERROR
        assert store.is_authenticated() is True

    @pytest.mark.asyncio
    async def test_bulk_load_timeout_is_connection_error(
        self, service: ResourceService, resource_api: AsyncMock
    ) -> None:
        async def hang(_header: str) -> list:
            await asyncio.sleep(10)
            return []

        resource_api.list_all.side_effect = hang

        result = await service.list_all()

        assert isinstance(result, Failure)
        assert result.error.kind is ErrorKind.CONNECTION_ERROR
        assert result.error.code is ErrorCode.BACKEND_TIMEOUT

    def test_exposes_resource_name(self, service: ResourceService) -> None:
        assert service.resource == "pages"


class TestFilteredListings:
    @pytest.fixture(autouse=True)
    def _login(self, store: CredentialStore) -> None:
        store.store("admin", "correct")

    @pytest.mark.asyncio
    async def test_forwards_sub_path_and_params(
        self, service: ResourceService, resource_api: AsyncMock, store: CredentialStore
    ) -> None:
        result = await service.list_where("recent", {"limit": "10"})

        assert result == Success(value=[{"id": 5, "published": True}])
        resource_api.list_where.assert_awaited_once_with(
            "recent", store.basic_auth_header(), {"limit": "10"}
        )

    @pytest.mark.asyncio
    async def test_401_logs_out(
        self, service: ResourceService, resource_api: AsyncMock, store: CredentialStore
    ) -> None:
        resource_api.list_where.side_effect = _status_error(401)

        result = await service.list_where("published")

        assert isinstance(result, Failure)
        assert result.error.kind is ErrorKind.AUTHENTICATION_ERROR
        assert store.is_authenticated() is False

    @pytest.mark.asyncio
    async def test_timeout_is_connection_error(
        self, service: ResourceService, resource_api: AsyncMock
    ) -> None:
        async def hang(*_args: object) -> list:
            await asyncio.sleep(10)
            return []

        resource_api.list_where.side_effect = hang

        result = await service.list_where("search", {"query": "acme"})

        assert isinstance(result, Failure)
        assert result.error.code is ErrorCode.BACKEND_TIMEOUT

"""Fixtures for console route tests.

The console app runs under TestClient; its outbound Midas API calls are
served by pytest-httpx (TestClient's own transport is not intercepted).
"""

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pytest_httpx import HTTPXMock

from src.core.config import Settings
from src.main import create_app
from tests.conftest import TEST_API_BASE_URL

AUTH_URL = f"{TEST_API_BASE_URL}/auth"
HEALTH_URL = f"{TEST_API_BASE_URL}/health"


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture
def healthy_backend(httpx_mock: HTTPXMock) -> HTTPXMock:
    httpx_mock.add_response(
        method="HEAD", url=HEALTH_URL, status_code=200, is_reusable=True, is_optional=True
    )
    return httpx_mock


@pytest.fixture
def logged_in_client(client: TestClient, healthy_backend: HTTPXMock) -> TestClient:
    healthy_backend.add_response(method="HEAD", url=AUTH_URL, status_code=200)
    response = client.post("/login", json={"username": "admin", "password": "correct"})
    assert response.status_code == 303
    return client

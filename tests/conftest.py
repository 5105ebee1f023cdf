"""Shared pytest configuration and fixtures."""

import inspect
from unittest.mock import MagicMock

import pytest

from src.application.services import CredentialStore
from src.core.config import Settings
from src.core.enums import Environment

TEST_API_BASE_URL = "http://midas-api.test"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "integration: Midas API clients with mocked HTTP transport")
    config.addinivalue_line("markers", "api: Console routes through TestClient")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at the fake Midas API host, ignoring any .env file."""
    return Settings(
        _env_file=None,
        environment=Environment.TESTING,
        api_base_url=TEST_API_BASE_URL,
        health_check_timeout_seconds=3.0,
        resource_load_timeout_seconds=30.0,
    )


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double; ``bind`` returns the same mock."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def store() -> CredentialStore:
    return CredentialStore()

"""Tests for src/core/config.py."""

import httpx
import pytest
from pydantic import ValidationError

from src.core.config import Settings
from src.core.constants import (
    HEALTH_CHECK_TIMEOUT_DEFAULT,
    HTTP_TIMEOUT_CONNECT_DEFAULT,
    HTTP_TIMEOUT_POOL_DEFAULT,
    HTTP_TIMEOUT_READ_DEFAULT,
    RESOURCE_LOAD_TIMEOUT_DEFAULT,
    SESSION_MAX_COUNT_DEFAULT,
)
from src.core.enums import Environment


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestSettingsDefaults:
    def test_bounded_wait_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("HEALTH_CHECK_TIMEOUT_SECONDS", raising=False)
        monkeypatch.delenv("RESOURCE_LOAD_TIMEOUT_SECONDS", raising=False)

        settings = _settings()

        assert settings.health_check_timeout_seconds == HEALTH_CHECK_TIMEOUT_DEFAULT == 3.0
        assert settings.resource_load_timeout_seconds == RESOURCE_LOAD_TIMEOUT_DEFAULT == 30.0

    def test_session_cookie_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SESSION_COOKIE_NAME", raising=False)

        settings = _settings()

        assert settings.session_cookie_name == "midas_session"
        assert settings.session_idle_timeout_minutes >= 1

    def test_session_cap_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SESSION_MAX_COUNT", raising=False)

        assert _settings().session_max_count == SESSION_MAX_COUNT_DEFAULT == 1000


class TestSettingsValidation:
    def test_api_base_url_trailing_slash_removed(self) -> None:
        settings = _settings(api_base_url="http://midas.local/api/")

        assert settings.api_base_url == "http://midas.local/api"

    def test_reads_environment_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_BASE_URL", "http://from-env.test")
        monkeypatch.setenv("ENVIRONMENT", "ci")

        settings = _settings()

        assert settings.api_base_url == "http://from-env.test"
        assert settings.environment == Environment.CI
        assert settings.is_ci

    @pytest.mark.parametrize(
        "field",
        ["health_check_timeout_seconds", "resource_load_timeout_seconds", "http_timeout_read"],
    )
    def test_rejects_non_positive_timeouts(self, field: str) -> None:
        with pytest.raises(ValidationError):
            _settings(**{field: 0})

    def test_rejects_idle_timeout_below_one_minute(self) -> None:
        with pytest.raises(ValidationError):
            _settings(session_idle_timeout_minutes=0)

    def test_rejects_session_cap_below_one(self) -> None:
        with pytest.raises(ValidationError):
            _settings(session_max_count=0)


class TestHttpTimeout:
    def test_builds_httpx_timeout_from_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("HTTP_TIMEOUT_CONNECT", "HTTP_TIMEOUT_READ", "HTTP_TIMEOUT_POOL"):
            monkeypatch.delenv(name, raising=False)

        timeout = _settings().get_http_timeout()

        assert isinstance(timeout, httpx.Timeout)
        assert timeout.connect == HTTP_TIMEOUT_CONNECT_DEFAULT
        assert timeout.read == HTTP_TIMEOUT_READ_DEFAULT
        assert timeout.write == HTTP_TIMEOUT_READ_DEFAULT
        assert timeout.pool == HTTP_TIMEOUT_POOL_DEFAULT

    def test_custom_values(self) -> None:
        timeout = _settings(http_timeout_connect=1.5, http_timeout_read=9.0).get_http_timeout()

        assert timeout.connect == 1.5
        assert timeout.read == 9.0


class TestEnvironmentHelpers:
    @pytest.mark.parametrize(
        ("environment", "attribute"),
        [
            (Environment.DEVELOPMENT, "is_development"),
            (Environment.TESTING, "is_testing"),
            (Environment.PRODUCTION, "is_production"),
        ],
    )
    def test_flags(self, environment: Environment, attribute: str) -> None:
        settings = _settings(environment=environment)

        assert getattr(settings, attribute) is True
        assert settings.is_ci is False

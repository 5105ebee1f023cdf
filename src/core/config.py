"""
Configuration management using Pydantic Settings.

Type-safe configuration for the Midas console, loaded from environment
variables (and an optional ``.env`` file during local development).

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Internal fixed values live in ``src/core/constants.py``

Usage:
    from src.core.config import settings

    base_url = settings.api_base_url
    timeout = settings.get_http_timeout()

    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

import httpx
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.constants import (
    HEALTH_CHECK_TIMEOUT_DEFAULT,
    HTTP_TIMEOUT_CONNECT_DEFAULT,
    HTTP_TIMEOUT_POOL_DEFAULT,
    HTTP_TIMEOUT_READ_DEFAULT,
    RESOURCE_LOAD_TIMEOUT_DEFAULT,
    SESSION_MAX_COUNT_DEFAULT,
)
from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Console settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. ``.env`` file in the working directory
        3. Default values

    Returns:
        Settings: Console configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Console environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, detailed errors)",
    )
    host: str = Field(
        default="0.0.0.0",
        description="Server bind host",
    )
    port: int = Field(
        default=8090,
        description="Server bind port",
    )
    reload: bool = Field(
        default=False,
        description="Enable auto-reload on code changes (development only)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Midas Console",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Midas API
    api_base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL of the Midas API (e.g., https://midas.local/api)",
    )

    # Console sessions
    session_cookie_name: str = Field(
        default="midas_session",
        description="Name of the cookie carrying the opaque console session id",
    )
    session_cookie_secure: bool = Field(
        default=False,
        description="Send the session cookie over HTTPS only",
    )
    session_idle_timeout_minutes: int = Field(
        default=60,
        description="Minutes of inactivity after which a console session is discarded",
    )
    session_max_count: int = Field(
        default=SESSION_MAX_COUNT_DEFAULT,
        description="Maximum number of logged-in sessions kept in memory",
    )

    # Bounded waits
    health_check_timeout_seconds: float = Field(
        default=HEALTH_CHECK_TIMEOUT_DEFAULT,
        description="Maximum wait for the per-navigation health probe",
    )
    resource_load_timeout_seconds: float = Field(
        default=RESOURCE_LOAD_TIMEOUT_DEFAULT,
        description="Maximum wait for bulk resource loads",
    )

    # HTTP client timeouts
    http_timeout_connect: float = Field(
        default=HTTP_TIMEOUT_CONNECT_DEFAULT,
        description="Connect timeout for Midas API calls in seconds",
    )
    http_timeout_read: float = Field(
        default=HTTP_TIMEOUT_READ_DEFAULT,
        description="Read timeout for Midas API calls in seconds",
    )
    http_timeout_pool: float = Field(
        default=HTTP_TIMEOUT_POOL_DEFAULT,
        description="Connection pool timeout for Midas API calls in seconds",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @field_validator(
        "health_check_timeout_seconds",
        "resource_load_timeout_seconds",
        "http_timeout_connect",
        "http_timeout_read",
        "http_timeout_pool",
    )
    @classmethod
    def validate_positive_timeout(cls, v: float) -> float:
        """
        Validate timeouts are strictly positive.

        Args:
            v: Timeout in seconds.

        Returns:
            float: Validated timeout.

        Raises:
            ValueError: If the timeout is zero or negative.
        """
        if v <= 0:
            raise ValueError("timeouts must be greater than zero")
        return v

    @field_validator("session_max_count")
    @classmethod
    def validate_session_max_count(cls, v: int) -> int:
        """
        Validate the session cap.

        Args:
            v: Maximum number of registered sessions.

        Returns:
            int: Validated cap.

        Raises:
            ValueError: If the cap is smaller than one.
        """
        if v < 1:
            raise ValueError("session_max_count must be at least 1")
        return v

    @field_validator("session_idle_timeout_minutes")
    @classmethod
    def validate_idle_timeout(cls, v: int) -> int:
        """
        Validate the session idle timeout.

        Args:
            v: Idle timeout in minutes.

        Returns:
            int: Validated idle timeout.

        Raises:
            ValueError: If the timeout is smaller than one minute.
        """
        if v < 1:
            raise ValueError("session_idle_timeout_minutes must be at least 1")
        return v

    def get_http_timeout(self) -> httpx.Timeout:
        """
        Build the httpx timeout used for every Midas API call.

        Write timeout follows the read timeout.

        Returns:
            httpx.Timeout: Configured timeout object.
        """
        return httpx.Timeout(
            self.http_timeout_read,
            connect=self.http_timeout_connect,
            pool=self.http_timeout_pool,
        )

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """
        Check if running in CI environment.

        Returns:
            bool: True if environment is CI, False otherwise.
        """
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()

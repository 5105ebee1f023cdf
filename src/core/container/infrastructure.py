"""Infrastructure dependency factories.

Builders take explicit Settings so an app created for tests gets its own
instances; the ``get_*`` variants are application-scoped singletons bound to
the process settings.
"""

from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import Settings, get_settings

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.infrastructure.api import AuthApiClient, HealthApiClient, ResourceApiClient
    from src.infrastructure.session import MemorySessionRegistry


@dataclass(frozen=True, slots=True)
class MidasApi:
    """The Midas API clients of one console process."""

    auth: "AuthApiClient"
    health: "HealthApiClient"
    resources: dict[str, "ResourceApiClient"]


def build_logger(cfg: Settings) -> "LoggerProtocol":
    """Select the logging adapter for the environment.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(use_json=not cfg.is_development, level=cfg.log_level)


def build_midas_api(cfg: Settings) -> MidasApi:
    """Create the auth, health and resource clients for ``cfg.api_base_url``."""
    from src.infrastructure.api import (
        AuthApiClient,
        HealthApiClient,
        build_resource_clients,
    )

    timeout = cfg.get_http_timeout()
    return MidasApi(
        auth=AuthApiClient(base_url=cfg.api_base_url, timeout=timeout),
        health=HealthApiClient(base_url=cfg.api_base_url, timeout=timeout),
        resources=build_resource_clients(base_url=cfg.api_base_url, timeout=timeout),
    )


def build_session_registry(cfg: Settings) -> "MemorySessionRegistry":
    from src.infrastructure.session import MemorySessionRegistry

    return MemorySessionRegistry(
        idle_timeout=timedelta(minutes=cfg.session_idle_timeout_minutes),
        max_sessions=cfg.session_max_count,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    return build_logger(get_settings())


@lru_cache()
def get_midas_api() -> MidasApi:
    """Return the application-scoped Midas API clients."""
    return build_midas_api(get_settings())

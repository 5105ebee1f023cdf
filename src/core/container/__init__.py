"""Container module - Centralized dependency construction.

    from src.core.container import get_logger, build_midas_api

- infrastructure: logger, Midas API clients, session registry
"""

from src.core.container.infrastructure import (
    MidasApi,
    build_logger,
    build_midas_api,
    build_session_registry,
    get_logger,
    get_midas_api,
)

__all__ = [
    "MidasApi",
    "build_logger",
    "build_midas_api",
    "build_session_registry",
    "get_logger",
    "get_midas_api",
]

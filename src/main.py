"""
Main FastAPI application entry point for the Midas console.

``create_app`` wires settings, logging, the Midas API clients, the session
registry and the navigation guard onto ``app.state``, then installs the
middleware and routers. A module-level ``app`` is provided for uvicorn.

Run locally:
    python -m src.main
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from src.application.services import HealthProbe, NavigationGuard
from src.core.config import Settings, get_settings
from src.core.container import (
    build_logger,
    build_midas_api,
    build_session_registry,
    get_logger,
    get_midas_api,
)
from src.presentation.api.middleware import (
    ConsoleSessionMiddleware,
    NavigationGuardMiddleware,
    TraceMiddleware,
)
from src.presentation.routers import (
    auth_router,
    filter_router,
    home_router,
    resource_router,
    system_router,
)
from src.presentation.routers.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: log the configuration the console talks to
    - Shutdown: drop every console session

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    settings: Settings = app.state.settings
    logger = app.state.logger

    logger.info(
        "console_starting",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment.value,
        api_base_url=settings.api_base_url,
    )

    yield

    active_sessions = app.state.session_registry.session_count()
    app.state.session_registry.clear_all()
    logger.info("console_stopped", dropped_sessions=active_sessions)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build a console application.

    Args:
        settings: Explicit settings (tests); process settings when None.

    Returns:
        FastAPI: Configured application.
    """
    cfg = settings or get_settings()
    logger = get_logger() if settings is None else build_logger(cfg)
    midas_api = get_midas_api() if settings is None else build_midas_api(cfg)

    app = FastAPI(
        title=cfg.app_name,
        description="Administrative console for the Midas API",
        version=cfg.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=cfg.debug,
        lifespan=lifespan,
    )

    app.state.settings = cfg
    app.state.logger = logger
    app.state.midas_api = midas_api
    app.state.session_registry = build_session_registry(cfg)
    app.state.navigation_guard = NavigationGuard(
        health_probe=HealthProbe(health_api=midas_api.health, logger=logger),
        health_check_timeout=cfg.health_check_timeout_seconds,
        logger=logger,
    )

    # Last added runs first: Trace -> Session -> NavigationGuard
    app.add_middleware(NavigationGuardMiddleware)
    app.add_middleware(ConsoleSessionMiddleware)
    app.add_middleware(TraceMiddleware)

    # Register global exception handlers (RFC 7807 error responses)
    register_exception_handlers(app)

    app.include_router(system_router)
    app.include_router(auth_router)
    app.include_router(home_router)
    app.include_router(filter_router)
    # Catch-all /{resource} routes go last
    app.include_router(resource_router)

    return app


app = create_app()


if __name__ == "__main__":
    _settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=_settings.host,
        port=_settings.port,
        reload=_settings.reload,
    )

"""FastAPI dependencies for console routes.

Every request gets services bound to its own ConsoleSession; the shared
pieces (clients, logger, settings) come from ``app.state``.

Usage:
    @router.get("/")
    async def home(
        greeting_service: Annotated[GreetingService, Depends(get_greeting_service)],
        chrome: Annotated[ChromeView, Depends(get_chrome)],
    ): ...
"""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from src.application.services import (
    AuthGateway,
    ConsoleSession,
    ErrorClassifier,
    GreetingService,
    ResourceService,
)
from src.core.config import Settings
from src.domain.protocols import LoggerProtocol
from src.infrastructure.session import MemorySessionRegistry
from src.presentation.api.chrome import build_chrome
from src.schemas import ChromeView


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_request_logger(request: Request) -> LoggerProtocol:
    return request.app.state.logger


def get_console_session(request: Request) -> ConsoleSession:
    """Return the session attached by ConsoleSessionMiddleware.

    Raises:
        HTTPException 500: If the middleware did not run for this route.
    """
    session = getattr(request.state, "console_session", None)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Console session is not available for this route",
        )
    return session


def get_session_registry(request: Request) -> MemorySessionRegistry:
    return request.app.state.session_registry


def get_chrome(request: Request) -> ChromeView:
    verdict = getattr(request.state, "navigation", None)
    return build_chrome(bool(verdict and verdict.show_authenticated_chrome))


def get_auth_gateway(
    request: Request,
    session: Annotated[ConsoleSession, Depends(get_console_session)],
    logger: Annotated[LoggerProtocol, Depends(get_request_logger)],
) -> AuthGateway:
    return AuthGateway(
        store=session.credentials,
        auth_api=request.app.state.midas_api.auth,
        logger=logger,
    )


def get_greeting_service(
    gateway: Annotated[AuthGateway, Depends(get_auth_gateway)],
) -> GreetingService:
    return GreetingService(gateway=gateway)


def _build_resource_service(
    request: Request,
    resource: str,
    gateway: AuthGateway,
    settings: Settings,
    logger: LoggerProtocol,
) -> ResourceService:
    resource_api = request.app.state.midas_api.resources.get(resource)
    if resource_api is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown resource '{resource}'",
        )
    return ResourceService(
        resource_api=resource_api,
        gateway=gateway,
        classifier=ErrorClassifier(on_session_expired=gateway.logout, logger=logger),
        load_timeout=settings.resource_load_timeout_seconds,
        logger=logger,
    )


def get_resource_service(
    resource: str,
    request: Request,
    gateway: Annotated[AuthGateway, Depends(get_auth_gateway)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    logger: Annotated[LoggerProtocol, Depends(get_request_logger)],
) -> ResourceService:
    """Build the ResourceService for the ``{resource}`` path segment.

    Raises:
        HTTPException 404: If the console does not know the resource.
    """
    return _build_resource_service(request, resource, gateway, settings, logger)


def resource_service_for(resource: str) -> Callable[..., ResourceService]:
    """Dependency factory for routes bound to one fixed resource.

    Usage:
        service: Annotated[ResourceService, Depends(resource_service_for("posts"))]
    """

    def dependency(
        request: Request,
        gateway: Annotated[AuthGateway, Depends(get_auth_gateway)],
        settings: Annotated[Settings, Depends(get_app_settings)],
        logger: Annotated[LoggerProtocol, Depends(get_request_logger)],
    ) -> ResourceService:
        return _build_resource_service(request, resource, gateway, settings, logger)

    return dependency

"""Login, logout and backend-error views.

POST /login outcomes:
    SUCCESS              -> 303 to / (the session is registered under a new id)
    BACKEND_UNAVAILABLE  -> 303 to /backend-error
    INVALID_CREDENTIALS  -> 401 login view, error message, clear password
    INVALID_INPUT        -> 422 login view, warning message

POST /logout clears the credentials and drops the session; the navigation
guard does not run for it.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, RedirectResponse

from src.application.services import AuthGateway, ConsoleSession
from src.application.services.navigation_guard import (
    BACKEND_ERROR_PATH,
    HOME_PATH,
    LOGIN_PATH,
    LOGOUT_PATH,
)
from src.domain.enums import AuthStatus
from src.infrastructure.session import MemorySessionRegistry
from src.presentation.api.dependencies import (
    get_auth_gateway,
    get_chrome,
    get_console_session,
    get_session_registry,
)
from src.schemas import BackendErrorView, ChromeView, LoginRequest, LoginView, Notification

auth_router = APIRouter(tags=["Authentication"])


@auth_router.get(LOGIN_PATH, response_model=LoginView)
async def login_view(chrome: Annotated[ChromeView, Depends(get_chrome)]) -> LoginView:
    return LoginView(chrome=chrome)


@auth_router.post(
    LOGIN_PATH,
    response_model=LoginView,
    responses={
        303: {"description": "Logged in, or the Midas API is unavailable"},
        401: {"model": LoginView, "description": "Invalid username or password"},
        422: {"model": LoginView, "description": "Username or password missing"},
    },
)
async def login(
    data: LoginRequest,
    gateway: Annotated[AuthGateway, Depends(get_auth_gateway)],
    session: Annotated[ConsoleSession, Depends(get_console_session)],
    registry: Annotated[MemorySessionRegistry, Depends(get_session_registry)],
    chrome: Annotated[ChromeView, Depends(get_chrome)],
) -> JSONResponse | RedirectResponse:
    """Authenticate the operator against the Midas API."""
    outcome = await gateway.authenticate(data.username, data.password)

    match outcome.status:
        case AuthStatus.SUCCESS:
            registry.register(session)
            return RedirectResponse(HOME_PATH, status_code=status.HTTP_303_SEE_OTHER)
        case AuthStatus.BACKEND_UNAVAILABLE:
            return RedirectResponse(BACKEND_ERROR_PATH, status_code=status.HTTP_303_SEE_OTHER)
        case AuthStatus.INVALID_CREDENTIALS:
            view = LoginView(
                status=outcome.status.value,
                message=Notification.error(outcome.message),
                clear_password=True,
                chrome=chrome,
            )
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content=view.model_dump(mode="json"),
            )
        case _:
            view = LoginView(
                status=outcome.status.value,
                message=Notification.warning(outcome.message),
                chrome=chrome,
            )
            return JSONResponse(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                content=view.model_dump(mode="json"),
            )


@auth_router.post(LOGOUT_PATH, status_code=status.HTTP_303_SEE_OTHER)
async def logout(
    gateway: Annotated[AuthGateway, Depends(get_auth_gateway)],
    session: Annotated[ConsoleSession, Depends(get_console_session)],
    registry: Annotated[MemorySessionRegistry, Depends(get_session_registry)],
) -> RedirectResponse:
    gateway.logout()
    registry.delete(session.session_id)
    return RedirectResponse(LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)


@auth_router.get(BACKEND_ERROR_PATH, response_model=BackendErrorView)
async def backend_error_view(
    chrome: Annotated[ChromeView, Depends(get_chrome)],
) -> BackendErrorView:
    """Shown when the Midas API is unreachable; Retry navigates to ``/``."""
    return BackendErrorView(retry_url=HOME_PATH, chrome=chrome)

"""Navigation guard middleware.

Runs NavigationGuard for every view request before the route executes.
Redirect verdicts short-circuit with ``303 See Other``; a PROCEED verdict
is stored as ``request.state.navigation`` for the route to read the chrome
flag.

Routes outside the view space (console liveness and API docs) get neither
a session nor the guard. ``POST /logout`` gets its session but skips the
guard: logging out must clear the credentials even while the Midas API is
unreachable.
"""

from typing import Awaitable, Callable

from starlette import status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

from src.application.services.navigation_guard import LOGOUT_PATH

UNGUARDED_PATHS = frozenset(
    {"/healthz", "/docs", "/docs/oauth2-redirect", "/redoc", "/openapi.json"}
)
GUARD_EXEMPT_PATHS = UNGUARDED_PATHS | {LOGOUT_PATH}


def is_unguarded_path(path: str) -> bool:
    return path in UNGUARDED_PATHS


def is_guard_exempt(path: str) -> bool:
    return path in GUARD_EXEMPT_PATHS


class NavigationGuardMiddleware(BaseHTTPMiddleware):
    """Applies the guard verdict to every navigation.

    Requires ConsoleSessionMiddleware to run first.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        path = request.url.path
        if is_guard_exempt(path):
            return await call_next(request)

        guard = request.app.state.navigation_guard
        verdict = await guard.evaluate(path, request.state.console_session)

        if verdict.redirect_to is not None:
            return RedirectResponse(verdict.redirect_to, status_code=status.HTTP_303_SEE_OTHER)

        request.state.navigation = verdict
        return await call_next(request)

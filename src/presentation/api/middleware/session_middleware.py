"""Console session middleware.

Resolves the opaque ``midas_session`` cookie to a ConsoleSession from the
registry on ``app.state`` and exposes it as ``request.state.console_session``.
Without a valid cookie the request gets a transient session that the
registry does not keep.

After the route ran, the cookie follows the registry:
- registered under a different id (login just succeeded): issue the new id
- not registered but a cookie was sent (logout, expiry): delete the cookie

The cookie only ever carries the random session id; credentials stay in
server memory.
"""

from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from src.presentation.api.middleware.navigation_middleware import is_unguarded_path


class ConsoleSessionMiddleware(BaseHTTPMiddleware):
    """Attaches the caller's ConsoleSession to the request."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if is_unguarded_path(request.url.path):
            return await call_next(request)

        settings = request.app.state.settings
        registry = request.app.state.session_registry

        cookie_value = request.cookies.get(settings.session_cookie_name)
        session = registry.open(cookie_value)
        request.state.console_session = session

        response = await call_next(request)

        if registry.is_registered(session):
            if cookie_value != session.session_id:
                request.app.state.logger.debug(
                    "console_session_issued",
                    session_id=session.session_id[:8],
                    active_sessions=registry.session_count(),
                )
                response.set_cookie(
                    key=settings.session_cookie_name,
                    value=session.session_id,
                    max_age=settings.session_idle_timeout_minutes * 60,
                    httponly=True,
                    secure=settings.session_cookie_secure,
                    samesite="lax",
                )
        elif cookie_value is not None:
            response.delete_cookie(
                key=settings.session_cookie_name,
                httponly=True,
                secure=settings.session_cookie_secure,
                samesite="lax",
            )
        return response

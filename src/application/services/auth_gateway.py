"""Authentication gateway for console operators.

Performs the credential-validation round trip against ``HEAD /auth`` and
owns the login/logout side effects on the session's CredentialStore.

Outcome mapping for ``authenticate``:
    blank username or password        -> INVALID_INPUT (no network call)
    2xx                               -> SUCCESS, credential stored
    HTTP 401                          -> INVALID_CREDENTIALS, store untouched
    other HTTP status                 -> BACKEND_UNAVAILABLE "HTTP <status>"
    refused/unreachable connection    -> BACKEND_UNAVAILABLE "Connection refused"
    other transport failure           -> BACKEND_UNAVAILABLE "Connection error: ..."
    anything else                     -> BACKEND_UNAVAILABLE "Unexpected error: ..."
"""

import errno

import httpx

from src.application.services.credential_store import (
    CredentialStore,
    encode_basic_auth,
)
from src.domain.protocols import AuthApiProtocol, LoggerProtocol
from src.domain.value_objects import AuthOutcome

_REFUSED_ERRNOS = frozenset(
    {errno.ECONNREFUSED, errno.EHOSTUNREACH, errno.ENETUNREACH}
)
_REFUSED_MARKERS = ("connection refused", "unreachable")


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_connection_refused(exc: BaseException) -> bool:
    """Walk the cause chain looking for a refused or unreachable connection.

    httpx wraps the socket error twice (httpx -> httpcore -> OSError), so the
    check follows ``__cause__``/``__context__`` and also inspects messages.
    """
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, ConnectionRefusedError):
            return True
        if isinstance(current, OSError) and current.errno in _REFUSED_ERRNOS:
            return True
        text = str(current).lower()
        if any(marker in text for marker in _REFUSED_MARKERS):
            return True
        current = current.__cause__ or current.__context__
    return False


class AuthGateway:
    """Validates operator credentials and manages the session's auth state.

    Args:
        store: CredentialStore of the current console session.
        auth_api: Client for ``HEAD /auth``.
        logger: Structured logger.

    Example:
        >>> gateway = AuthGateway(store=session.credentials, auth_api=api, logger=log)
        >>> outcome = await gateway.authenticate("admin", "correct")
        >>> outcome.is_success
        True
    """

    def __init__(
        self,
        *,
        store: CredentialStore,
        auth_api: AuthApiProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._store = store
        self._auth_api = auth_api
        self._logger = logger

    async def authenticate(self, username: str | None, password: str | None) -> AuthOutcome:
        """Validate the credentials against the Midas API.

        Args:
            username: Operator login name as typed.
            password: Operator password as typed.

        Returns:
            AuthOutcome: One of the four outcomes; never raises.
        """
        self._logger.debug("authentication_started", username=username)

        if _is_blank(username) or _is_blank(password):
            self._logger.debug("authentication_rejected_blank_input")
            return AuthOutcome.invalid_input()

        header = encode_basic_auth(username or "", password or "")

        try:
            await self._auth_api.validate_credentials(header)
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 401:
                self._logger.info("authentication_invalid_credentials", username=username)
                return AuthOutcome.invalid_credentials()
            self._logger.error(
                "authentication_backend_http_error",
                username=username,
                status_code=status,
            )
            return AuthOutcome.backend_unavailable(f"HTTP {status}")
        except httpx.TransportError as e:
            self._logger.error(
                "authentication_backend_connection_failed",
                error=e,
                username=username,
            )
            if is_connection_refused(e):
                return AuthOutcome.backend_unavailable("Connection refused")
            return AuthOutcome.backend_unavailable(f"Connection error: {e}")
        except Exception as e:
            self._logger.error(
                "authentication_unexpected_error",
                error=e,
                username=username,
            )
            return AuthOutcome.backend_unavailable(f"Unexpected error: {e}")

        self._store.store(username, password)
        self._logger.info("operator_logged_in", username=username)
        return AuthOutcome.success()

    def logout(self) -> None:
        """Clear the session's credential unconditionally."""
        username = self._store.username
        self._store.clear()
        self._logger.info("operator_logged_out", username=username)

    def is_authenticated(self) -> bool:
        return self._store.is_authenticated()

    def get_basic_auth_header(self) -> str | None:
        return self._store.basic_auth_header()

    def get_username(self) -> str | None:
        return self._store.username

"""Shared classification policy for failed Midas API calls.

Every resource-facing caller funnels failures through this module so the
mapping from "what went wrong" to ``ErrorKind`` exists exactly once.

Rules, applied in order:
    1. Transport failure (no response, or the bounded wait elapsed)
       -> RemoteConnectionError "Backend connection failed"
    2. HTTP 401 -> RemoteAuthenticationError "Session expired"
       (ErrorClassifier also logs the session out)
    3. Any other HTTP status -> RemoteServiceError "Backend error: <status>"
    4. Anything else -> RemoteServiceError "Unexpected error"

Usage:
    classifier = ErrorClassifier(on_session_expired=gateway.logout, logger=logger)
    try:
        items = await api.list_all(header)
    except Exception as e:
        return Failure(error=classifier.classify(e, operation="list_pages"))
"""

from collections.abc import Callable

import httpx

from src.core.constants import RESPONSE_BODY_MAX_LENGTH
from src.core.enums import ErrorCode
from src.domain.enums import ErrorKind
from src.domain.errors import (
    RemoteAuthenticationError,
    RemoteCallError,
    RemoteConnectionError,
    RemoteServiceError,
)
from src.domain.protocols import LoggerProtocol

HTTP_UNAUTHORIZED = 401


def _response_excerpt(response: httpx.Response) -> str:
    try:
        return response.text[:RESPONSE_BODY_MAX_LENGTH]
    except httpx.ResponseNotRead:
        return ""


def classify_failure(exc: BaseException) -> RemoteCallError:
    """Map a failed remote call to its classified error.

    Pure function: no logging, no session side effects.

    Args:
        exc: The exception the remote call (or its bounded wait) ended with.

    Returns:
        RemoteCallError: Exactly one of the three error kinds.
    """
    if isinstance(exc, (httpx.TransportError, TimeoutError)):
        return RemoteConnectionError(
            code=ErrorCode.BACKEND_CONNECTION_FAILED,
            message="Backend connection failed",
            details={"cause": str(exc) or type(exc).__name__},
        )

    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        if status == HTTP_UNAUTHORIZED:
            return RemoteAuthenticationError(
                code=ErrorCode.SESSION_EXPIRED,
                message="Session expired",
                status_code=status,
            )
        return RemoteServiceError(
            code=ErrorCode.BACKEND_ERROR,
            message=f"Backend error: {status}",
            status_code=status,
            details={"response_body": _response_excerpt(exc.response)},
        )

    return RemoteServiceError(
        code=ErrorCode.UNEXPECTED_ERROR,
        message="Unexpected error",
        details={"cause": f"{type(exc).__name__}: {exc}"},
    )


class ErrorClassifier:
    """Classifies failures and applies the session side effect of a 401.

    Attributes:
        _on_session_expired: Called once for every AUTHENTICATION_ERROR,
            normally ``AuthGateway.logout``.
        _logger: Structured logger.
    """

    def __init__(
        self,
        *,
        on_session_expired: Callable[[], None],
        logger: LoggerProtocol,
    ) -> None:
        self._on_session_expired = on_session_expired
        self._logger = logger

    def classify(self, exc: BaseException, *, operation: str = "remote_call") -> RemoteCallError:
        """Classify ``exc``; log the operator out when the session expired.

        Args:
            exc: Exception raised by the remote call.
            operation: Operation name for logging.

        Returns:
            RemoteCallError: The classified error.
        """
        return self.handle(classify_failure(exc), operation=operation)

    def handle(self, error: RemoteCallError, *, operation: str = "remote_call") -> RemoteCallError:
        """Log an already classified error and apply its session side effect.

        Used for outcomes drained from ``run_bounded``: classification happens
        inside the worker task, the logout runs on the request coroutine.
        """
        self._logger.warning(
            "remote_call_failed",
            operation=operation,
            kind=error.kind.value,
            code=error.code.value,
            status_code=error.status_code,
        )

        if error.kind is ErrorKind.AUTHENTICATION_ERROR:
            self._on_session_expired()

        return error

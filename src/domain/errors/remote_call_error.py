"""Errors describing failed calls to the Midas API.

These form the tagged variant produced by the error classifier. Each
subclass pins its ``kind`` so callers can match on the tag alone:

    match error.kind:
        case ErrorKind.AUTHENTICATION_ERROR: ...
        case ErrorKind.CONNECTION_ERROR: ...
        case ErrorKind.SERVICE_ERROR: ...

Architecture:
- Domain layer errors, returned inside ``Failure``
- Inherit from DomainError (core layer)
- Produced only by ``src.application.services.error_classifier`` and by
  the bounded task runner on timeout

Usage:
    from src.domain.errors import RemoteServiceError
    from src.core.enums import ErrorCode

    RemoteServiceError(
        code=ErrorCode.BACKEND_ERROR,
        message="Backend error: 404",
        status_code=404,
    )
"""

from dataclasses import dataclass
from typing import ClassVar

from src.core.errors import DomainError
from src.domain.enums import ErrorKind


@dataclass(frozen=True, slots=True, kw_only=True)
class RemoteCallError(DomainError):
    """Base class for classified remote call failures.

    Attributes:
        code: Machine-readable ErrorCode.
        message: Operator-facing message.
        status_code: HTTP status of the failed response, when one was received.
        details: Additional context for logs.
    """

    kind: ClassVar[ErrorKind]

    status_code: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class RemoteAuthenticationError(RemoteCallError):
    """The Midas API rejected the session's credentials.

    Recovery: the session has already been logged out; redirect to login.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.AUTHENTICATION_ERROR


@dataclass(frozen=True, slots=True, kw_only=True)
class RemoteServiceError(RemoteCallError):
    """The Midas API answered with an error, or the call failed unexpectedly.

    Recovery: show the message inline; authentication state is unchanged.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.SERVICE_ERROR


@dataclass(frozen=True, slots=True, kw_only=True)
class RemoteConnectionError(RemoteCallError):
    """No response could be obtained from the Midas API.

    Raised when:
    - The connection is refused or the host is unreachable
    - DNS resolution fails
    - The call or its bounded wait timed out

    Recovery: surface as "backend unavailable"; authentication state is unchanged.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.CONNECTION_ERROR

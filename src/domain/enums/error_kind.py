"""Failure taxonomy for calls to the Midas API.

Every failed remote call is reduced to exactly one of these kinds. Callers
branch on the kind, never on exception types or message text.

Kinds:
- AUTHENTICATION_ERROR: HTTP 401 on an authenticated call; the session is
  logged out as part of classification
- SERVICE_ERROR: Any other HTTP failure or unexpected fault
- CONNECTION_ERROR: No response obtained (connect failure, timeout)
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of a failed remote call."""

    AUTHENTICATION_ERROR = "authentication_error"
    SERVICE_ERROR = "service_error"
    CONNECTION_ERROR = "connection_error"

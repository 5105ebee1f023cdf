"""Machine-readable error codes carried by console errors.

Codes follow the SUBJECT_REASON naming convention and travel with every
``DomainError`` so view-models and logs can be filtered without parsing
message text.

Categories:
- Session errors (SESSION_EXPIRED, NOT_AUTHENTICATED)
- Remote call errors (BACKEND_*, UNEXPECTED_ERROR)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Session errors
    SESSION_EXPIRED = "session_expired"
    NOT_AUTHENTICATED = "not_authenticated"

    # Remote call errors
    BACKEND_CONNECTION_FAILED = "backend_connection_failed"
    BACKEND_TIMEOUT = "backend_timeout"
    BACKEND_ERROR = "backend_error"
    UNEXPECTED_ERROR = "unexpected_error"

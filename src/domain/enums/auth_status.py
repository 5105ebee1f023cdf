"""Authentication outcome statuses.

Statuses:
- SUCCESS: Credentials accepted by the Midas API and stored in the session
- INVALID_CREDENTIALS: Midas API rejected the credentials (HTTP 401)
- BACKEND_UNAVAILABLE: Midas API unreachable or answering with an error
- INVALID_INPUT: Username or password missing, nothing was sent
"""

from enum import Enum


class AuthStatus(str, Enum):
    """Four-way outcome of a login attempt."""

    SUCCESS = "success"
    INVALID_CREDENTIALS = "invalid_credentials"
    BACKEND_UNAVAILABLE = "backend_unavailable"
    INVALID_INPUT = "invalid_input"

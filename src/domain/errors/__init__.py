"""Domain errors package.

Usage:
    from src.domain.errors import RemoteCallError, RemoteAuthenticationError
"""

from src.domain.errors.remote_call_error import (
    RemoteAuthenticationError,
    RemoteCallError,
    RemoteConnectionError,
    RemoteServiceError,
)

__all__ = [
    "RemoteAuthenticationError",
    "RemoteCallError",
    "RemoteConnectionError",
    "RemoteServiceError",
]

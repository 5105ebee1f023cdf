"""Domain enums for the console.

Available Enums:
    - AuthStatus: Four-way login outcome
    - ErrorKind: Remote call failure taxonomy
    - ViewTarget, NavigationState, NavigationDecision: Navigation guard
"""

from src.domain.enums.auth_status import AuthStatus
from src.domain.enums.error_kind import ErrorKind
from src.domain.enums.navigation import (
    NavigationDecision,
    NavigationState,
    ViewTarget,
)

__all__ = [
    "AuthStatus",
    "ErrorKind",
    "NavigationDecision",
    "NavigationState",
    "ViewTarget",
]

"""Starlette middleware for the console.

Order, outermost first: TraceMiddleware -> ConsoleSessionMiddleware ->
NavigationGuardMiddleware.
"""

from src.presentation.api.middleware.navigation_middleware import (
    GUARD_EXEMPT_PATHS,
    UNGUARDED_PATHS,
    NavigationGuardMiddleware,
    is_guard_exempt,
    is_unguarded_path,
)
from src.presentation.api.middleware.session_middleware import ConsoleSessionMiddleware
from src.presentation.api.middleware.trace_middleware import TraceMiddleware

__all__ = [
    "ConsoleSessionMiddleware",
    "GUARD_EXEMPT_PATHS",
    "NavigationGuardMiddleware",
    "TraceMiddleware",
    "UNGUARDED_PATHS",
    "is_guard_exempt",
    "is_unguarded_path",
]

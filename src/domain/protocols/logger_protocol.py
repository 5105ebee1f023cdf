"""LoggerProtocol definition for structured logging.

Every console component receives a logger implementing this protocol
instead of importing a logging backend directly.

Log Levels:
    - DEBUG: Detailed diagnostic info (probe results, transitions)
    - INFO: Normal operational events (login, logout, lifecycle)
    - WARNING: Degraded behavior (remote call failures, redirects to error view)
    - ERROR: Operation failed unexpectedly

Security:
    - NEVER log passwords or Authorization header values
    - Usernames are fine; they identify the operator in audit trails

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("operator_logged_in", username=username)

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("navigation_redirected", target="/pages")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All calls are structured: an event name plus key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level event."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level event."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level event."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level event.

        Args:
            message: Event name.
            error: Optional exception; adapters add error_type and error_message.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with context included in every call.

        The original logger is left unchanged.
        """
        ...

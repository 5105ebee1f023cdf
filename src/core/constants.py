"""Centralized constants for internal implementation details.

These are fixed protocol details and fallback values, NOT per-environment
configuration. Anything an operator may want to tune lives in
``src/core/config.py``.

Example:
    >>> from src.core.constants import BASIC_PREFIX
    >>> header = f"{BASIC_PREFIX}{encoded}"
"""

# =============================================================================
# Authorization
# =============================================================================

BASIC_PREFIX: str = "Basic "
"""HTTP Authorization header prefix for Basic credentials."""

AUTHORIZATION_HEADER: str = "Authorization"
"""Name of the header carrying operator credentials to the Midas API."""


# =============================================================================
# Timeouts
# =============================================================================

HEALTH_CHECK_TIMEOUT_DEFAULT: float = 3.0
"""Bounded wait for the per-navigation health probe in seconds."""

RESOURCE_LOAD_TIMEOUT_DEFAULT: float = 30.0
"""Bounded wait for bulk resource loads in seconds."""

HTTP_TIMEOUT_CONNECT_DEFAULT: float = 5.0
"""Default connect timeout for Midas API calls in seconds."""

HTTP_TIMEOUT_READ_DEFAULT: float = 30.0
"""Default read timeout for Midas API calls in seconds."""

HTTP_TIMEOUT_POOL_DEFAULT: float = 5.0
"""Default connection pool acquisition timeout in seconds."""


# =============================================================================
# Health
# =============================================================================

HEALTH_UNAVAILABLE_STATUS_FLOOR: int = 500
"""Lowest HTTP status that marks the Midas API as unavailable."""


# =============================================================================
# Sessions
# =============================================================================

SESSION_ID_BYTES: int = 32
"""Entropy of the opaque session cookie value in bytes."""

SESSION_MAX_COUNT_DEFAULT: int = 1000
"""Default cap on concurrently registered console sessions."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum response body length kept in error details for debugging."""

"""Navigation guard enums.

ViewTarget tells the guard which checks apply to a requested view,
NavigationState names the steps of one evaluation and NavigationDecision
is its terminal outcome.
"""

from enum import Enum


class ViewTarget(str, Enum):
    """Category of the view a navigation event targets."""

    BACKEND_ERROR = "backend_error"
    LOGIN = "login"
    PROTECTED = "protected"


class NavigationState(str, Enum):
    """Intermediate states of a single guard evaluation."""

    ENTRY = "entry"
    HEALTH_CHECKED = "health_checked"
    AUTH_CHECKED = "auth_checked"
    ALLOWED = "allowed"


class NavigationDecision(str, Enum):
    """Terminal outcome of a single guard evaluation."""

    PROCEED = "proceed"
    REDIRECT_TO_LOGIN = "redirect_to_login"
    REDIRECT_TO_BACKEND_ERROR = "redirect_to_backend_error"

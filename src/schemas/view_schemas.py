"""View-model schemas for the console's layout, login and home views.

A view-model is the JSON document a console route returns in place of a
rendered page. Every view carries a ``chrome`` block describing the
authenticated-only affordances (logout action, navigation tabs).
"""

from enum import Enum

from pydantic import BaseModel, Field


class NotificationLevel(str, Enum):
    """Severity of a transient notification."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class Notification(BaseModel):
    """Transient message shown to the operator.

    Attributes:
        level: Severity.
        message: Operator-facing text.
    """

    level: NotificationLevel = Field(..., description="Notification severity")
    message: str = Field(..., description="Operator-facing text")

    @classmethod
    def error(cls, message: str) -> "Notification":
        return cls(level=NotificationLevel.ERROR, message=message)

    @classmethod
    def warning(cls, message: str) -> "Notification":
        return cls(level=NotificationLevel.WARNING, message=message)

    @classmethod
    def success(cls, message: str) -> "Notification":
        return cls(level=NotificationLevel.SUCCESS, message=message)


class NavigationTab(BaseModel):
    """One entry of the navigation tabs."""

    label: str = Field(..., description="Tab label", examples=["Pages"])
    path: str = Field(..., description="Console path", examples=["/pages"])


class ChromeView(BaseModel):
    """Authenticated-only affordances of the layout.

    Both are empty/false unless the guard decided to show them.
    """

    show_logout: bool = Field(False, description="Whether the logout action is offered")
    navigation: list[NavigationTab] = Field(
        default_factory=list,
        description="Navigation tabs (authenticated views only)",
    )


class LoginRequest(BaseModel):
    """Login form submission.

    Both fields are optional at the HTTP level; blank values are reported
    by the login view itself.
    """

    username: str | None = Field(None, description="Operator login name", examples=["admin"])
    password: str | None = Field(None, description="Operator password")


class LoginView(BaseModel):
    """Login view-model.

    Attributes:
        title: Page title.
        status: AuthStatus value of the last attempt, if any.
        message: Inline message for the last attempt.
        clear_password: True when the client must clear the password field.
        chrome: Layout affordances (always hidden on this view).
    """

    title: str = Field("Midas - Login", description="Page title")
    status: str | None = Field(None, description="Outcome of the last login attempt")
    message: Notification | None = Field(None, description="Inline message")
    clear_password: bool = Field(False, description="Client must clear the password field")
    chrome: ChromeView = Field(default_factory=ChromeView)


class BackendErrorView(BaseModel):
    """View shown when the Midas API cannot be reached."""

    title: str = Field("Backend Service Unavailable", description="Page title")
    subtitle: str = Field("Cannot connect to the backend service.")
    explanation: str = Field(
        "The application cannot connect to the backend service. This might be due "
        "to network issues or the service being temporarily unavailable."
    )
    retry_url: str = Field("/", description="Where the Retry action navigates")
    chrome: ChromeView = Field(default_factory=ChromeView)


class HomeView(BaseModel):
    """Home (greeting) view-model."""

    title: str = Field("Midas", description="Page title")
    welcome: str = Field(..., description="Welcome line naming the operator")
    greeting: str = Field(..., description="Greeting for the submitted name")
    chrome: ChromeView = Field(default_factory=ChromeView)


class ConsoleHealthResponse(BaseModel):
    """Liveness of the console process itself (not of the Midas API)."""

    status: str = Field(..., examples=["healthy"])
    version: str = Field(..., examples=["0.1.0"])

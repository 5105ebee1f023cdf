"""Outcome of a login attempt.

AuthOutcome is an immutable value created only through its named factories,
each of which fixes the operator-facing message for its status.

Usage:
    from src.domain.value_objects import AuthOutcome

    outcome = AuthOutcome.backend_unavailable("HTTP 503")
    outcome.status      # AuthStatus.BACKEND_UNAVAILABLE
    outcome.message     # "Backend service unavailable: HTTP 503"
"""

from dataclasses import dataclass, field

from src.domain.enums import AuthStatus

_FACTORY_TOKEN = object()


@dataclass(frozen=True, slots=True)
class AuthOutcome:
    """Immutable result of ``AuthGateway.authenticate``.

    Attributes:
        status: Which of the four outcomes occurred.
        message: Human-readable message for the login view.

    Raises:
        TypeError: If constructed directly instead of through a factory.
    """

    status: AuthStatus
    message: str
    _token: object = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self._token is not _FACTORY_TOKEN:
            raise TypeError("AuthOutcome must be created through its factory methods")

    @classmethod
    def success(cls) -> "AuthOutcome":
        return cls(AuthStatus.SUCCESS, "Authentication successful", _FACTORY_TOKEN)

    @classmethod
    def invalid_credentials(cls) -> "AuthOutcome":
        return cls(
            AuthStatus.INVALID_CREDENTIALS,
            "Invalid username or password",
            _FACTORY_TOKEN,
        )

    @classmethod
    def backend_unavailable(cls, details: str) -> "AuthOutcome":
        return cls(
            AuthStatus.BACKEND_UNAVAILABLE,
            f"Backend service unavailable: {details}",
            _FACTORY_TOKEN,
        )

    @classmethod
    def invalid_input(cls) -> "AuthOutcome":
        return cls(
            AuthStatus.INVALID_INPUT,
            "Username and password are required",
            _FACTORY_TOKEN,
        )

    @property
    def is_success(self) -> bool:
        """True only for the SUCCESS status."""
        return self.status is AuthStatus.SUCCESS

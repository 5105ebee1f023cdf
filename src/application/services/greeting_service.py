"""Greeting shown on the console's home view."""

from src.application.services.auth_gateway import AuthGateway


class GreetingService:
    """Builds the home view greeting for the current operator."""

    def __init__(self, *, gateway: AuthGateway) -> None:
        self._gateway = gateway

    def greet(self, name: str | None) -> str:
        """Return ``"Hello, {name}!"`` or the anonymous variant.

        Without a usable credential the greeting degrades to
        ``"Error: Not authenticated"``.
        """
        if self._gateway.get_basic_auth_header() is None:
            return "Error: Not authenticated"
        if not name:
            return "Hello, anonymous user!"
        return f"Hello, {name}!"

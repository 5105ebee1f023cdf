"""Ports for the Midas API.

The application layer talks to the remote API only through these
protocols; ``src/infrastructure/api`` provides the httpx implementations.

Failure contract (shared by all three):
- HTTP-level failures raise ``httpx.HTTPStatusError``
  (HealthApiProtocol excepted: it returns every response as-is)
- Transport-level failures raise ``httpx.TransportError`` subclasses
"""

from typing import Any, Protocol

import httpx


class AuthApiProtocol(Protocol):
    """Credential validation endpoint (``HEAD /auth``)."""

    async def validate_credentials(self, authorization: str) -> httpx.Response:
        """Send the Authorization header and return the 2xx response."""
        ...


class HealthApiProtocol(Protocol):
    """Liveness endpoint (``HEAD /health``)."""

    async def check_health(self) -> httpx.Response:
        """Return the health response whatever its status code."""
        ...


class ResourceApiProtocol(Protocol):
    """CRUD endpoints of one domain resource (``/pages``, ``/users``, ...)."""

    @property
    def resource(self) -> str:
        """Path segment of the resource, e.g. ``"user-accounts"``."""
        ...

    async def list_all(self, authorization: str) -> list[dict[str, Any]]: ...

    async def list_where(
        self,
        sub_path: str,
        authorization: str,
        params: dict[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        """Filtered listing below the resource path, e.g. ``"published"``."""
        ...

    async def get(self, item_id: int, authorization: str) -> dict[str, Any]: ...

    async def create(
        self, payload: dict[str, Any], authorization: str
    ) -> dict[str, Any]: ...

    async def update(
        self, item_id: int, payload: dict[str, Any], authorization: str
    ) -> dict[str, Any]: ...

    async def delete(self, item_id: int, authorization: str) -> None: ...

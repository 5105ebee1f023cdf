"""CRUD access to one Midas API resource on behalf of the current session.

One class serves every resource (pages, posts, users, ...); only the
injected ResourceApiProtocol differs. Each operation:

1. Refuses immediately with ``RemoteAuthenticationError("User is not
   authenticated")`` when the session holds no credential. No network call
   is made and the session is not logged out.
2. Calls the API with the session's Basic auth header.
3. Returns ``Success`` with the payload, or ``Failure`` with the error the
   shared ErrorClassifier produced (a 401 logs the session out).

``list_all`` and the filtered listings of ``list_where`` are bulk loads and
run through ``run_bounded`` with the resource load timeout; the
single-record and mutation calls do not.
"""

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from src.application.services.auth_gateway import AuthGateway
from src.application.services.bounded_task import run_bounded
from src.application.services.error_classifier import ErrorClassifier
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import RemoteAuthenticationError, RemoteCallError
from src.domain.protocols import LoggerProtocol, ResourceApiProtocol

T = TypeVar("T")

Record = dict[str, Any]


def _not_authenticated() -> Failure[RemoteCallError]:
    return Failure(
        error=RemoteAuthenticationError(
            code=ErrorCode.NOT_AUTHENTICATED,
            message="User is not authenticated",
        )
    )


class ResourceService:
    """Session-scoped CRUD service for a single resource.

    Args:
        resource_api: Client for the resource's endpoints.
        gateway: The session's AuthGateway (credential source, logout target).
        classifier: Shared failure policy bound to ``gateway.logout``.
        load_timeout: Seconds allowed for ``list_all``.
        logger: Structured logger.
    """

    def __init__(
        self,
        *,
        resource_api: ResourceApiProtocol,
        gateway: AuthGateway,
        classifier: ErrorClassifier,
        load_timeout: float,
        logger: LoggerProtocol,
    ) -> None:
        self._api = resource_api
        self._gateway = gateway
        self._classifier = classifier
        self._load_timeout = load_timeout
        self._logger = logger

    @property
    def resource(self) -> str:
        return self._api.resource

    def _authorization(self) -> str | None:
        if not self._gateway.is_authenticated():
            return None
        return self._gateway.get_basic_auth_header()

    async def list_all(self) -> Result[list[Record], RemoteCallError]:
        """Load every record of the resource under the bulk-load bound."""
        return await self._load(
            f"list_{self.resource}",
            lambda header: self._api.list_all(header),
        )

    async def list_where(
        self, sub_path: str, params: dict[str, str] | None = None
    ) -> Result[list[Record], RemoteCallError]:
        """Load a filtered listing, e.g. ``list_where("recent", {"limit": "10"})``."""
        filter_name = sub_path.split("/", 1)[0]
        return await self._load(
            f"list_{self.resource}_{filter_name}",
            lambda header: self._api.list_where(sub_path, header, params),
        )

    async def get(self, item_id: int) -> Result[Record, RemoteCallError]:
        return await self._call(
            f"get_{self.resource}",
            lambda header: self._api.get(item_id, header),
        )

    async def create(self, payload: Record) -> Result[Record, RemoteCallError]:
        return await self._call(
            f"create_{self.resource}",
            lambda header: self._api.create(payload, header),
        )

    async def update(self, item_id: int, payload: Record) -> Result[Record, RemoteCallError]:
        return await self._call(
            f"update_{self.resource}",
            lambda header: self._api.update(item_id, payload, header),
        )

    async def delete(self, item_id: int) -> Result[None, RemoteCallError]:
        return await self._call(
            f"delete_{self.resource}",
            lambda header: self._api.delete(item_id, header),
        )

    async def _load(
        self,
        operation: str,
        request: Callable[[str], Awaitable[list[Record]]],
    ) -> Result[list[Record], RemoteCallError]:
        header = self._authorization()
        if header is None:
            return _not_authenticated()

        result = await run_bounded(lambda: request(header), timeout=self._load_timeout)
        match result:
            case Success(value=items):
                self._logger.info("resources_loaded", operation=operation, count=len(items))
            case Failure(error=error):
                self._classifier.handle(error, operation=operation)
        return result

    async def _call(
        self,
        operation: str,
        request: Callable[[str], Awaitable[T]],
    ) -> Result[T, RemoteCallError]:
        header = self._authorization()
        if header is None:
            return _not_authenticated()

        self._logger.debug("resource_call_started", operation=operation)
        try:
            value = await request(header)
        except Exception as e:
            return Failure(error=self._classifier.classify(e, operation=operation))

        self._logger.info("resource_call_succeeded", operation=operation)
        return Success(value=value)

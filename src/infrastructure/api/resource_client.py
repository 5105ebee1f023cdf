"""Generic CRUD client for the Midas API domain resources.

Every resource exposes the same five endpoints, so one client class serves
them all; ``RESOURCES`` lists the path segments the console knows.

    GET    /{resource}          -> list of objects
    GET    /{resource}/{id}     -> object
    POST   /{resource}          -> created object
    PUT    /{resource}/{id}     -> updated object
    DELETE /{resource}/{id}     -> no body

Some resources also expose filtered listings below their path
(``/posts/published``, ``/user-accounts/search?query=...``,
``/user-payments/recent?limit=...``); ``list_where`` reaches them.

Payloads pass through as plain JSON objects.
"""

from typing import Any

import httpx

from src.infrastructure.api.base_api_client import BaseMidasAPIClient

RESOURCES: tuple[str, ...] = (
    "pages",
    "posts",
    "categories",
    "comments",
    "users",
    "user-groups",
    "user-ranks",
    "user-accounts",
    "user-payments",
)


class ResourceApiClient(BaseMidasAPIClient):
    """Implements ResourceApiProtocol for one resource path."""

    def __init__(
        self,
        *,
        resource: str,
        base_url: str,
        timeout: httpx.Timeout | float,
    ) -> None:
        super().__init__(base_url=base_url, timeout=timeout, logger_name=f"midas_{resource}_api")
        self._resource = resource

    @property
    def resource(self) -> str:
        return self._resource

    async def list_all(self, authorization: str) -> list[dict[str, Any]]:
        operation = f"list_{self._resource}"
        response = await self._send(
            method="GET",
            path=f"/{self._resource}",
            authorization=authorization,
            operation=operation,
        )
        return self._parse_json_list(response, operation)

    async def list_where(
        self,
        sub_path: str,
        authorization: str,
        params: dict[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        """GET a filtered listing at ``/{resource}/{sub_path}``."""
        filter_name = sub_path.split("/", 1)[0]
        operation = f"list_{self._resource}_{filter_name}"
        response = await self._send(
            method="GET",
            path=f"/{self._resource}/{sub_path}",
            authorization=authorization,
            params=params,
            operation=operation,
        )
        return self._parse_json_list(response, operation)

    async def get(self, item_id: int, authorization: str) -> dict[str, Any]:
        operation = f"get_{self._resource}"
        response = await self._send(
            method="GET",
            path=f"/{self._resource}/{item_id}",
            authorization=authorization,
            operation=operation,
        )
        return self._parse_json_object(response, operation)

    async def create(self, payload: dict[str, Any], authorization: str) -> dict[str, Any]:
        operation = f"create_{self._resource}"
        response = await self._send(
            method="POST",
            path=f"/{self._resource}",
            authorization=authorization,
            json_data=payload,
            operation=operation,
        )
        return self._parse_json_object(response, operation)

    async def update(
        self, item_id: int, payload: dict[str, Any], authorization: str
    ) -> dict[str, Any]:
        operation = f"update_{self._resource}"
        response = await self._send(
            method="PUT",
            path=f"/{self._resource}/{item_id}",
            authorization=authorization,
            json_data=payload,
            operation=operation,
        )
        return self._parse_json_object(response, operation)

    async def delete(self, item_id: int, authorization: str) -> None:
        await self._send(
            method="DELETE",
            path=f"/{self._resource}/{item_id}",
            authorization=authorization,
            operation=f"delete_{self._resource}",
        )


def build_resource_clients(
    *, base_url: str, timeout: httpx.Timeout | float
) -> dict[str, ResourceApiClient]:
    """Create one client per known resource, keyed by path segment."""
    return {
        resource: ResourceApiClient(resource=resource, base_url=base_url, timeout=timeout)
        for resource in RESOURCES
    }

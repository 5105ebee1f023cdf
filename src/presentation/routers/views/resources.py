"""Resource views: list, detail and mutations for every Midas resource.

Failures arrive as ``Failure`` values and are rendered by kind:
    AUTHENTICATION_ERROR -> 303 to /login (the session is already logged out)
    CONNECTION_ERROR     -> list: 200 + notification; otherwise 503
    SERVICE_ERROR        -> list: 200 + notification; otherwise 502

Registered last: ``/{resource}`` would otherwise shadow the fixed views.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse, RedirectResponse

from src.application.services import ResourceService
from src.application.services.navigation_guard import LOGIN_PATH
from src.core.result import Failure, Result, Success
from src.domain.enums import ErrorKind
from src.domain.errors import RemoteCallError
from src.presentation.api.chrome import resource_title
from src.presentation.api.dependencies import get_chrome, get_resource_service
from src.schemas import (
    ChromeView,
    Notification,
    ResourceItemView,
    ResourceListView,
    ResourceMutationView,
)

resource_router = APIRouter(tags=["Resources"])

_FAILURE_STATUS = {
    ErrorKind.CONNECTION_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.SERVICE_ERROR: status.HTTP_502_BAD_GATEWAY,
}

Service = Annotated[ResourceService, Depends(get_resource_service)]
Chrome = Annotated[ChromeView, Depends(get_chrome)]
Payload = Annotated[dict[str, Any], Body()]


def _redirect_to_login() -> RedirectResponse:
    return RedirectResponse(LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)


def _failure_response(
    error: RemoteCallError, resource: str, chrome: ChromeView
) -> JSONResponse | RedirectResponse:
    if error.kind is ErrorKind.AUTHENTICATION_ERROR:
        return _redirect_to_login()
    view = ResourceItemView(
        resource=resource,
        notification=Notification.error(error.message),
        chrome=chrome,
    )
    return JSONResponse(
        status_code=_FAILURE_STATUS[error.kind],
        content=view.model_dump(mode="json"),
    )


def render_listing(
    resource: str,
    result: Result[list[dict[str, Any]], RemoteCallError],
    chrome: ChromeView,
    *,
    failure_prefix: str | None = None,
) -> ResourceListView | RedirectResponse:
    """Render a bulk-load result as a list view.

    Failures other than an expired session keep the view (200) and carry an
    error notification: ``"<failure_prefix>: <message>"``.
    """
    title = resource_title(resource)
    prefix = failure_prefix or f"Failed to load {title.lower()}"

    match result:
        case Success(value=items):
            return ResourceListView(
                resource=resource, title=title, items=items, count=len(items), chrome=chrome
            )
        case Failure(error=error) if error.kind is ErrorKind.AUTHENTICATION_ERROR:
            return _redirect_to_login()
        case Failure(error=error):
            return ResourceListView(
                resource=resource,
                title=title,
                notification=Notification.error(f"{prefix}: {error.message}"),
                chrome=chrome,
            )


@resource_router.get("/{resource}", response_model=ResourceListView)
async def list_resource(
    resource: str, service: Service, chrome: Chrome
) -> ResourceListView | RedirectResponse:
    """Load every record of the resource (bounded by the load timeout)."""
    return render_listing(resource, await service.list_all(), chrome)


@resource_router.get("/{resource}/{item_id}", response_model=ResourceItemView)
async def get_resource_item(
    resource: str, item_id: int, service: Service, chrome: Chrome
) -> ResourceItemView | JSONResponse | RedirectResponse:
    match await service.get(item_id):
        case Success(value=item):
            return ResourceItemView(resource=resource, item=item, chrome=chrome)
        case Failure(error=error):
            return _failure_response(error, resource, chrome)


@resource_router.post(
    "/{resource}",
    response_model=ResourceMutationView,
    status_code=status.HTTP_201_CREATED,
)
async def create_resource_item(
    resource: str, payload: Payload, service: Service, chrome: Chrome
) -> ResourceMutationView | JSONResponse | RedirectResponse:
    match await service.create(payload):
        case Success(value=item):
            return ResourceMutationView(
                resource=resource,
                item=item,
                notification=Notification.success("Record created successfully"),
            )
        case Failure(error=error):
            return _failure_response(error, resource, chrome)


@resource_router.put("/{resource}/{item_id}", response_model=ResourceMutationView)
async def update_resource_item(
    resource: str, item_id: int, payload: Payload, service: Service, chrome: Chrome
) -> ResourceMutationView | JSONResponse | RedirectResponse:
    match await service.update(item_id, payload):
        case Success(value=item):
            return ResourceMutationView(
                resource=resource,
                item=item,
                notification=Notification.success("Record updated successfully"),
            )
        case Failure(error=error):
            return _failure_response(error, resource, chrome)


@resource_router.delete("/{resource}/{item_id}", response_model=ResourceMutationView)
async def delete_resource_item(
    resource: str, item_id: int, service: Service, chrome: Chrome
) -> ResourceMutationView | JSONResponse | RedirectResponse:
    match await service.delete(item_id):
        case Success():
            return ResourceMutationView(
                resource=resource,
                notification=Notification.success("Record deleted successfully"),
            )
        case Failure(error=error):
            return _failure_response(error, resource, chrome)

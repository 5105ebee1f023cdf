"""Filtered resource listings.

    GET /posts/published
    GET /user-accounts/search?query=...
    GET /user-accounts/user/{user_id}
    GET /user-payments/recent?limit=...
    GET /user-payments/date-range?start_date=...&end_date=...

Each is a bulk load (bounded, classified like ``GET /{resource}``) rendered
as a list view. Incomplete filter input is answered with a 422 list view
carrying a warning, without a remote call.

Must be registered before ``resource_router``: ``/{resource}/{item_id}``
would otherwise capture ``/posts/published``.
"""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse, RedirectResponse

from src.application.services import ResourceService
from src.presentation.api.chrome import resource_title
from src.presentation.api.dependencies import get_chrome, resource_service_for
from src.presentation.routers.views.resources import render_listing
from src.schemas import ChromeView, Notification, ResourceListView

filter_router = APIRouter(tags=["Resource filters"])

RECENT_PAYMENTS_LIMIT_DEFAULT = 10
RECENT_PAYMENTS_LIMIT_MAX = 100

Chrome = Annotated[ChromeView, Depends(get_chrome)]
Posts = Annotated[ResourceService, Depends(resource_service_for("posts"))]
Accounts = Annotated[ResourceService, Depends(resource_service_for("user-accounts"))]
Payments = Annotated[ResourceService, Depends(resource_service_for("user-payments"))]


def _incomplete_filter(resource: str, message: str, chrome: ChromeView) -> JSONResponse:
    view = ResourceListView(
        resource=resource,
        title=resource_title(resource),
        notification=Notification.warning(message),
        chrome=chrome,
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=view.model_dump(mode="json"),
    )


@filter_router.get("/posts/published", response_model=ResourceListView)
async def published_posts(
    service: Posts, chrome: Chrome
) -> ResourceListView | RedirectResponse:
    result = await service.list_where("published")
    return render_listing(
        "posts", result, chrome, failure_prefix="Failed to load published posts"
    )


@filter_router.get("/user-accounts/search", response_model=ResourceListView)
async def search_accounts(
    service: Accounts,
    chrome: Chrome,
    query: Annotated[str, Query(description="Account name to search for")] = "",
) -> ResourceListView | JSONResponse | RedirectResponse:
    """Search accounts by name."""
    query = query.strip()
    if not query:
        return _incomplete_filter("user-accounts", "Please enter a search query", chrome)

    result = await service.list_where("search", {"query": query})
    return render_listing(
        "user-accounts", result, chrome, failure_prefix="Error searching accounts"
    )


@filter_router.get("/user-accounts/user/{user_id}", response_model=ResourceListView)
async def accounts_by_user(
    user_id: int, service: Accounts, chrome: Chrome
) -> ResourceListView | RedirectResponse:
    result = await service.list_where(f"user/{user_id}")
    return render_listing(
        "user-accounts", result, chrome, failure_prefix="Error filtering accounts"
    )


@filter_router.get("/user-payments/recent", response_model=ResourceListView)
async def recent_payments(
    service: Payments,
    chrome: Chrome,
    limit: Annotated[
        int, Query(ge=1, le=RECENT_PAYMENTS_LIMIT_MAX, description="Number of payments")
    ] = RECENT_PAYMENTS_LIMIT_DEFAULT,
) -> ResourceListView | RedirectResponse:
    result = await service.list_where("recent", {"limit": str(limit)})
    return render_listing(
        "user-payments", result, chrome, failure_prefix="Error loading recent payments"
    )


@filter_router.get("/user-payments/date-range", response_model=ResourceListView)
async def payments_by_date_range(
    service: Payments,
    chrome: Chrome,
    start_date: date | None = None,
    end_date: date | None = None,
) -> ResourceListView | JSONResponse | RedirectResponse:
    """Payments made between two dates, both inclusive."""
    if start_date is None or end_date is None:
        return _incomplete_filter(
            "user-payments", "Please select both start and end dates", chrome
        )
    if start_date > end_date:
        return _incomplete_filter("user-payments", "Start date must be before end date", chrome)

    result = await service.list_where(
        "date-range",
        {"startDate": start_date.isoformat(), "endDate": end_date.isoformat()},
    )
    return render_listing(
        "user-payments", result, chrome, failure_prefix="Error filtering payments"
    )

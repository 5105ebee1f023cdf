"""View-model schemas for the resource views (pages, posts, users, ...).

Record payloads are passed through from the Midas API as plain JSON
objects.
"""

from typing import Any

from pydantic import BaseModel, Field

from src.schemas.view_schemas import ChromeView, Notification


class ResourceListView(BaseModel):
    """Grid view of one resource.

    On a failed load the view is still served with no items and an error
    notification.
    """

    resource: str = Field(..., description="Resource path segment", examples=["pages"])
    title: str = Field(..., description="Page title", examples=["Pages"])
    items: list[dict[str, Any]] = Field(default_factory=list)
    count: int = Field(0, description="Number of items loaded")
    notification: Notification | None = None
    chrome: ChromeView = Field(default_factory=ChromeView)


class ResourceItemView(BaseModel):
    """Single record of one resource."""

    resource: str
    item: dict[str, Any] | None = None
    notification: Notification | None = None
    chrome: ChromeView = Field(default_factory=ChromeView)


class ResourceMutationView(BaseModel):
    """Outcome of a create, update or delete."""

    resource: str
    item: dict[str, Any] | None = None
    notification: Notification

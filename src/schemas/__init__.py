"""Request/response schemas for console routes.

All Pydantic models for request validation and view-model serialization.
Schemas are kept separate from domain types (HTTP-layer concerns only).

Usage:
    from src.schemas import LoginRequest, LoginView
"""

from src.schemas.view_schemas import (
    BackendErrorView,
    ChromeView,
    ConsoleHealthResponse,
    HomeView,
    LoginRequest,
    LoginView,
    NavigationTab,
    Notification,
    NotificationLevel,
)
from src.schemas.resource_schemas import (
    ResourceItemView,
    ResourceListView,
    ResourceMutationView,
)

__all__ = [
    "BackendErrorView",
    "ChromeView",
    "ConsoleHealthResponse",
    "HomeView",
    "LoginRequest",
    "LoginView",
    "NavigationTab",
    "Notification",
    "NotificationLevel",
    "ResourceItemView",
    "ResourceListView",
    "ResourceMutationView",
]

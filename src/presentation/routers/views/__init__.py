"""Console view routers.

Each route returns a JSON view-model; the navigation guard has already
decided that the request may proceed before any of them run.
"""

from src.presentation.routers.views.auth_views import auth_router
from src.presentation.routers.views.home import home_router
from src.presentation.routers.views.resource_filters import filter_router
from src.presentation.routers.views.resources import resource_router

__all__ = ["auth_router", "filter_router", "home_router", "resource_router"]

"""Console routers.

- system: console liveness (unguarded)
- views/: login, logout, backend-error, home and resource views
- errors/: RFC 7807 exception handlers
"""

from src.presentation.routers.system import system_router
from src.presentation.routers.views import (
    auth_router,
    filter_router,
    home_router,
    resource_router,
)

__all__ = [
    "auth_router",
    "filter_router",
    "home_router",
    "resource_router",
    "system_router",
]

"""httpx clients for the Midas API.

Usage:
    from src.infrastructure.api import AuthApiClient, HealthApiClient, ResourceApiClient
"""

from src.infrastructure.api.auth_client import AuthApiClient
from src.infrastructure.api.base_api_client import BaseMidasAPIClient
from src.infrastructure.api.health_client import HealthApiClient
from src.infrastructure.api.resource_client import (
    RESOURCES,
    ResourceApiClient,
    build_resource_clients,
)

__all__ = [
    "AuthApiClient",
    "BaseMidasAPIClient",
    "HealthApiClient",
    "RESOURCES",
    "ResourceApiClient",
    "build_resource_clients",
]

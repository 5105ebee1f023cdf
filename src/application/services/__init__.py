"""Application services.

Usage:
    from src.application.services import AuthGateway, NavigationGuard
"""

from src.application.services.auth_gateway import AuthGateway
from src.application.services.bounded_task import run_bounded
from src.application.services.console_session import ConsoleSession
from src.application.services.credential_store import CredentialStore, encode_basic_auth
from src.application.services.error_classifier import ErrorClassifier, classify_failure
from src.application.services.greeting_service import GreetingService
from src.application.services.health_probe import HealthProbe
from src.application.services.navigation_guard import (
    NavigationGuard,
    NavigationVerdict,
    resolve_target,
)
from src.application.services.resource_service import ResourceService

__all__ = [
    "AuthGateway",
    "ConsoleSession",
    "CredentialStore",
    "ErrorClassifier",
    "GreetingService",
    "HealthProbe",
    "NavigationGuard",
    "NavigationVerdict",
    "ResourceService",
    "classify_failure",
    "encode_basic_auth",
    "resolve_target",
]

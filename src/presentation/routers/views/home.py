"""Home view with the operator greeting."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from src.application.services import AuthGateway, GreetingService
from src.presentation.api.dependencies import (
    get_auth_gateway,
    get_chrome,
    get_greeting_service,
)
from src.schemas import ChromeView, HomeView

home_router = APIRouter(tags=["Home"])


@home_router.get("/", response_model=HomeView)
async def home(
    gateway: Annotated[AuthGateway, Depends(get_auth_gateway)],
    greeting_service: Annotated[GreetingService, Depends(get_greeting_service)],
    chrome: Annotated[ChromeView, Depends(get_chrome)],
    name: Annotated[str | None, Query(description="Name to greet")] = None,
) -> HomeView:
    return HomeView(
        welcome=f"Welcome, {gateway.get_username()}!",
        greeting=greeting_service.greet(name),
        chrome=chrome,
    )

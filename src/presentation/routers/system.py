"""System router for console endpoints outside the view space.

``/healthz`` reports the liveness of the console process itself. It is not
guarded and does not touch the Midas API.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.core.config import Settings
from src.presentation.api.dependencies import get_app_settings
from src.schemas import ConsoleHealthResponse

system_router = APIRouter(tags=["System"])


@system_router.get("/healthz", response_model=ConsoleHealthResponse)
async def healthz(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> ConsoleHealthResponse:
    """Health check endpoint for monitoring and load balancers."""
    return ConsoleHealthResponse(status="healthy", version=settings.app_version)

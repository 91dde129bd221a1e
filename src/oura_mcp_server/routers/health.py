"""Health check endpoint router."""

from typing import Annotated

from fastapi import APIRouter, Depends

from oura_mcp_server.config import OuraMcpSettings
from oura_mcp_server.dependencies import get_app_settings
from oura_mcp_server.models.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/healthz", response_model=HealthResponse)
async def health_check(
    settings: Annotated[OuraMcpSettings, Depends(get_app_settings)],
) -> HealthResponse:
    """Health check endpoint.

    Returns:
        HealthResponse: Health status and version information.
    """
    return HealthResponse(ok=True, version=settings.server_version)

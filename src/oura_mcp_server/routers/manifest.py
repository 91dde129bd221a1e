"""MCP server manifest router."""

from typing import Annotated

from fastapi import APIRouter, Depends

from oura_mcp_server.config import OuraMcpSettings
from oura_mcp_server.dependencies import get_app_settings
from oura_mcp_server.models.manifest import ManifestResponse

router = APIRouter(prefix="/mcp", tags=["mcp"])


@router.get("", response_model=ManifestResponse)
async def get_manifest(
    settings: Annotated[OuraMcpSettings, Depends(get_app_settings)],
) -> ManifestResponse:
    """Describe this MCP server."""
    return ManifestResponse(
        name=settings.server_name,
        version=settings.server_version,
        description=settings.server_description,
        ok=True,
    )

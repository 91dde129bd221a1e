"""Health check response model."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the health check endpoint."""

    ok: bool = Field(..., description="Whether the service is healthy")
    version: str = Field(..., description="Version of oura-mcp-server")

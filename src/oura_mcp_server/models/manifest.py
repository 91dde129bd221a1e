"""Server manifest response model."""

from pydantic import BaseModel, Field


class ManifestResponse(BaseModel):
    """Response model for GET /mcp.

    Attributes:
        name: Server name advertised to MCP clients
        version: Server version
        description: Human-readable server description
        ok: Always true while the server is serving requests
    """

    name: str = Field(..., description="Server name")
    version: str = Field(..., description="Server version")
    description: str = Field(..., description="Server description")
    ok: bool = Field(default=True, description="Server status flag")

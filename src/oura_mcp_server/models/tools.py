"""Pydantic models for the REST tool endpoints.

This module contains request and response schemas for the /mcp/tools endpoints.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from oura_mcp_server.tools import ToolDescriptor


class ToolDescriptorModel(BaseModel):
    """A tool as advertised to clients.

    Attributes:
        name: Unique tool name
        description: What the tool does
        input_schema: JSON schema of the accepted arguments (serialized as inputSchema)
    """

    name: str = Field(..., description="Unique tool name")
    description: str = Field(..., description="What the tool does")
    input_schema: dict[str, Any] = Field(
        ...,
        alias="inputSchema",
        description="JSON schema of the accepted arguments",
    )

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_descriptor(cls, descriptor: ToolDescriptor) -> "ToolDescriptorModel":
        return cls(
            name=descriptor.name,
            description=descriptor.description,
            input_schema=descriptor.input_schema,
        )


class ToolListResponse(BaseModel):
    """Response body for GET /mcp/tools."""

    tools: list[ToolDescriptorModel] = Field(..., description="Available tools")


class RunToolRequest(BaseModel):
    """Request body for POST /mcp/tools/run.

    The tool name is optional at the schema level so a missing name can be
    reported with a 400 instead of a generic 422.
    """

    tool: str | None = Field(default=None, description="Name of the tool to run")
    # Checked by the executor, which rejects non-object values on field "args"
    args: Any = Field(
        default=None,
        description="Tool arguments object",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "tool": "sleep_check",
                "args": {"forceAlert": False},
            }
        }
    )

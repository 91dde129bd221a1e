"""Pydantic models for API request and response schemas.

This package contains all Pydantic models used for validating and
serializing API requests and responses across all endpoints.
"""

from oura_mcp_server.models.health import HealthResponse
from oura_mcp_server.models.jsonrpc import (
    JsonRpcError,
    JsonRpcErrorResponse,
    JsonRpcRequest,
    JsonRpcResponse,
)
from oura_mcp_server.models.manifest import ManifestResponse
from oura_mcp_server.models.tools import (
    RunToolRequest,
    ToolDescriptorModel,
    ToolListResponse,
)

__all__ = [
    "HealthResponse",
    "JsonRpcError",
    "JsonRpcErrorResponse",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "ManifestResponse",
    "RunToolRequest",
    "ToolDescriptorModel",
    "ToolListResponse",
]

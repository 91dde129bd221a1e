"""Pydantic models for the JSON-RPC 2.0 endpoint.

Only the envelope is modelled here. Method params are plain dicts which the
router unpacks per method.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602


class JsonRpcRequest(BaseModel):
    """A JSON-RPC request or notification (no id)."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: int | str | None = None
    method: str
    params: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_notification(self) -> bool:
        return self.id is None


class JsonRpcError(BaseModel):
    """Error object carried by a JSON-RPC error response."""

    code: int
    message: str
    data: dict[str, Any] | None = None


class JsonRpcResponse(BaseModel):
    """Successful JSON-RPC response."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: int | str | None
    result: dict[str, Any]


class JsonRpcErrorResponse(BaseModel):
    """Failed JSON-RPC response."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: int | str | None
    error: JsonRpcError

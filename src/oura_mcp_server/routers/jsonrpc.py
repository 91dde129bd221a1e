"""JSON-RPC 2.0 endpoint for MCP clients.

POST /mcp accepts the MCP methods initialize, ping, tools/list and
tools/call. Notifications (requests without an id) are acknowledged with 202
and no body.
"""

import json
import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from oura_mcp_server.config import OuraMcpSettings
from oura_mcp_server.dependencies import (
    get_app_settings,
    get_tool_executor,
    get_tool_registry,
)
from oura_mcp_server.models.jsonrpc import (
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    JsonRpcError,
    JsonRpcErrorResponse,
    JsonRpcRequest,
    JsonRpcResponse,
)
from oura_mcp_server.tools import (
    ToolExecutor,
    ToolNotFoundError,
    ToolRegistry,
    ToolValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mcp", tags=["mcp"])

PROTOCOL_VERSION = "2024-11-05"


class JsonRpcMethodError(Exception):
    """Raised by method handlers to produce a JSON-RPC error object."""

    def __init__(self, code: int, message: str, data: dict[str, Any] | None = None):
        super().__init__(message)
        self.error = JsonRpcError(code=code, message=message, data=data)


def _call_tool(executor: ToolExecutor, params: dict[str, Any]) -> dict[str, Any]:
    """Run tools/call and wrap the result as MCP content."""
    name = params.get("name")
    if not isinstance(name, str) or not name:
        raise JsonRpcMethodError(
            INVALID_PARAMS, "Tool name is required", {"field": "name"}
        )

    try:
        result = executor.invoke(name, params.get("arguments"))
    except ToolNotFoundError as e:
        raise JsonRpcMethodError(INVALID_PARAMS, e.message, {"tool": e.tool_name})
    except ToolValidationError as e:
        raise JsonRpcMethodError(
            INVALID_PARAMS, e.message, {"tool": e.tool_name, "field": e.field}
        )

    return {
        "content": [{"type": "text", "text": json.dumps(result, ensure_ascii=False)}],
        "structuredContent": result,
        "isError": False,
    }


def dispatch(
    rpc: JsonRpcRequest,
    settings: OuraMcpSettings,
    registry: ToolRegistry,
    executor: ToolExecutor,
) -> dict[str, Any]:
    """Execute a single JSON-RPC method and return its result object.

    Raises:
        JsonRpcMethodError: If the method is unknown or its params are invalid.
    """
    if rpc.method == "initialize":
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "serverInfo": {
                "name": settings.server_name,
                "version": settings.server_version,
            },
            "capabilities": {"tools": {}},
        }
    if rpc.method == "ping":
        return {}
    if rpc.method == "tools/list":
        return {"tools": [d.to_dict() for d in registry.list_tools()]}
    if rpc.method == "tools/call":
        return _call_tool(executor, rpc.params)

    raise JsonRpcMethodError(
        METHOD_NOT_FOUND, f"Method '{rpc.method}' not found", {"method": rpc.method}
    )


def _error_response(
    request_id: int | str | None, error: JsonRpcError
) -> JSONResponse:
    content = JsonRpcErrorResponse(id=request_id, error=error).model_dump()
    if error.data is None:
        content["error"].pop("data")
    return JSONResponse(content=content)


def parse_request(payload: Any) -> JsonRpcRequest:
    """Validate a decoded request body as a JSON-RPC request.

    Args:
        payload: The decoded JSON body

    Returns:
        The validated request

    Raises:
        JsonRpcMethodError: -32602 if only params are malformed, -32600 for
            any other envelope problem.
    """
    if not isinstance(payload, dict):
        raise JsonRpcMethodError(INVALID_REQUEST, "Request must be a JSON object")

    try:
        return JsonRpcRequest.model_validate(payload)
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        if fields == ["params"]:
            raise JsonRpcMethodError(
                INVALID_PARAMS, "params must be an object", {"field": "params"}
            )
        raise JsonRpcMethodError(
            INVALID_REQUEST, "Invalid JSON-RPC request", {"fields": fields}
        )


@router.post("", summary="JSON-RPC endpoint")
async def handle_jsonrpc(
    request: Request,
    settings: Annotated[OuraMcpSettings, Depends(get_app_settings)],
    registry: Annotated[ToolRegistry, Depends(get_tool_registry)],
    executor: Annotated[ToolExecutor, Depends(get_tool_executor)],
) -> Response:
    """Handle a JSON-RPC request.

    Errors, including malformed envelopes, are returned as JSON-RPC error
    objects with HTTP 200.
    """
    try:
        payload = await request.json()
    except ValueError:
        error = JsonRpcError(code=PARSE_ERROR, message="Parse error")
        return _error_response(None, error)

    raw_id = payload.get("id") if isinstance(payload, dict) else None
    request_id = raw_id if isinstance(raw_id, (int, str)) else None

    try:
        rpc = parse_request(payload)
    except JsonRpcMethodError as e:
        logger.info(f"Rejected JSON-RPC request: {e.error.message}")
        return _error_response(request_id, e.error)

    if rpc.is_notification:
        logger.debug(f"Received notification: {rpc.method}")
        return Response(status_code=status.HTTP_202_ACCEPTED)

    try:
        result = dispatch(rpc, settings, registry, executor)
    except JsonRpcMethodError as e:
        logger.info(f"JSON-RPC {rpc.method} failed: {e.error.message}")
        return _error_response(rpc.id, e.error)

    body = JsonRpcResponse(id=rpc.id, result=result)
    return JSONResponse(content=body.model_dump())

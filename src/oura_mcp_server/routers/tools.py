"""REST endpoints for tool discovery and invocation.

This module provides:
- GET /mcp/tools for listing registered tools
- POST /mcp/tools/run for invoking a tool by name
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, status

from oura_mcp_server.dependencies import get_tool_executor, get_tool_registry
from oura_mcp_server.models.tools import (
    RunToolRequest,
    ToolDescriptorModel,
    ToolListResponse,
)
from oura_mcp_server.tools import (
    ToolExecutor,
    ToolNotFoundError,
    ToolRegistry,
    ToolValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mcp/tools", tags=["tools"])


@router.get("", response_model=ToolListResponse, summary="List available tools")
async def list_tools(
    registry: Annotated[ToolRegistry, Depends(get_tool_registry)],
) -> ToolListResponse:
    """List all registered tools with their input schemas."""
    tools = [ToolDescriptorModel.from_descriptor(d) for d in registry.list_tools()]
    return ToolListResponse(tools=tools)


@router.post("/run", summary="Run a tool")
async def run_tool(
    request: RunToolRequest,
    executor: Annotated[ToolExecutor, Depends(get_tool_executor)],
) -> dict[str, Any]:
    """Invoke a tool and return its result.

    Args:
        request: Tool name and arguments
        executor: Injected ToolExecutor

    Returns:
        The tool result as returned by the executor

    Raises:
        HTTPException: 400 if the tool name is missing or arguments are invalid
        HTTPException: 404 if the tool is not registered
    """
    if not request.tool:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Tool name is required",
        )

    try:
        return executor.invoke(request.tool, request.args)
    except ToolNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    except ToolValidationError as e:
        logger.info(f"Rejected arguments for {request.tool}: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

"""Tool registry and execution layer.

This package provides the static tool registry used for discovery and the
executor that validates arguments and computes tool results.
"""

from oura_mcp_server.tools.errors import (
    ToolError,
    ToolNotFoundError,
    ToolValidationError,
)
from oura_mcp_server.tools.executor import ToolExecutor
from oura_mcp_server.tools.registry import ToolRegistry, build_default_registry
from oura_mcp_server.tools.types import ToolArguments, ToolDescriptor, ToolResult

__all__ = [
    "ToolArguments",
    "ToolDescriptor",
    "ToolError",
    "ToolExecutor",
    "ToolNotFoundError",
    "ToolRegistry",
    "ToolResult",
    "ToolValidationError",
    "build_default_registry",
]

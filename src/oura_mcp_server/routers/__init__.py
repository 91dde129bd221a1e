"""FastAPI routers for API endpoints.

Each router module adapts one transport (REST, JSON-RPC, SSE) onto the
tool registry and executor.
"""

from oura_mcp_server.routers import health, jsonrpc, manifest, stream, tools

__all__ = [
    "health",
    "jsonrpc",
    "manifest",
    "stream",
    "tools",
]

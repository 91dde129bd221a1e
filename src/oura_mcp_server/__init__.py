"""oura-mcp-server: MCP-style tool server for Oura Ring sleep checks.

This package provides a FastAPI application exposing sleep tools over REST,
JSON-RPC and a server-sent events stream.
"""

from oura_mcp_server.app import create_app

__version__ = "1.0.0"

__all__ = ["create_app", "__version__"]

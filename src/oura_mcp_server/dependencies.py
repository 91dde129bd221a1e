"""Dependency injection providers for FastAPI endpoints.

This module provides FastAPI dependency functions that are used across
multiple routers to inject settings and the tool layer.
"""

from functools import lru_cache

from fastapi import HTTPException, Request

from oura_mcp_server.config import OuraMcpSettings
from oura_mcp_server.tools import ToolExecutor, ToolRegistry


@lru_cache
def get_settings() -> OuraMcpSettings:
    """Get the application settings instance.

    This function is cached so that the same settings instance is reused
    across all requests. Settings are loaded from environment variables
    with the OURA_MCP_ prefix.

    Returns:
        OuraMcpSettings: The application configuration settings.
    """
    return OuraMcpSettings()


def get_app_settings(request: Request) -> OuraMcpSettings:
    """Get the settings the running app was created with."""
    return request.app.state.settings


def get_tool_registry(request: Request) -> ToolRegistry:
    """Get the tool registry from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        ToolRegistry: The registry built at startup.

    Raises:
        HTTPException: If the registry is not initialized (503 Service Unavailable).
    """
    if not hasattr(request.app.state, "tool_registry"):
        raise HTTPException(
            status_code=503,
            detail="Tool registry not initialized",
        )
    return request.app.state.tool_registry


def get_tool_executor(request: Request) -> ToolExecutor:
    """Get the tool executor from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        ToolExecutor: The executor built at startup.

    Raises:
        HTTPException: If the executor is not initialized (503 Service Unavailable).
    """
    if not hasattr(request.app.state, "tool_executor"):
        raise HTTPException(
            status_code=503,
            detail="Tool executor not initialized",
        )
    return request.app.state.tool_executor

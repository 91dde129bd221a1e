"""FastAPI application factory and lifespan management.

This module contains the create_app() factory function that creates and configures
the FastAPI application instance, including lifespan management for startup/shutdown
and router registration.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from oura_mcp_server.config import OuraMcpSettings
from oura_mcp_server.metrics import PlaceholderSleepMetricsProvider
from oura_mcp_server.routers import health, jsonrpc, manifest, stream, tools
from oura_mcp_server.tools import ToolExecutor, build_default_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for FastAPI application.

    The tool registry and executor are created once at startup and stored in
    app.state for reuse across all requests.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control is yielded while the app is running.
    """
    registry = build_default_registry()
    app.state.tool_registry = registry
    app.state.tool_executor = ToolExecutor(
        registry=registry,
        metrics_provider=PlaceholderSleepMetricsProvider(),
    )
    logger.info(f"Registered {len(registry)} tools: {', '.join(registry.names)}")

    yield

    logger.info("Shutting down oura-mcp-server")


def create_app(settings: OuraMcpSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional OuraMcpSettings instance. If not provided,
                  settings will be loaded from environment variables.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    if settings is None:
        from oura_mcp_server.dependencies import get_settings

        settings = get_settings()

    app = FastAPI(
        title="oura-mcp-server",
        description=settings.server_description,
        version=settings.server_version,
        lifespan=lifespan,
    )

    app.state.settings = settings

    # Note: FastAPI's type hints for add_middleware are overly strict
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(manifest.router)
    app.include_router(tools.router)
    app.include_router(jsonrpc.router)
    app.include_router(stream.router)

    return app

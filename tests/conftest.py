"""Pytest configuration and shared fixtures for oura-mcp-server tests.

This module provides common fixtures used across all test modules,
including test app creation and async client setup.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from oura_mcp_server import create_app
from oura_mcp_server.config import OuraMcpSettings
from oura_mcp_server.metrics import PlaceholderSleepMetricsProvider
from oura_mcp_server.tools import ToolExecutor, build_default_registry


@pytest.fixture
def test_settings():
    """Create test settings with a short heartbeat interval.

    Returns:
        OuraMcpSettings: Settings instance configured for testing.
    """
    return OuraMcpSettings(
        host="127.0.0.1",
        port=3000,
        log_level="DEBUG",
        cors_origins=["*"],
        sse_heartbeat_interval=0.01,
    )


@pytest.fixture
def registry():
    """Create the default tool registry."""
    return build_default_registry()


@pytest.fixture
def executor(registry):
    """Create a ToolExecutor backed by placeholder metrics."""
    return ToolExecutor(
        registry=registry,
        metrics_provider=PlaceholderSleepMetricsProvider(),
    )


@pytest.fixture
def test_app(test_settings):
    """Create a FastAPI test application instance.

    Args:
        test_settings: Test settings fixture.

    Returns:
        FastAPI: Configured test application.
    """
    return create_app(settings=test_settings)


@pytest_asyncio.fixture
async def async_client(test_app):
    """Create an async HTTP client for testing FastAPI endpoints.

    Args:
        test_app: Test application fixture.

    Yields:
        AsyncClient: Async HTTP client for making test requests.
    """
    # Trigger the lifespan startup manually for tests
    async with test_app.router.lifespan_context(test_app):
        transport = ASGITransport(app=test_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client

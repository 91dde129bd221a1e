"""Unit tests for the health check and manifest endpoints."""

import pytest


@pytest.mark.asyncio
async def test_health_check_returns_ok(async_client):
    """Test that health check returns ok."""
    response = await async_client.get("/healthz")

    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["version"] == "1.0.0"


@pytest.mark.asyncio
async def test_health_check_content_type(async_client):
    """Test that health check returns JSON content type."""
    response = await async_client.get("/healthz")

    assert response.status_code == 200
    assert "application/json" in response.headers["content-type"]


@pytest.mark.asyncio
async def test_manifest(async_client):
    """Test that GET /mcp describes the server."""
    response = await async_client.get("/mcp")

    assert response.status_code == 200
    assert response.json() == {
        "name": "oura_mcp_server",
        "version": "1.0.0",
        "description": "Oura Ring MCP Server for sleep tracking and training recommendations",
        "ok": True,
    }


@pytest.mark.asyncio
async def test_manifest_uses_settings(test_settings):
    """Test that the manifest reflects configured name and version."""
    from httpx import ASGITransport, AsyncClient

    from oura_mcp_server import create_app

    settings = test_settings.model_copy(
        update={"server_name": "custom", "server_version": "2.3.4"}
    )
    app = create_app(settings=settings)

    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/mcp")

    data = response.json()
    assert data["name"] == "custom"
    assert data["version"] == "2.3.4"

"""Integration tests for the REST tool endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient


@pytest.mark.asyncio
async def test_list_tools(async_client):
    """Test that both tools are listed with camelCase schemas."""
    response = await async_client.get("/mcp/tools")

    assert response.status_code == 200
    tools = response.json()["tools"]
    assert [tool["name"] for tool in tools] == ["sleep_check", "sleep_summary"]
    assert tools[0]["description"] == (
        "Check sleep data and determine if user should rest or train"
    )
    assert tools[0]["inputSchema"]["properties"]["forceAlert"]["type"] == "boolean"
    assert tools[1]["inputSchema"] == {"type": "object", "properties": {}}


@pytest.mark.asyncio
async def test_list_tools_is_idempotent(async_client):
    first = await async_client.get("/mcp/tools")
    await async_client.post("/mcp/tools/run", json={"tool": "sleep_summary"})
    second = await async_client.get("/mcp/tools")

    assert first.json() == second.json()


@pytest.mark.asyncio
async def test_run_sleep_check_default(async_client):
    """Test running sleep_check without arguments."""
    response = await async_client.post("/mcp/tools/run", json={"tool": "sleep_check"})

    assert response.status_code == 200
    data = response.json()
    assert data["sleepScore"] == 85
    assert data["totalSleepHours"] == "7.5"
    assert data["recommendation"] == "train"
    assert data["alert"] is False


@pytest.mark.asyncio
async def test_run_sleep_check_force_alert(async_client):
    """Test running sleep_check with forceAlert."""
    response = await async_client.post(
        "/mcp/tools/run",
        json={"tool": "sleep_check", "args": {"forceAlert": True}},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["sleepScore"] == 65
    assert data["totalSleepHours"] == "6.0"
    assert data["recommendation"] == "rest"
    assert data["alert"] is True
    assert data["message"] == "⚠️ Sleep score is 65. Consider resting today."


@pytest.mark.asyncio
async def test_run_sleep_summary(async_client):
    response = await async_client.post(
        "/mcp/tools/run", json={"tool": "sleep_summary", "args": {}}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["weeklyAverage"] == 82
    assert data["trend"] == "improving"
    assert data["daysWithGoodSleep"] == 5
    assert data["daysWithPoorSleep"] == 2


@pytest.mark.asyncio
async def test_run_unknown_tool(async_client):
    """Test that an unknown tool returns 404 with the attempted name."""
    response = await async_client.post(
        "/mcp/tools/run", json={"tool": "nonexistent_tool", "args": {}}
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Tool 'nonexistent_tool' not found"


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{}, {"tool": ""}, {"args": {"forceAlert": True}}])
async def test_run_without_tool_name(async_client, body):
    """Test that a missing tool name returns 400."""
    response = await async_client.post("/mcp/tools/run", json=body)

    assert response.status_code == 400
    assert response.json()["detail"] == "Tool name is required"


@pytest.mark.asyncio
async def test_run_with_invalid_force_alert(async_client):
    """Test that a non-boolean forceAlert is reported, not coerced."""
    response = await async_client.post(
        "/mcp/tools/run",
        json={"tool": "sleep_check", "args": {"forceAlert": "yes"}},
    )

    assert response.status_code == 400
    assert "forceAlert" in response.json()["detail"]


@pytest.mark.asyncio
async def test_run_with_non_object_args(async_client):
    """Test that non-object args are rejected with a 400 naming args."""
    response = await async_client.post(
        "/mcp/tools/run", json={"tool": "sleep_check", "args": [1, 2]}
    )

    assert response.status_code == 400
    assert "'args'" in response.json()["detail"]


@pytest.mark.asyncio
async def test_run_with_null_args(async_client):
    response = await async_client.post(
        "/mcp/tools/run", json={"tool": "sleep_check", "args": None}
    )

    assert response.status_code == 200
    assert response.json()["sleepScore"] == 85


@pytest.mark.asyncio
async def test_tools_unavailable_before_startup(test_app):
    """Test that endpoints return 503 when the lifespan has not run."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        list_response = await client.get("/mcp/tools")
        run_response = await client.post(
            "/mcp/tools/run", json={"tool": "sleep_check"}
        )

    assert list_response.status_code == 503
    assert run_response.status_code == 503

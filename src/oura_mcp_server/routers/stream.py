"""Server-sent events stream for MCP clients.

GET /mcp/sse announces the JSON-RPC endpoint, then keeps the connection open
with periodic heartbeat events until the client disconnects.
"""

import asyncio
import json
import logging
from datetime import datetime, timezone
from typing import Annotated, AsyncIterator

from fastapi import APIRouter, Depends, Request
from sse_starlette.sse import EventSourceResponse

from oura_mcp_server.config import OuraMcpSettings
from oura_mcp_server.dependencies import get_app_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mcp", tags=["mcp"])


async def heartbeat_events(
    request: Request, interval: float
) -> AsyncIterator[dict[str, str]]:
    """Generate the SSE events for one client connection.

    Args:
        request: The incoming request, polled for disconnects
        interval: Seconds between heartbeat events

    Yields:
        SSE event dicts with "event" and "data" keys.
    """
    yield {"event": "endpoint", "data": "/mcp"}

    while not await request.is_disconnected():
        heartbeat = {"timestamp": datetime.now(timezone.utc).isoformat()}
        yield {"event": "heartbeat", "data": json.dumps(heartbeat)}
        await asyncio.sleep(interval)

    logger.debug("SSE client disconnected")


@router.get("/sse", summary="SSE stream")
async def sse_stream(
    request: Request,
    settings: Annotated[OuraMcpSettings, Depends(get_app_settings)],
) -> EventSourceResponse:
    """Open a server-sent events stream with heartbeats.

    Returns:
        EventSourceResponse with endpoint and heartbeat events
    """
    logger.info("SSE client connected")
    return EventSourceResponse(
        heartbeat_events(request, settings.sse_heartbeat_interval)
    )

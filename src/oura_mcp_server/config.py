"""Configuration module for oura-mcp-server using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class OuraMcpSettings(BaseSettings):
    """Main configuration settings for oura-mcp-server.

    All settings can be overridden via environment variables with the OURA_MCP_ prefix.
    For example, OURA_MCP_PORT will override the port setting.
    """

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Manifest
    server_name: str = "oura_mcp_server"
    server_version: str = "1.0.0"
    server_description: str = (
        "Oura Ring MCP Server for sleep tracking and training recommendations"
    )

    # SSE stream
    sse_heartbeat_interval: float = Field(default=15.0, gt=0)

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="OURA_MCP_")

"""CLI entry point for oura-mcp-server.

This module provides the command-line interface for starting the server.
It can be invoked as `oura-mcp-server` (via the script entry point) or
`python -m oura_mcp_server`.
"""

import argparse
import logging
import sys

import uvicorn

from oura_mcp_server import __version__, create_app
from oura_mcp_server.config import OuraMcpSettings


def main() -> None:
    """Main entry point for the oura-mcp-server CLI.

    Parses command-line arguments and starts the uvicorn server with the
    FastAPI application.
    """
    parser = argparse.ArgumentParser(
        prog="oura-mcp-server",
        description="MCP tool server for Oura Ring sleep checks",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"oura-mcp-server {__version__}",
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind the server to (default: 0.0.0.0, can be set via OURA_MCP_HOST)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind the server to (default: 3000, can be set via OURA_MCP_PORT)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO, can be set via OURA_MCP_LOG_LEVEL)",
    )

    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development (uvicorn --reload)",
    )

    args = parser.parse_args()

    # CLI args override environment variables
    settings_kwargs = {}
    if args.host is not None:
        settings_kwargs["host"] = args.host
    if args.port is not None:
        settings_kwargs["port"] = args.port
    if args.log_level is not None:
        settings_kwargs["log_level"] = args.log_level

    settings = OuraMcpSettings(**settings_kwargs)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.reload:
        # Reload needs an import string; settings then come from the environment
        uvicorn.run(
            "oura_mcp_server.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
            reload=True,
        )
        return

    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    sys.exit(main())

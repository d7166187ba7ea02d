# main.py
"""
z.ai MCP Server - Main application entry point.

Startup runs in two phases:
1. Configuration Phase - load and validate settings; a missing API key stops the
   process here with exit status 1, before any transport is bound
2. Server Runtime Phase - MCP server startup with transport selection
"""

import logging
import sys
from typing import List, Optional

from zai_mcp_server import __version__
from zai_mcp_server.cli import print_client_config
from zai_mcp_server.config import AppConfig, load_config
from zai_mcp_server.dispatcher import ToolDispatcher
from zai_mcp_server.exceptions import ConfigurationError
from zai_mcp_server.logging_config import configure_logging
from zai_mcp_server.server import create_mcp_server, run_http_server, run_stdio_server

logger = logging.getLogger(__name__)


def load_startup_config(argv: Optional[List[str]] = None) -> AppConfig:
    """
    Phase 1: Load configuration, exiting on configuration errors.

    Returns:
        AppConfig: Validated configuration
    """
    try:
        return load_config(argv)
    except ConfigurationError as e:
        # Logging is not configured yet, so report straight to stderr
        print(f"Failed to start server: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Main application entry point with clear phase separation."""
    config = load_startup_config(argv)

    configure_logging(
        log_level=config.server.log_level,
        json_format=config.server.log_format == "json",
    )

    if config.server.print_config:
        print_client_config(config)
        return

    logger.info(f"z.ai MCP Server v{__version__}")
    logger.debug(f"Using z.ai API at {config.zai.base_url} with model {config.zai.model}")

    # Phase 2: Server Runtime
    dispatcher = ToolDispatcher(config)
    server = create_mcp_server(dispatcher)
    transport = config.server.transport

    try:
        if transport == "streamable-http":
            logger.info(
                f"Running z.ai MCP server (STREAMABLE-HTTP mode) at "
                f"http://{config.server.host}:{config.server.port}{config.server.path}"
            )
            run_http_server(server, config)
        else:
            logger.info("z.ai MCP Server running on stdio")
            run_stdio_server(server)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error(f"Server runtime error: {e}", exc_info=e)
        sys.exit(1)


if __name__ == "__main__":
    main()

# zai_mcp_server/server.py
"""
MCP server implementation for the z.ai integration.

Registers the ListTools and CallTool handlers on the MCP SDK server and provides
the two transports: stdio (default) and streamable-http, the latter served as a
FastAPI application with a health endpoint.
"""

import asyncio
import contextlib
import logging
from typing import Any, AsyncIterator, Dict, List, Optional

import mcp.types as types
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

from . import __version__
from .config import AppConfig
from .constants import SERVER_NAME
from .dispatcher import ToolDispatcher
from .models import ToolDescriptor, ToolResult

logger = logging.getLogger(__name__)


def to_mcp_tool(descriptor: ToolDescriptor) -> types.Tool:
    """Convert a catalog entry to the MCP SDK tool type."""
    return types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.input_schema,
    )


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    """Convert a dispatcher result to the MCP SDK call result type."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=block.text) for block in result.content],
        isError=result.isError,
    )


def create_mcp_server(dispatcher: ToolDispatcher) -> Server:
    """Create the MCP server and register the z.ai tool handlers."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [to_mcp_tool(descriptor) for descriptor in dispatcher.list_tools()]

    @server.call_tool()
    async def call_tool(
        name: str, arguments: Optional[Dict[str, Any]]
    ) -> types.CallToolResult:
        result = await dispatcher.call_tool(name, arguments or {})
        return to_call_tool_result(result)

    return server


async def run_stdio(server: Server) -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run_stdio_server(server: Server) -> None:
    asyncio.run(run_stdio(server))


class StreamableHTTPEndpoint:
    """ASGI app handing requests on the exact MCP path to the session manager."""

    def __init__(self, session_manager: StreamableHTTPSessionManager):
        self.session_manager = session_manager

    async def __call__(self, scope, receive, send) -> None:
        await self.session_manager.handle_request(scope, receive, send)


def register_exception_handlers(app: FastAPI) -> None:
    """Register the HTTP-mode exception handlers."""

    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            f"MCP HTTP request failed: {exc}",
            exc_info=exc,
            extra={"error_type": type(exc).__name__},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "message": str(exc)},
        )

    app.add_exception_handler(Exception, generic_exception_handler)


def create_http_app(server: Server, config: AppConfig) -> FastAPI:
    """Build the streamable-http ASGI application.

    Args:
        server: MCP server with the tool handlers registered
        config: Application configuration (HTTP path)

    Returns:
        FastAPI application serving the MCP endpoint at ``config.server.path``
    """
    session_manager = StreamableHTTPSessionManager(app=server, stateless=True)

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        async with session_manager.run():
            logger.info(f"MCP session manager started at {config.server.path}")
            yield

    app = FastAPI(
        title="z.ai MCP Server",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )

    app.add_route(
        config.server.path,
        StreamableHTTPEndpoint(session_manager),
        include_in_schema=False,
    )

    @app.get("/health", include_in_schema=False)
    async def health() -> Dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "server": SERVER_NAME, "version": __version__}

    register_exception_handlers(app)
    return app


def run_http_server(server: Server, config: AppConfig) -> None:
    """Serve MCP over streamable HTTP with uvicorn."""
    import uvicorn

    app = create_http_app(server, config)
    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level=config.server.log_level.lower(),
    )

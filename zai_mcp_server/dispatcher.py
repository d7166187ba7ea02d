"""
Tool dispatch for the z.ai MCP Server.

The dispatcher owns the static tool catalog and turns one tool invocation into
exactly one request to the z.ai API and exactly one ToolResult. It keeps no state
between invocations, so concurrent calls need no coordination.
"""

from typing import Any, Dict, List, Optional

import structlog

from .client import ZaiClient
from .config import AppConfig
from .error_handler import convert_exception_to_result
from .exceptions import UnknownToolError
from .models import ToolDescriptor, ToolResult
from .tools import CATALOG, TOOL_REGISTRY, ToolArguments, ZaiTool

logger = structlog.get_logger(__name__)


class ToolDispatcher:
    """Maps MCP tool calls onto z.ai API requests."""

    def __init__(self, config: AppConfig, client: Optional[ZaiClient] = None):
        """Initialize the dispatcher.

        Args:
            config: Validated application configuration
            client: HTTP client for the z.ai API (built from the config if omitted)
        """
        self.config = config
        self.client = client or ZaiClient(config.zai)

    def list_tools(self) -> List[ToolDescriptor]:
        """Return the fixed, ordered tool catalog."""
        return list(CATALOG)

    def get_tool(self, name: str) -> ZaiTool:
        """Look up a tool by name.

        Raises:
            UnknownToolError: If the name is not in the catalog
        """
        tool = TOOL_REGISTRY.get(name)
        if tool is None:
            raise UnknownToolError(name)
        return tool

    async def call_tool(
        self, name: str, arguments: Optional[Dict[str, Any]] = None
    ) -> ToolResult:
        """Execute a tool call.

        Never raises: every failure becomes a ToolResult with isError set.

        Args:
            name: Tool name from the MCP request
            arguments: Raw tool arguments from the MCP request

        Returns:
            ToolResult holding a single text block
        """
        try:
            tool = self.get_tool(name)
            args: ToolArguments = tool.decode(arguments or {})
            request = tool.build_request(args, self.config.zai)

            logger.info("Executing tool", tool=name, path=request.path)
            response = await self.client.send(request)

            return ToolResult.text(tool.format_response(args, response))
        except Exception as e:
            return convert_exception_to_result(e, name)

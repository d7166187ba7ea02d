# zai_mcp_server/error_handler.py
"""
Centralized error handling for the z.ai MCP Server.

Every failure raised while serving a tool call is converted here into an
error-flagged tool result, so tool errors never surface as protocol-level faults.
"""

import logging

from .exceptions import UnknownToolError, ZaiAPIError, ZaiMCPError
from .models import ToolResult

logger = logging.getLogger(__name__)


def error_message(exception: Exception, tool_name: str) -> str:
    """Text of the error block returned for a failed call."""
    if isinstance(exception, UnknownToolError):
        return str(exception)
    return f"Error executing {tool_name}: {exception}"


def convert_exception_to_result(exception: Exception, tool_name: str = "") -> ToolResult:
    """
    Convert an exception to an error-flagged tool result.

    Args:
        exception: The exception that occurred
        tool_name: Name of the tool that was being called

    Returns:
        ToolResult with a single text block and isError set
    """
    extra = {"tool": tool_name, "error_type": type(exception).__name__}

    if isinstance(exception, UnknownToolError):
        logger.warning(f"Unknown tool requested: {tool_name}", extra=extra)
    elif isinstance(exception, ZaiAPIError):
        logger.warning(f"z.ai API call failed for {tool_name}: {exception}", extra=extra)
    elif isinstance(exception, ZaiMCPError):
        logger.info(f"Rejected call to {tool_name}: {exception}", extra=extra)
    else:
        logger.error(
            f"Unexpected error in {tool_name}: {exception}", exc_info=exception, extra=extra
        )

    return ToolResult.text(error_message(exception, tool_name), is_error=True)

# zai_mcp_server/exceptions.py
"""
Custom exceptions for the z.ai MCP Server.

Every exception carries a human-readable message, a ``details`` dict with the
structured context of the failure and an optional ``cause``. Only
ConfigurationError is allowed to escape to the process entry point; every other
kind is converted into an error-flagged tool result at the dispatch boundary.
"""

from typing import Any, Dict, Optional


class ZaiMCPError(Exception):
    """Base exception for the z.ai MCP Server.

    Attributes:
        message: Human-readable error message
        details: Additional context about the error
        cause: Original exception that caused this error
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class ConfigurationError(ZaiMCPError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, config_key: str, reason: str):
        super().__init__(
            reason,
            details={"config_key": config_key, "reason": reason},
        )
        self.config_key = config_key


# Upstream API exceptions
class ZaiAPIError(ZaiMCPError):
    """Base exception for failures talking to the z.ai API."""

    pass


class UpstreamHTTPError(ZaiAPIError):
    """Raised when the z.ai API answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"z.ai API error ({status_code}): {body}",
            details={"status_code": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body


class TransportError(ZaiAPIError):
    """Raised when the z.ai API cannot be reached."""

    def __init__(self, reason: str, cause: Optional[Exception] = None):
        super().__init__(
            f"Failed to connect to z.ai API: {reason}",
            details={"reason": reason},
            cause=cause,
        )


class InvalidResponseError(ZaiAPIError):
    """Raised when a successful response does not carry a JSON body."""

    def __init__(self, reason: str, cause: Optional[Exception] = None):
        super().__init__(
            f"Invalid JSON in z.ai API response: {reason}",
            details={"reason": reason},
            cause=cause,
        )


# Dispatch exceptions
class UnknownToolError(ZaiMCPError):
    """Raised when a call names a tool outside the catalog."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}", details={"tool_name": tool_name})
        self.tool_name = tool_name


class InvalidArgumentsError(ZaiMCPError):
    """Raised when tool arguments miss a required field or have the wrong type."""

    def __init__(self, tool_name: str, errors: str):
        super().__init__(
            f"Invalid arguments for {tool_name}: {errors}",
            details={"tool_name": tool_name, "errors": errors},
        )
        self.tool_name = tool_name

"""
z.ai API and MCP server constants.

All endpoint paths and fixed request values live here so the tool modules and
the HTTP client agree on them.
"""

from typing import Final, Optional

# Server Information
SERVER_NAME: Final[str] = "zai-mcp-server"

# z.ai API endpoints
CHAT_COMPLETIONS_PATH: Final[str] = "/v1/chat/completions"
SEARCH_PATH: Final[str] = "/v1/search"
SUMMARIZE_PATH: Final[str] = "/v1/summarize"

# No client-side timeout; the request runs until the upstream answers or fails
REQUEST_TIMEOUT: Final[Optional[float]] = None

# Header Values
CONTENT_TYPE_JSON: Final[str] = "application/json"

# Placeholder returned when the upstream answer lacks the expected field
NO_RESPONSE_TEXT: Final[str] = "No response from z.ai"

# Tool defaults
DEFAULT_SEARCH_RESULTS: Final[int] = 10
DEFAULT_SUMMARY_LENGTH: Final[str] = "medium"
DEFAULT_SUMMARY_STYLE: Final[str] = "paragraph"

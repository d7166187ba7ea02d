# zai_mcp_server/__init__.py
"""
z.ai MCP Server package.

A Model Context Protocol (MCP) server that exposes the z.ai API to AI assistants.
Each MCP tool call is forwarded as a single authenticated request to z.ai and the
JSON answer is relayed back as MCP text content.

Key Features:
- Chat completion with optional system prompt and conversation history
- Web / knowledge-base search with result limits and filters
- Text summarization with selectable length and style
- stdio and streamable-http transports via the MCP Python SDK
- Layered configuration from CLI arguments, environment variables and .env

Architecture:
- Static tool catalog with one module per tool
- Stateless dispatcher that turns every failure into an error-flagged tool result
- Thin httpx client with classified upstream errors
"""

__version__ = "1.0.0"

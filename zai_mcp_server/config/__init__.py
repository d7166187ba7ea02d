# zai_mcp_server/config/__init__.py
"""
Configuration system for the z.ai MCP Server.

The configuration is loaded once by the entry point and then handed to the
dispatcher and the HTTP client explicitly.
"""

from .loaders import build_parser, load_config
from .schema import AppConfig, ServerConfig, ZaiConfig

__all__ = [
    "AppConfig",
    "ServerConfig",
    "ZaiConfig",
    "build_parser",
    "load_config",
]

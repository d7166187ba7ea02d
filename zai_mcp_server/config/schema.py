# zai_mcp_server/config/schema.py
"""
Configuration schema definitions for the z.ai MCP Server.

This module defines the dataclass schemas that represent the application's configuration
structure. The configuration is built once at startup and passed explicitly to the
components that need it; request handling never looks configuration up globally.

Key Components:
- ZaiConfig: z.ai API credentials and request defaults
- ServerConfig: MCP transport and logging settings
- AppConfig: Main application configuration combining all components
"""

from dataclasses import dataclass, field
from typing import Literal, Optional

from ..exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.z.ai"
DEFAULT_MODEL = "claude-3-sonnet-20240229"
DEFAULT_MAX_TOKENS = 4000
DEFAULT_TEMPERATURE = 0.7


@dataclass
class ZaiConfig:
    """z.ai API configuration."""

    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE


@dataclass
class ServerConfig:
    """MCP server configuration."""

    transport: Literal["stdio", "streamable-http"] = "stdio"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_format: Literal["json", "compact"] = "compact"
    print_config: bool = False
    # HTTP transport configuration
    host: str = "127.0.0.1"
    port: int = 8000
    path: str = "/mcp"


@dataclass
class AppConfig:
    """Main application configuration."""

    zai: ZaiConfig = field(default_factory=ZaiConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    def validate(self) -> "AppConfig":
        """Validate the configuration before the server starts.

        Returns:
            The validated configuration

        Raises:
            ConfigurationError: If a required setting is missing or out of range
        """
        self._validate_api_key()
        self._validate_request_defaults()
        self._validate_port_range()
        self._validate_path_format()
        return self

    def _validate_api_key(self) -> None:
        if not self.zai.api_key:
            raise ConfigurationError(
                "api_key", "ZAI_API_KEY environment variable is required"
            )

    def _validate_request_defaults(self) -> None:
        if self.zai.max_tokens < 1:
            raise ConfigurationError(
                "max_tokens", f"Max tokens must be at least 1, got {self.zai.max_tokens}"
            )
        if not (0.0 <= self.zai.temperature <= 1.0):
            raise ConfigurationError(
                "temperature",
                f"Temperature {self.zai.temperature} is not in valid range (0.0-1.0)",
            )

    def _validate_port_range(self) -> None:
        if not (1 <= self.server.port <= 65535):
            raise ConfigurationError(
                "port", f"Port {self.server.port} is not in valid range (1-65535)"
            )

    def _validate_path_format(self) -> None:
        if self.server.transport == "streamable-http":
            if not self.server.path.startswith("/") or len(self.server.path) < 2:
                raise ConfigurationError(
                    "path",
                    f"HTTP path '{self.server.path}' must start with '/' and name an endpoint",
                )

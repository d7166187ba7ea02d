# zai_mcp_server/config/loaders.py
"""
Configuration loading and argument parsing for the z.ai MCP Server.

This module implements the layered configuration system that loads settings from
multiple sources in priority order: CLI arguments → environment variables → .env
file → defaults.

Key Functions:
- Command-line argument parsing
- Environment variable loading through pydantic-settings
- Layered configuration with proper priority handling
"""

import argparse
import logging
from typing import List, Optional

from pydantic import ValidationError

from ..exceptions import ConfigurationError
from .schema import AppConfig
from .settings import EnvironmentSettings

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def load_from_env(config: AppConfig) -> AppConfig:
    """Load configuration from environment variables and the .env file."""
    try:
        env = EnvironmentSettings()
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first.get("loc", ())) or "environment"
        raise ConfigurationError(key, f"Invalid environment setting {key}: {first['msg']}") from e

    config.zai.api_key = env.zai_api_key
    config.zai.base_url = env.zai_base_url
    config.zai.model = env.zai_model
    config.zai.max_tokens = env.zai_max_tokens
    config.zai.temperature = env.zai_temperature

    if env.log_level and env.log_level.upper() in LOG_LEVELS:
        config.server.log_level = env.log_level.upper()  # type: ignore[assignment]
    if env.log_format:
        config.server.log_format = env.log_format
    if env.transport:
        config.server.transport = env.transport
    if env.host:
        config.server.host = env.host
    if env.port:
        config.server.port = env.port
    if env.path:
        config.server.path = env.path

    return config


def build_parser() -> argparse.ArgumentParser:
    """Build the command line argument parser."""
    parser = argparse.ArgumentParser(
        description="z.ai MCP Server - A Model Context Protocol server for the z.ai API"
    )

    parser.add_argument("--api-key", type=str, help="z.ai API key (default: $ZAI_API_KEY)")
    parser.add_argument(
        "--base-url", type=str, help="z.ai API base URL (default: https://api.z.ai)"
    )
    parser.add_argument("--model", type=str, help="Default model for chat completions")
    parser.add_argument(
        "--max-tokens", type=int, help="Default maximum tokens per chat response"
    )
    parser.add_argument(
        "--temperature", type=float, help="Default sampling temperature (0.0-1.0)"
    )

    parser.add_argument(
        "--log-level",
        choices=list(LOG_LEVELS),
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-format",
        choices=["json", "compact"],
        help="Set log output format (default: compact)",
    )

    parser.add_argument(
        "--transport",
        choices=["stdio", "streamable-http"],
        default=None,
        help="Specify the transport mode (stdio or streamable-http)",
    )
    parser.add_argument("--host", type=str, default=None, help="HTTP server host (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=None, help="HTTP server port (default: 8000)")
    parser.add_argument("--path", type=str, default=None, help="HTTP server path (default: /mcp)")

    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print an MCP client configuration snippet and exit",
    )

    return parser


def load_from_args(config: AppConfig, argv: Optional[List[str]] = None) -> AppConfig:
    """Load configuration from command line arguments."""
    args = build_parser().parse_args(argv)

    if args.api_key:
        config.zai.api_key = args.api_key
    if args.base_url:
        config.zai.base_url = args.base_url
    if args.model:
        config.zai.model = args.model
    if args.max_tokens is not None:
        config.zai.max_tokens = args.max_tokens
    if args.temperature is not None:
        config.zai.temperature = args.temperature

    if args.log_level:
        config.server.log_level = args.log_level
    if args.log_format:
        config.server.log_format = args.log_format
    if args.transport:
        config.server.transport = args.transport
    if args.host:
        config.server.host = args.host
    if args.port:
        config.server.port = args.port
    if args.path:
        config.server.path = args.path
    if args.print_config:
        config.server.print_config = True

    return config


def load_config(argv: Optional[List[str]] = None) -> AppConfig:
    """
    Load configuration with clear precedence order.

    Configuration is loaded in the following priority order:
    1. Command line arguments (highest priority)
    2. Environment variables
    3. .env file
    4. Defaults (lowest priority)

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        AppConfig: Fully configured application settings

    Raises:
        ConfigurationError: If configuration validation fails
    """
    config = AppConfig()
    config = load_from_env(config)
    config = load_from_args(config, argv)
    config.zai.base_url = config.zai.base_url.rstrip("/")

    if not config.server.print_config:
        config.validate()

    logger.debug("Configuration loaded")
    return config

# zai_mcp_server/cli.py
"""
CLI utilities for z.ai MCP server configuration generation.

Generates the MCP client configuration block (Claude Desktop style) that launches
this server over stdio.
"""

import json
import os
import sys
from typing import Any, Dict, List

from .config import AppConfig
from .config.schema import DEFAULT_BASE_URL, DEFAULT_MAX_TOKENS, DEFAULT_MODEL, DEFAULT_TEMPERATURE
from .constants import SERVER_NAME
from .tools import CATALOG


def build_client_config(config: AppConfig) -> Dict[str, Any]:
    """
    Build the MCP client configuration for this server.

    Only settings that differ from the defaults are added to ``env``; the API key
    is always left as a placeholder.
    """
    main_path = os.path.join(
        os.path.abspath(os.path.dirname(os.path.dirname(__file__))), "main.py"
    )
    args: List[str] = [main_path]

    env_vars: Dict[str, str] = {"ZAI_API_KEY": "<your z.ai API key>"}
    if config.zai.base_url != DEFAULT_BASE_URL:
        env_vars["ZAI_BASE_URL"] = config.zai.base_url
    if config.zai.model != DEFAULT_MODEL:
        env_vars["ZAI_MODEL"] = config.zai.model
    if config.zai.max_tokens != DEFAULT_MAX_TOKENS:
        env_vars["ZAI_MAX_TOKENS"] = str(config.zai.max_tokens)
    if config.zai.temperature != DEFAULT_TEMPERATURE:
        env_vars["ZAI_TEMPERATURE"] = str(config.zai.temperature)

    return {
        "mcpServers": {
            SERVER_NAME: {
                "command": sys.executable,
                "args": args,
                "env": env_vars,
                "requiredTools": [descriptor.name for descriptor in CATALOG],
            }
        }
    }


def print_client_config(config: AppConfig) -> None:
    """Print the MCP client configuration to stdout."""
    print(json.dumps(build_client_config(config), indent=2))

# zai_mcp_server/logging_config.py
"""
Logging configuration for the z.ai MCP Server with format options.

Provides JSON and compact logging formats for different deployment scenarios.
All output goes to stderr because stdout carries the stdio MCP channel.
structlog loggers are routed through the standard library so keyword context
ends up in the same handlers.
"""

import json
import logging
import sys
from typing import Any, Dict

import structlog

PACKAGE_PREFIX = "zai_mcp_server."


class MCPJSONFormatter(logging.Formatter):
    """JSON formatter for MCP server logs."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "tool"):
            log_data["tool"] = record.tool
        if hasattr(record, "error_type"):
            log_data["error_type"] = record.error_type

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class CompactFormatter(logging.Formatter):
    """Compact formatter that shortens logger names and uses shorter timestamps."""

    def format(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith(PACKAGE_PREFIX):
            name = name[len(PACKAGE_PREFIX) :]

        asctime = self.formatTime(record, datefmt="%H:%M:%S")
        line = f"{asctime} - {name} - {record.levelname} - {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def configure_structlog() -> None:
    """Route structlog through the standard library logging handlers."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(log_level: str = "WARNING", json_format: bool = False) -> None:
    """Configure logging for the z.ai MCP Server.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_format: Whether to use JSON formatting for logs
    """
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    if json_format:
        formatter: logging.Formatter = MCPJSONFormatter()
    else:
        formatter = CompactFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    configure_structlog()

    # Set specific loggers to reduce noise
    if log_level.upper() != "DEBUG":
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

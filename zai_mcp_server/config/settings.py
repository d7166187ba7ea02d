"""
Environment settings for the z.ai MCP Server.

Loads configuration from environment variables and an optional ``.env`` file with
the same defaults as the dataclass schema.
"""

from typing import Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .schema import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
)


class EnvironmentSettings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # z.ai API
    zai_api_key: Optional[str] = Field(default=None, validation_alias="ZAI_API_KEY")
    zai_base_url: str = Field(default=DEFAULT_BASE_URL, validation_alias="ZAI_BASE_URL")
    zai_model: str = Field(default=DEFAULT_MODEL, validation_alias="ZAI_MODEL")
    zai_max_tokens: int = Field(
        default=DEFAULT_MAX_TOKENS, validation_alias="ZAI_MAX_TOKENS"
    )
    zai_temperature: float = Field(
        default=DEFAULT_TEMPERATURE, validation_alias="ZAI_TEMPERATURE"
    )

    # Server
    log_level: Optional[str] = Field(default=None, validation_alias="LOG_LEVEL")
    log_format: Optional[Literal["json", "compact"]] = Field(
        default=None, validation_alias="LOG_FORMAT"
    )
    transport: Optional[Literal["stdio", "streamable-http"]] = Field(
        default=None, validation_alias="TRANSPORT"
    )
    host: Optional[str] = Field(default=None, validation_alias="HOST")
    port: Optional[int] = Field(default=None, validation_alias="PORT")
    path: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("MCP_PATH", "HTTP_PATH")
    )

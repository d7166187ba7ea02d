"""
Data models shared by the tool catalog, the dispatcher and the HTTP client.

These are transient request/response shapes; nothing here is persisted.
"""

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field


class TextContent(BaseModel):
    """A single MCP text content block."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Result of one tool call as returned across the MCP boundary."""

    content: List[TextContent]
    isError: bool = False

    @classmethod
    def text(cls, text: str, is_error: bool = False) -> "ToolResult":
        """Build a result holding a single text block."""
        return cls(content=[TextContent(text=text)], isError=is_error)


class ToolDescriptor(BaseModel):
    """Static description of a tool in the catalog."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    input_schema: Dict[str, Any] = Field(default_factory=dict)


class OutboundRequest(BaseModel):
    """A request to the z.ai API built from one tool invocation."""

    path: str
    method: Literal["POST"] = "POST"
    body: Dict[str, Any] = Field(default_factory=dict)

# zai_mcp_server/tools/chat.py
"""
z.ai chat completion tool.

Builds an OpenAI-style message list from an optional system prompt, optional
conversation history and the current message, and returns the first choice.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from ..config import ZaiConfig
from ..constants import CHAT_COMPLETIONS_PATH, NO_RESPONSE_TEXT
from ..models import OutboundRequest, ToolDescriptor
from .base import MISSING, ToolArgumentsModel, ZaiTool, dig, to_json_text

CHAT_DESCRIPTOR = ToolDescriptor(
    name="zai_chat",
    description=(
        "Send a message to z.ai chat API and receive a response. "
        "Supports multi-turn conversations with context."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "message": {
                "type": "string",
                "description": "The message to send to z.ai",
            },
            "system": {
                "type": "string",
                "description": "Optional system prompt to set context or behavior",
            },
            "conversationHistory": {
                "type": "array",
                "description": "Optional conversation history for context",
                "items": {
                    "type": "object",
                    "properties": {
                        "role": {"type": "string", "enum": ["user", "assistant"]},
                        "content": {"type": "string"},
                    },
                },
            },
            "temperature": {
                "type": "number",
                "description": "Optional temperature (0.0-1.0) for response randomness",
                "minimum": 0,
                "maximum": 1,
            },
            "maxTokens": {
                "type": "number",
                "description": "Optional maximum tokens for the response",
                "minimum": 1,
            },
        },
        "required": ["message"],
    },
)


class ChatArguments(ToolArgumentsModel):
    """Arguments of the zai_chat tool."""

    message: str
    system: Optional[str] = None
    conversation_history: Optional[List[Dict[str, Any]]] = Field(
        default=None, alias="conversationHistory"
    )
    temperature: Optional[float] = None
    max_tokens: Optional[Union[int, float]] = Field(default=None, alias="maxTokens")


class ChatTool(ZaiTool[ChatArguments]):
    """Chat completion against /v1/chat/completions."""

    descriptor = CHAT_DESCRIPTOR
    arguments_model = ChatArguments

    def build_messages(self, args: ChatArguments) -> List[Dict[str, Any]]:
        messages: List[Dict[str, Any]] = []

        if args.system:
            messages.append({"role": "system", "content": args.system})

        if args.conversation_history:
            messages.extend(args.conversation_history)

        messages.append({"role": "user", "content": args.message})
        return messages

    def build_request(self, args: ChatArguments, config: ZaiConfig) -> OutboundRequest:
        return OutboundRequest(
            path=CHAT_COMPLETIONS_PATH,
            body={
                "model": config.model,
                "messages": self.build_messages(args),
                # maxTokens of 0 falls back to the configured default
                "max_tokens": args.max_tokens or config.max_tokens,
                "temperature": (
                    args.temperature
                    if args.temperature is not None
                    else config.temperature
                ),
            },
        )

    def format_response(self, args: ChatArguments, response: Any) -> str:
        content = dig(response, "choices", 0, "message", "content")
        if not isinstance(content, str):
            content = NO_RESPONSE_TEXT

        return to_json_text(
            {
                "response": content,
                "usage": dig(response, "usage", default=MISSING),
                "model": dig(response, "model", default=MISSING),
            }
        )

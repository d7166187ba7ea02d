"""
Base interface for z.ai tools.

A tool owns its catalog entry, the model its arguments decode into, the request it
sends to z.ai and the way the JSON answer is turned into text.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from ..config import ZaiConfig
from ..exceptions import InvalidArgumentsError
from ..models import OutboundRequest, ToolDescriptor

ArgsT = TypeVar("ArgsT", bound="ToolArgumentsModel")

# Marks a response field that is absent, as opposed to present and null.
MISSING: Any = object()


class ToolArgumentsModel(BaseModel):
    """Base model for decoded tool arguments (camelCase aliases accepted)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


def dig(data: Any, *path: Any, default: Any = None) -> Any:
    """Follow ``path`` through nested dicts and lists, returning ``default`` on any miss."""
    current = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return default
        elif not isinstance(current, dict):
            return default
        try:
            current = current[key]
        except (KeyError, IndexError):
            return default
    return current


def to_json_text(payload: Dict[str, Any]) -> str:
    """Render a result payload the way every tool returns it, dropping MISSING fields."""
    return json.dumps(
        {key: value for key, value in payload.items() if value is not MISSING},
        indent=2,
        ensure_ascii=False,
    )


class ZaiTool(ABC, Generic[ArgsT]):
    """A single tool exposed through MCP and backed by one z.ai endpoint."""

    descriptor: ToolDescriptor
    arguments_model: Type[ArgsT]

    @property
    def name(self) -> str:
        return self.descriptor.name

    def decode(self, arguments: Dict[str, Any]) -> ArgsT:
        """Decode raw MCP arguments into this tool's argument model.

        Raises:
            InvalidArgumentsError: If a required field is missing or mistyped
        """
        try:
            return self.arguments_model.model_validate(arguments or {})
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidArgumentsError(self.name, problems) from e

    @abstractmethod
    def build_request(self, args: ArgsT, config: ZaiConfig) -> OutboundRequest:
        """Build the outbound request for decoded arguments."""

    @abstractmethod
    def format_response(self, args: ArgsT, response: Any) -> str:
        """Turn the z.ai JSON answer into the text returned to the MCP client."""

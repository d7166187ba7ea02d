# zai_mcp_server/tools/__init__.py
"""
Tool catalog for the z.ai MCP Server.

The catalog is fixed and ordered: chat, search, summarize. Arguments of a call are
decoded into one member of the ToolArguments union, selected by the tool name.
"""

from typing import Dict, List, Union

from ..models import ToolDescriptor
from .base import ZaiTool
from .chat import ChatArguments, ChatTool
from .search import SearchArguments, SearchTool
from .summarize import SummarizeArguments, SummarizeTool

ToolArguments = Union[ChatArguments, SearchArguments, SummarizeArguments]

TOOLS: List[ZaiTool] = [ChatTool(), SearchTool(), SummarizeTool()]

TOOL_REGISTRY: Dict[str, ZaiTool] = {tool.name: tool for tool in TOOLS}

CATALOG: List[ToolDescriptor] = [tool.descriptor for tool in TOOLS]

__all__ = [
    "CATALOG",
    "TOOLS",
    "TOOL_REGISTRY",
    "ToolArguments",
    "ZaiTool",
    "ChatArguments",
    "SearchArguments",
    "SummarizeArguments",
]

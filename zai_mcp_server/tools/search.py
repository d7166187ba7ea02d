# zai_mcp_server/tools/search.py
"""z.ai search tool."""

from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from ..config import ZaiConfig
from ..constants import DEFAULT_SEARCH_RESULTS, SEARCH_PATH
from ..models import OutboundRequest, ToolDescriptor
from .base import ToolArgumentsModel, ZaiTool, dig, to_json_text

SEARCH_DESCRIPTOR = ToolDescriptor(
    name="zai_search",
    description=(
        "Search using z.ai search capabilities. "
        "Retrieves relevant information from the web or knowledge base."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "The search query",
            },
            "maxResults": {
                "type": "number",
                "description": "Maximum number of results to return (default: 10)",
                "minimum": 1,
                "maximum": 50,
            },
            "filters": {
                "type": "object",
                "description": "Optional filters for the search (e.g., date range, domain)",
                "properties": {
                    "dateRange": {
                        "type": "string",
                        "description": 'Date range filter (e.g., "last_week", "last_month")',
                    },
                    "domains": {
                        "type": "array",
                        "description": "Specific domains to search within",
                        "items": {"type": "string"},
                    },
                },
            },
        },
        "required": ["query"],
    },
)


class SearchArguments(ToolArgumentsModel):
    """Arguments of the zai_search tool."""

    query: str
    max_results: Optional[Union[int, float]] = Field(default=None, alias="maxResults")
    filters: Optional[Dict[str, Any]] = None


class SearchTool(ZaiTool[SearchArguments]):
    """Search against /v1/search."""

    descriptor = SEARCH_DESCRIPTOR
    arguments_model = SearchArguments

    def build_request(self, args: SearchArguments, config: ZaiConfig) -> OutboundRequest:
        body: Dict[str, Any] = {
            "query": args.query,
            "max_results": args.max_results or DEFAULT_SEARCH_RESULTS,
        }
        if args.filters is not None:
            body["filters"] = args.filters

        return OutboundRequest(path=SEARCH_PATH, body=body)

    def format_response(self, args: SearchArguments, response: Any) -> str:
        results = dig(response, "results")
        if not isinstance(results, list):
            results = []
        items: List[Any] = results

        return to_json_text(
            {
                "results": items,
                "count": len(items),
                "query": args.query,
            }
        )

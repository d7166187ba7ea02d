# zai_mcp_server/tools/summarize.py
"""
z.ai summarization tool.

Uses the dedicated /v1/summarize endpoint rather than a synthesized chat prompt;
the output is a single text block either way.
"""

from typing import Any, Literal, Optional

from ..config import ZaiConfig
from ..constants import (
    DEFAULT_SUMMARY_LENGTH,
    DEFAULT_SUMMARY_STYLE,
    NO_RESPONSE_TEXT,
    SUMMARIZE_PATH,
)
from ..models import OutboundRequest, ToolDescriptor
from .base import ToolArgumentsModel, ZaiTool, dig, to_json_text

SUMMARY_LENGTHS = ("short", "medium", "long")
SUMMARY_STYLES = ("bullet_points", "paragraph", "key_points")

SUMMARIZE_DESCRIPTOR = ToolDescriptor(
    name="zai_summarize",
    description="Summarize text using z.ai. Condenses long content into concise summaries.",
    input_schema={
        "type": "object",
        "properties": {
            "text": {
                "type": "string",
                "description": "The text to summarize",
            },
            "length": {
                "type": "string",
                "description": "Desired summary length",
                "enum": list(SUMMARY_LENGTHS),
            },
            "style": {
                "type": "string",
                "description": "Summary style",
                "enum": list(SUMMARY_STYLES),
            },
        },
        "required": ["text"],
    },
)


class SummarizeArguments(ToolArgumentsModel):
    """Arguments of the zai_summarize tool."""

    text: str
    length: Optional[Literal["short", "medium", "long"]] = None
    style: Optional[Literal["bullet_points", "paragraph", "key_points"]] = None


class SummarizeTool(ZaiTool[SummarizeArguments]):
    """Summarization against /v1/summarize."""

    descriptor = SUMMARIZE_DESCRIPTOR
    arguments_model = SummarizeArguments

    def build_request(
        self, args: SummarizeArguments, config: ZaiConfig
    ) -> OutboundRequest:
        return OutboundRequest(
            path=SUMMARIZE_PATH,
            body={
                "text": args.text,
                "length": args.length or DEFAULT_SUMMARY_LENGTH,
                "style": args.style or DEFAULT_SUMMARY_STYLE,
            },
        )

    def format_response(self, args: SummarizeArguments, response: Any) -> str:
        summary = dig(response, "summary")
        summary_length = len(summary) if isinstance(summary, str) else 0
        if not isinstance(summary, str):
            summary = NO_RESPONSE_TEXT

        return to_json_text(
            {
                "summary": summary,
                "original_length": len(args.text),
                "summary_length": summary_length,
            }
        )

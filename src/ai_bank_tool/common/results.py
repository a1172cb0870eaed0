"""
Tool result envelope.

Every tool answers with the same payload twice: as indented JSON text for
clients that only read content blocks, and as structured content.
"""

import json
from typing import Any

from mcp.types import TextContent
from fastmcp.tools.tool import ToolResult
from pydantic import BaseModel


def to_payload(data: BaseModel | dict[str, Any]) -> dict[str, Any]:
    """Dump a response model to its wire shape (camelCase keys, no nulls)."""
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True, exclude_none=True)
    return {k: v for k, v in data.items() if v is not None}


def mk_result(data: BaseModel | dict[str, Any]) -> ToolResult:
    payload = to_payload(data)
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    return ToolResult(
        content=[TextContent(type="text", text=text)],
        structured_content=payload,
    )

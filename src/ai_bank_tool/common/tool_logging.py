"""
Per-call tool logging for the HTTP server.

Logs a start line with the arguments, then either an ok line or an error
line with the elapsed time. Errors are re-raised unchanged.
"""

import time
from datetime import datetime, timezone

from fastmcp.server.middleware import Middleware, MiddlewareContext

from ai_bank_tool.logging_config import get_logger

logger = get_logger("ai_bank_tool.tools")


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class ToolLoggingMiddleware(Middleware):
    """FastMCP middleware wrapping every tools/call."""

    async def on_call_tool(self, context: MiddlewareContext, call_next):
        tool_name = context.message.name
        logger.info(
            "[MCP] %s start startedAt=%s args=%s",
            tool_name,
            _now_iso(),
            context.message.arguments,
        )
        t0 = time.perf_counter()
        try:
            result = await call_next(context)
        except Exception as e:
            logger.error(
                "[MCP] %s error ms=%d error=%s",
                tool_name,
                (time.perf_counter() - t0) * 1000,
                e,
            )
            raise
        logger.info(
            "[MCP] %s ok ms=%d finishedAt=%s",
            tool_name,
            (time.perf_counter() - t0) * 1000,
            _now_iso(),
        )
        return result

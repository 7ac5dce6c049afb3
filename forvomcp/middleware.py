import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

import mcp.types as mt
from fastmcp.server.middleware import Middleware, MiddlewareContext

from forvomcp.config import settings

logger = logging.getLogger("forvomcp")

CallNext = Callable[[MiddlewareContext[mt.CallToolRequest]], Awaitable[Any]]


def _extract_tool_info(message: mt.CallToolRequest | mt.CallToolRequestParams) -> tuple[str, dict]:
    """Return (tool name, arguments) from a request or bare request params."""
    if hasattr(message, "params"):
        return message.params.name, message.params.arguments or {}
    return message.name, message.arguments or {}


def _reported_error(result: Any) -> bool:
    """Tools report Forvo failures as an ``{"error": ...}`` payload."""
    if getattr(result, "isError", False):
        return True
    structured = getattr(result, "structured_content", None) or getattr(result, "structuredContent", None)
    return isinstance(structured, dict) and "error" in structured


class LoggingMiddleware(Middleware):
    """Logs start, completion and failure of every tool call with its duration."""

    async def on_call_tool(self, context: MiddlewareContext[mt.CallToolRequest], call_next: CallNext) -> Any:
        tool_name, arguments = _extract_tool_info(context.message)
        started = time.perf_counter()

        # Arguments are only worth the noise in structured or debug output
        if settings.log_json or settings.log_level.upper() == "DEBUG":
            logger.info(
                f"Tool call started: {tool_name}",
                extra={"props": {"event": "tool_call_start", "tool": tool_name, "arguments": arguments}},
            )

        try:
            result = await call_next(context)
        except Exception as e:
            logger.error(
                f"Tool call failed: {tool_name}",
                extra={
                    "props": {
                        "event": "tool_call_error",
                        "tool": tool_name,
                        "duration_seconds": round(time.perf_counter() - started, 4),
                        "error": str(e),
                    }
                },
                exc_info=True,
            )
            raise

        logger.info(
            f"Tool call completed: {tool_name}",
            extra={
                "props": {
                    "event": "tool_call_end",
                    "tool": tool_name,
                    "duration_seconds": round(time.perf_counter() - started, 4),
                    "is_error": _reported_error(result),
                }
            },
        )
        return result

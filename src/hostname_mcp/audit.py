"""Logging and error translation for tool invocations."""

import functools
import logging
import time

from fastmcp.exceptions import ToolError


logger = logging.getLogger("hostname-mcp.audit")


def log_tool_call(func):
    """Log a tool invocation and turn accessor failures into tool errors.

    Any exception escaping the wrapped coroutine is logged with its traceback
    and re-raised as a ``ToolError`` so FastMCP answers the request with an
    error result instead of tearing down the server. ``ToolError`` raised by
    the tool itself is passed through untouched.
    """
    tool_name = func.__name__

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        logger.info(f"Tool call: {tool_name}")
        start = time.perf_counter()

        try:
            result = await func(*args, **kwargs)
        except ToolError:
            logger.error(f"Tool {tool_name} reported an error", exc_info=True)
            raise
        except Exception as e:
            logger.error(f"Tool {tool_name} failed: {e}", exc_info=True)
            raise ToolError(f"Error: {tool_name} failed: {e}") from e

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(f"Tool {tool_name} completed in {elapsed_ms:.1f}ms")
        return result

    return wrapper

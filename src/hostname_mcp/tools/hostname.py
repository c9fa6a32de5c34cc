"""Hostname lookup tool."""

import socket

from mcp.types import ToolAnnotations

from hostname_mcp.audit import log_tool_call
from hostname_mcp.server import mcp


@mcp.tool(
    title="Get System Hostname",
    description="Get the hostname/computer name of the current system",
    annotations=ToolAnnotations(readOnlyHint=True),
)
@log_tool_call
async def get_hostname() -> str:
    """Get the hostname of the current system.

    Returns:
        The host name exactly as reported by the operating system
    """
    return socket.gethostname()

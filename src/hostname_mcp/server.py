"""Core MCP server exposing hostname and system information using FastMCP."""

import logging
import sys

from fastmcp import FastMCP

from hostname_mcp import __version__


SERVER_NAME = "hostname-mcp"

logger = logging.getLogger(SERVER_NAME)

# Initialize FastMCP server
mcp = FastMCP(SERVER_NAME, version=__version__)

# Tool imports - these register tools via @mcp.tool() decorator
from hostname_mcp.tools import hostname  # noqa: E402, F401
from hostname_mcp.tools import system_info  # noqa: E402, F401


def main():
    # stdout carries protocol frames, diagnostics go to stderr
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        logger.info("Hostname MCP Server running on stdio")
        mcp.run(show_banner=False)
    except Exception as e:
        logger.critical(f"Fatal error in main(): {e}", exc_info=True)
        sys.exit(1)

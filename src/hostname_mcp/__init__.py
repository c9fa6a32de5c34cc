"""Hostname MCP Server - Read-only host identity and resource facts over stdio."""
import importlib.metadata


__version__ = importlib.metadata.version("hostname-mcp")

"""Tools registered on the hostname-mcp server."""

"""NYC Tax MCP server."""

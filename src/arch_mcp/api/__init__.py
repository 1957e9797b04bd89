"""HTTP API for Arch MCP."""

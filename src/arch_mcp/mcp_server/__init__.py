"""MCP protocol surface."""

from arch_mcp.mcp_server.server import create_mcp_server, initialization_options
from arch_mcp.mcp_server.transports import mount_sse, run_stdio

__all__ = [
    "create_mcp_server",
    "initialization_options",
    "mount_sse",
    "run_stdio",
]

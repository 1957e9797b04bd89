"""Arch MCP - architecture documentation and greeting MCP servers."""

__version__ = "0.1.0"

from arch_mcp.exceptions import (
    ArchMcpError,
    DocumentNotFoundError,
    DuplicatePromptError,
    DuplicateToolError,
    HealthCheckFailure,
    MissingParameterError,
    UnknownPromptError,
    UnknownToolError,
)

__all__ = [
    "__version__",
    "ArchMcpError",
    "DocumentNotFoundError",
    "DuplicatePromptError",
    "DuplicateToolError",
    "HealthCheckFailure",
    "MissingParameterError",
    "UnknownPromptError",
    "UnknownToolError",
]

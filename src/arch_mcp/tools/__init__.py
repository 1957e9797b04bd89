"""Tool definitions, registry and invocation."""

from arch_mcp.tools.base import Arguments, InvocationContext, Tool, ToolHandler
from arch_mcp.tools.invoker import ToolInvoker
from arch_mcp.tools.registry import ToolRegistry

__all__ = [
    "Arguments",
    "InvocationContext",
    "Tool",
    "ToolHandler",
    "ToolInvoker",
    "ToolRegistry",
]

"""Tool registry for name-based tool discovery."""

from __future__ import annotations

import logging

from arch_mcp.exceptions import DuplicateToolError
from arch_mcp.models.tool import ToolSummary
from arch_mcp.tools.base import Tool

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Ordered registry of the tools a server exposes.

    Populated once at start-up and read-only afterwards. Listing order is
    registration order.
    """

    def __init__(self) -> None:
        self._by_name: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Register a tool instance."""
        if tool.name in self._by_name:
            raise DuplicateToolError(tool.name)
        self._by_name[tool.name] = tool
        logger.debug(f"Registered tool: {tool.name}")

    def get(self, name: str) -> Tool | None:
        return self._by_name.get(name)

    def list(self) -> list[ToolSummary]:
        """Discovery listing in registration order."""
        return [tool.summary() for tool in self._by_name.values()]

    def names(self) -> list[str]:
        return list(self._by_name)

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

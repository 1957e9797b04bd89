"""Start-up wiring of the tool registry for each server profile."""

import logging

from arch_mcp.config import Profile
from arch_mcp.services.documents import DocumentLibrary
from arch_mcp.tools.architecture import ArchitectureDocs
from arch_mcp.tools.greeting import greeting_tools
from arch_mcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


def build_registry(
    profile: Profile,
    documents: DocumentLibrary | None = None,
) -> ToolRegistry:
    """Create and populate the tool registry for ``profile``.

    Raises:
        DuplicateToolError: If two tools share a name. Fatal at start-up.
        DocumentNotFoundError: If a documentation tool has no text to serve.
    """
    registry = ToolRegistry()
    if profile == Profile.HELLO:
        tools = greeting_tools()
    else:
        docs = ArchitectureDocs(documents)
        docs.verify_documents()
        tools = docs.tools()

    for tool in tools:
        registry.register(tool)

    logger.info(f"Registered {len(registry)} tool(s) for profile '{profile.value}'")
    return registry

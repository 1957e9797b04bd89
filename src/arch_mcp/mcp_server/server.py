"""MCP protocol adapter.

Binds the tool registry, invoker and prompt catalog to a low-level
``mcp.server.Server``. The SDK owns JSON-RPC framing and session state; this
module only translates between SDK types and ours.
"""

import logging
from typing import Any

import mcp.types as types
from mcp.server import Server
from mcp.server.lowlevel import NotificationOptions
from mcp.server.models import InitializationOptions

from arch_mcp.config import Settings
from arch_mcp.models.prompt import PromptResult
from arch_mcp.models.tool import ToolInvocationResult, ToolSummary
from arch_mcp.prompts import PromptCatalog
from arch_mcp.services.notifier import SessionChannel
from arch_mcp.tools import ToolInvoker

logger = logging.getLogger(__name__)


def to_mcp_tool(summary: ToolSummary) -> types.Tool:
    return types.Tool(
        name=summary.name,
        description=summary.description,
        inputSchema=summary.input_schema(),
    )


def to_mcp_prompt_result(result: PromptResult) -> types.GetPromptResult:
    return types.GetPromptResult(
        description=result.description,
        messages=[
            types.PromptMessage(
                role=message.role.value,
                content=types.TextContent(type="text", text=message.text),
            )
            for message in result.messages
        ],
    )


def create_mcp_server(
    invoker: ToolInvoker,
    prompts: PromptCatalog,
    settings: Settings,
) -> Server:
    """Create an MCP server exposing the invoker's tools and the prompts.

    Errors raised while handling ``tools/call`` are turned into a
    ``CallToolResult`` with ``isError`` set by the SDK.
    """
    server: Server = Server(settings.server_name, version=settings.server_version)
    registry = invoker.registry

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [to_mcp_tool(summary) for summary in registry.list()]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        ctx = server.request_context
        progress_token = ctx.meta.progressToken if ctx.meta else None
        channel = SessionChannel(
            ctx.session,
            request_id=ctx.request_id,
            logger_name=settings.server_name,
        )
        result = ToolInvocationResult(
            text=await invoker.invoke(name, arguments, channel, progress_token=progress_token)
        )
        return [types.TextContent(type="text", text=result.text)]

    @server.list_prompts()
    async def list_prompts() -> list[types.Prompt]:
        return [
            types.Prompt(
                name=summary.name,
                description=summary.description,
                arguments=[
                    types.PromptArgument(
                        name=arg.name,
                        description=arg.description,
                        required=arg.required,
                    )
                    for arg in summary.arguments
                ],
            )
            for summary in prompts.list()
        ]

    @server.get_prompt()
    async def get_prompt(name: str, arguments: dict[str, str] | None) -> types.GetPromptResult:
        logger.info(f"Prompt requested: {name}")
        return to_mcp_prompt_result(prompts.get(name, arguments))

    @server.completion()
    async def complete(
        ref: types.PromptReference | types.ResourceTemplateReference,
        argument: types.CompletionArgument,
        context: types.CompletionContext | None,
    ) -> types.Completion | None:
        if not isinstance(ref, types.PromptReference) or ref.name not in prompts:
            return None
        values = prompts.complete(ref.name, argument.value)
        return types.Completion(values=values, total=len(values), hasMore=False)

    logger.info(
        f"MCP server '{settings.server_name}' ready with {len(registry)} tool(s) "
        f"and {len(prompts)} prompt(s)"
    )
    return server


def initialization_options(server: Server, settings: Settings) -> InitializationOptions:
    return InitializationOptions(
        server_name=settings.server_name,
        server_version=settings.server_version,
        capabilities=server.get_capabilities(
            notification_options=NotificationOptions(),
            experimental_capabilities={},
        ),
    )

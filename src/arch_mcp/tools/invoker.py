"""Tool invoker: validation and dispatch of named tool calls."""

import logging
from collections.abc import Mapping
from typing import Any

from arch_mcp.exceptions import MissingParameterError, UnknownToolError
from arch_mcp.services.notifier import NotificationChannel
from arch_mcp.tools.base import InvocationContext
from arch_mcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class ToolInvoker:
    """Executes registered tools against caller-supplied arguments.

    Stateless apart from the registry reference; concurrent invocations do
    not coordinate.
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    async def invoke(
        self,
        name: str,
        args: Mapping[str, Any] | None,
        notifier: NotificationChannel,
        progress_token: str | int | None = None,
    ) -> str:
        """Invoke tool ``name`` and return its text result.

        Args:
            name: Registered tool name.
            args: Argument mapping; undeclared keys are dropped.
            notifier: Receives progress/log events during the call.
            progress_token: Caller correlation id for progress events.

        Raises:
            UnknownToolError: If ``name`` is not registered. Nothing is
                emitted to ``notifier`` in that case.
            MissingParameterError: If a required parameter is absent or None.
        """
        tool = self._registry.get(name)
        if tool is None:
            logger.warning(f"Invocation of unknown tool: {name}")
            raise UnknownToolError(name)

        arguments = _normalize(args, [p.name for p in tool.parameters])
        missing = tool.missing_parameters(arguments)
        if missing:
            logger.warning(f"Tool {name} called without required parameters: {missing}")
            raise MissingParameterError(name, missing)

        context = InvocationContext(
            tool_name=name,
            notifier=notifier,
            progress_token=progress_token,
        )
        logger.info(f"Invoking tool: {name}")
        return await tool.handler(arguments, context)


def _normalize(args: Mapping[str, Any] | None, declared: list[str]) -> dict[str, str | None]:
    """Keep declared parameters only and stringify their values; None stays None."""
    if not args:
        return {}
    return {
        key: None if value is None else str(value)
        for key, value in args.items()
        if key in declared
    }

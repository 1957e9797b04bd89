"""Tool definition and per-call context for Arch MCP tools."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from arch_mcp.models.notification import LogEvent, LogLevel, ProgressEvent
from arch_mcp.models.tool import ToolParameter, ToolSummary
from arch_mcp.services.notifier import NotificationChannel

Arguments = Mapping[str, str | None]


@dataclass
class InvocationContext:
    """What a handler may use besides its arguments.

    Attributes:
        tool_name: Name the tool was invoked under.
        notifier: Channel for progress and log events of this call.
        progress_token: Caller-supplied correlation id, if any. Progress
            events are only emitted when a token is present.
    """

    tool_name: str
    notifier: NotificationChannel
    progress_token: str | int | None = None

    async def report_progress(
        self,
        completed: float,
        total: float = 1.0,
        message: str = "",
    ) -> None:
        """Emit a progress event; no-op without a progress token."""
        if self.progress_token is None:
            return
        await self.notifier.emit_progress(
            ProgressEvent(
                token=self.progress_token,
                completed=completed,
                total=total,
                message=message,
            )
        )

    async def log(
        self,
        level: LogLevel,
        message: str,
        metadata: Mapping[str, str] | None = None,
    ) -> None:
        """Emit a log event to the caller."""
        await self.notifier.emit_log(
            LogEvent(level=level, message=message, metadata=dict(metadata or {}))
        )


class ToolHandler(Protocol):
    """Async callable that turns arguments into the tool's text result."""

    async def __call__(self, arguments: Arguments, context: InvocationContext) -> str: ...


@dataclass(frozen=True)
class Tool:
    """Immutable, statically registered tool.

    Attributes:
        name: Unique identifier within a registry.
        description: Human-readable summary shown to clients.
        parameters: Ordered parameter declarations.
        handler: Coroutine function producing the text result.
    """

    name: str
    description: str
    handler: ToolHandler
    parameters: tuple[ToolParameter, ...] = field(default=())

    def summary(self) -> ToolSummary:
        return ToolSummary(
            name=self.name,
            description=self.description,
            parameters=self.parameters,
        )

    def missing_parameters(self, arguments: Arguments) -> list[str]:
        """Required parameters that are absent or None in ``arguments``."""
        return [
            p.name
            for p in self.parameters
            if p.required and arguments.get(p.name) is None
        ]

"""Data models for Arch MCP."""

from arch_mcp.models.health import HealthOutcome, HealthStatus
from arch_mcp.models.notification import LogEvent, LogLevel, ProgressEvent
from arch_mcp.models.prompt import (
    PromptArgument,
    PromptMessage,
    PromptResult,
    PromptRole,
    PromptSummary,
)
from arch_mcp.models.tool import ToolInvocationResult, ToolParameter, ToolSummary

__all__ = [
    "HealthOutcome",
    "HealthStatus",
    "LogEvent",
    "LogLevel",
    "ProgressEvent",
    "PromptArgument",
    "PromptMessage",
    "PromptResult",
    "PromptRole",
    "PromptSummary",
    "ToolInvocationResult",
    "ToolParameter",
    "ToolSummary",
]

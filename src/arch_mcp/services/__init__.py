"""Services for Arch MCP."""

from arch_mcp.services.documents import DocumentLibrary
from arch_mcp.services.health import HealthReporter, application_is_healthy
from arch_mcp.services.notifier import (
    NotificationChannel,
    RecordingChannel,
    SessionChannel,
)

__all__ = [
    "DocumentLibrary",
    "HealthReporter",
    "NotificationChannel",
    "RecordingChannel",
    "SessionChannel",
    "application_is_healthy",
]

"""Notification channels for progress and log events.

A channel receives events from a running tool handler and delivers them to
whoever invoked the tool. Delivery is awaited in emission order, so events
reach the caller in the order the handler produced them.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Protocol

from arch_mcp.models.notification import LogEvent, LogLevel, ProgressEvent

logger = logging.getLogger(__name__)

Event = ProgressEvent | LogEvent

# MCP logging levels (RFC 5424 names) for each event level
MCP_LOG_LEVELS: dict[LogLevel, str] = {
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
}


class NotificationChannel(ABC):
    """Sink for events emitted during one tool invocation."""

    @abstractmethod
    async def emit_progress(self, event: ProgressEvent) -> None:
        """Deliver a progress event. Fire-and-forget."""
        ...

    @abstractmethod
    async def emit_log(self, event: LogEvent) -> None:
        """Deliver a log event. Fire-and-forget."""
        ...


class RecordingChannel(NotificationChannel):
    """Keeps every event in memory, in emission order."""

    def __init__(self) -> None:
        self.events: list[Event] = []

    async def emit_progress(self, event: ProgressEvent) -> None:
        self.events.append(event)

    async def emit_log(self, event: LogEvent) -> None:
        self.events.append(event)

    @property
    def progress(self) -> list[ProgressEvent]:
        return [e for e in self.events if isinstance(e, ProgressEvent)]

    @property
    def logs(self) -> list[LogEvent]:
        return [e for e in self.events if isinstance(e, LogEvent)]

    def clear(self) -> None:
        self.events.clear()


class ServerSession(Protocol):
    """The parts of ``mcp.server.session.ServerSession`` this module uses."""

    async def send_progress_notification(
        self,
        progress_token: str | int,
        progress: float,
        total: float | None = None,
        message: str | None = None,
        related_request_id: str | None = None,
    ) -> None: ...

    async def send_log_message(
        self,
        level: Any,
        data: Any,
        logger: str | None = None,
        related_request_id: str | None = None,
    ) -> None: ...


class SessionChannel(NotificationChannel):
    """Forwards events to a connected MCP client session.

    Progress becomes ``notifications/progress`` and log events become
    ``notifications/message``, both tied to the originating request id.
    """

    def __init__(
        self,
        session: ServerSession,
        request_id: str | int | None = None,
        logger_name: str | None = None,
    ) -> None:
        self._session = session
        self._request_id = None if request_id is None else str(request_id)
        self._logger_name = logger_name

    async def emit_progress(self, event: ProgressEvent) -> None:
        logger.debug(f"Progress {event.token}: {event.completed} ({event.message})")
        await self._session.send_progress_notification(
            progress_token=event.token,
            progress=event.completed,
            total=event.total,
            message=event.message or None,
            related_request_id=self._request_id,
        )

    async def emit_log(self, event: LogEvent) -> None:
        data: Any = event.message
        if event.metadata:
            data = {"message": event.message, "metadata": event.metadata}
        await self._session.send_log_message(
            level=MCP_LOG_LEVELS[event.level],
            data=data,
            logger=self._logger_name,
            related_request_id=self._request_id,
        )

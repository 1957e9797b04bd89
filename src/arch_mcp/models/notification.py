"""Out-of-band events emitted while a tool runs."""

from enum import Enum

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Severity of a log event."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class ProgressEvent(BaseModel):
    """Progress of one invocation, correlated by the caller's token.

    Completion increases 0.0 -> 0.5 -> 1.0 by convention; nothing enforces
    monotonicity.
    """

    token: str | int
    completed: float = Field(ge=0.0, le=1.0)
    total: float = 1.0
    message: str = ""


class LogEvent(BaseModel):
    """Observational log record sent to the caller."""

    level: LogLevel
    message: str
    metadata: dict[str, str] = Field(default_factory=dict)

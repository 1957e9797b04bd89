"""Health status models."""

from enum import Enum

from pydantic import BaseModel


class HealthStatus(str, Enum):
    """Liveness status; the value is the exact response body."""

    OK = "OK"
    DEGRADED = "DEGRADED"
    ERROR = "ERROR"


class HealthOutcome(BaseModel):
    """Result of evaluating the health predicate.

    Either ``success`` with a status, or ``failure`` with the kind of
    exception and its detail. A failure always reports ERROR.
    """

    ok: bool
    reported: HealthStatus | None = None
    failure_kind: str | None = None
    detail: str | None = None

    @classmethod
    def success(cls, status: HealthStatus) -> "HealthOutcome":
        return cls(ok=True, reported=status)

    @classmethod
    def failure(cls, kind: str, detail: str) -> "HealthOutcome":
        return cls(ok=False, failure_kind=kind, detail=detail)

    @property
    def status(self) -> HealthStatus:
        if not self.ok or self.reported is None:
            return HealthStatus.ERROR
        return self.reported

"""Health reporter behind the liveness endpoint."""

import logging
from collections.abc import Callable

from arch_mcp.models.health import HealthOutcome, HealthStatus

logger = logging.getLogger(__name__)

HealthPredicate = Callable[[], bool]


def application_is_healthy() -> bool:
    """Default predicate: the process is up and answering."""
    logger.debug("Checking application health status")
    return True


class HealthReporter:
    """Maps a single boolean predicate onto OK / DEGRADED / ERROR.

    The predicate is evaluated fresh on every check; nothing is cached.
    """

    def __init__(self, predicate: HealthPredicate = application_is_healthy) -> None:
        self._predicate = predicate

    def evaluate(self) -> HealthOutcome:
        """Run the predicate and capture the outcome without raising."""
        logger.debug("Performing application health verification")
        try:
            healthy = self._predicate()
        except Exception as e:
            logger.error("Health check failed with exception", exc_info=True)
            return HealthOutcome.failure(type(e).__name__, str(e))

        if healthy:
            logger.info("Application health check passed")
            return HealthOutcome.success(HealthStatus.OK)

        logger.warning("Application health check failed")
        return HealthOutcome.success(HealthStatus.DEGRADED)

    def check(self) -> HealthStatus:
        return self.evaluate().status

"""FastAPI routes outside the MCP transport."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from arch_mcp.services.health import HealthReporter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

# Dependency injection
_reporter: HealthReporter | None = None


def get_health_reporter() -> HealthReporter:
    """Get or create the health reporter instance."""
    global _reporter
    if _reporter is None:
        _reporter = HealthReporter()
    return _reporter


@router.get("/health", response_class=PlainTextResponse)
async def health(
    reporter: Annotated[HealthReporter, Depends(get_health_reporter)],
) -> str:
    """Liveness check. Always 200; the body carries OK, DEGRADED or ERROR."""
    logger.info("Health check endpoint called")
    return reporter.check().value

"""Application entry point for Arch MCP."""

import asyncio
import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from arch_mcp import __version__
from arch_mcp.api.routes import router
from arch_mcp.config import Settings, Transport, get_settings
from arch_mcp.mcp_server import create_mcp_server, mount_sse, run_stdio
from arch_mcp.prompts import PromptCatalog, build_catalog
from arch_mcp.tools import ToolInvoker
from arch_mcp.tools.catalog import build_registry

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging on stderr; stdout belongs to the stdio transport."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def build_components(settings: Settings) -> tuple[ToolInvoker, PromptCatalog]:
    """Create the invoker and prompt catalog for the configured profile."""
    registry = build_registry(settings.profile)
    return ToolInvoker(registry), build_catalog(settings.profile)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.server_name} v{settings.server_version}")
    logger.info(f"Profile: {settings.profile.value}, debug mode: {settings.debug}")
    yield
    logger.info(f"Shutting down {settings.server_name}")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the FastAPI application serving health and the MCP SSE transport."""
    settings = settings or get_settings()
    invoker, prompts = build_components(settings)
    server = create_mcp_server(invoker, prompts, settings)

    app = FastAPI(
        title="Arch MCP",
        description="MCP tool server for greetings and microservices architecture docs",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.invoker = invoker
    app.state.mcp_server = server

    app.include_router(router)
    mount_sse(app, server, settings)

    return app


def main() -> None:
    """Console entry point: serve over SSE (HTTP) or stdio."""
    settings = get_settings()
    configure_logging(settings)

    if settings.transport == Transport.STDIO:
        invoker, prompts = build_components(settings)
        server = create_mcp_server(invoker, prompts, settings)
        asyncio.run(run_stdio(server, settings))
        return

    import uvicorn

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

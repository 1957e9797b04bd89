"""stdio and SSE transports for the MCP server."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import Response
from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server

from arch_mcp.config import Settings
from arch_mcp.mcp_server.server import initialization_options

logger = logging.getLogger(__name__)


async def run_stdio(server: Server, settings: Settings) -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    logger.info("Starting MCP server on stdio")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            initialization_options(server, settings),
        )


def mount_sse(app: FastAPI, server: Server, settings: Settings) -> SseServerTransport:
    """Add the SSE stream route and the message POST endpoint to ``app``."""
    sse = SseServerTransport(settings.message_path)

    async def handle_sse(request: Request) -> Response:
        logger.info("SSE client connected")
        async with sse.connect_sse(request.scope, request.receive, request._send) as streams:
            await server.run(
                streams[0],
                streams[1],
                initialization_options(server, settings),
            )
        logger.info("SSE client disconnected")
        return Response()

    app.add_api_route(settings.sse_path, handle_sse, methods=["GET"], include_in_schema=False)
    app.mount(settings.message_path, app=sse.handle_post_message)
    return sse

import logging
from collections.abc import AsyncIterator, Iterable, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import (
    CallToolRequest,
    CallToolResult,
    Resource,
    ServerResult,
    TextContent,
    Tool,
)
from pydantic import AnyUrl

from .jira import JiraConfig, JiraFetcher
from .servers import dispatcher, resources
from .servers.registry import list_tool_definitions
from .utils.io import is_read_only_mode
from .utils.logging import log_config_param

logger = logging.getLogger("mcp-tracker.server")


@dataclass
class AppContext:
    """Application context for MCP Tracker."""

    jira: JiraFetcher
    config: JiraConfig
    read_only: bool = False


@asynccontextmanager
async def server_lifespan(server: Server) -> AsyncIterator[AppContext]:
    """Build the Jira client once for the lifetime of the server."""
    logger.info("Starting MCP Tracker server")

    read_only = is_read_only_mode()
    logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")

    config = JiraConfig.from_env()
    log_config_param(logger, "Jira", "URL", config.url)
    log_config_param(
        logger, "Jira", "Personal Token", config.personal_token, sensitive=True
    )
    log_config_param(logger, "Jira", "SSL Verify", str(config.ssl_verify))

    jira = JiraFetcher(config=config)
    logger.info("Jira client initialized successfully.")

    try:
        yield AppContext(jira=jira, config=config, read_only=read_only)
    finally:
        logger.info("Shutting down MCP Tracker server")


app = Server("mcp-tracker", lifespan=server_lifespan)


@app.list_resources()
async def list_resources() -> list[Resource]:
    """List Jira resources; degrades to the config resource if Jira is unreachable."""
    ctx = app.request_context.lifespan_context
    return await resources.list_resources(ctx.jira)


@app.read_resource()
async def read_resource(uri: AnyUrl) -> Iterable[ReadResourceContents]:
    """Read a tracker:// resource as JSON."""
    ctx = app.request_context.lifespan_context
    return await resources.read_resource(ctx.jira, ctx.config, uri)


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List Jira tools, without the modifying ones in read-only mode."""
    ctx = app.request_context.lifespan_context
    return list_tool_definitions(read_only=ctx.read_only)


async def call_tool(
    name: str, arguments: dict[str, Any] | None
) -> Sequence[TextContent]:
    """Handle a Jira tool call."""
    ctx = app.request_context.lifespan_context
    return await dispatcher.dispatch_tool(
        ctx.jira, name, arguments, read_only=ctx.read_only
    )


async def handle_call_tool(req: CallToolRequest) -> ServerResult:
    """Answer tools/call.

    Registered directly rather than through `app.call_tool()`, whose wrapper
    turns every exception into a plain error result; here an McpError
    reaches the client as a JSON-RPC error carrying its code.
    """
    content = await call_tool(req.params.name, req.params.arguments)
    return ServerResult(CallToolResult(content=list(content), isError=False))


app.request_handlers[CallToolRequest] = handle_call_tool


async def run_server(transport: str = "stdio", port: int = 8000) -> None:
    """Run the MCP Tracker server with the specified transport."""
    if transport == "sse":
        import uvicorn
        from mcp.server.sse import SseServerTransport
        from starlette.applications import Starlette
        from starlette.requests import Request
        from starlette.responses import Response
        from starlette.routing import Mount, Route

        sse = SseServerTransport("/messages/")

        async def handle_sse(request: Request) -> Response:
            async with sse.connect_sse(
                request.scope, request.receive, request._send
            ) as streams:
                await app.run(
                    streams[0], streams[1], app.create_initialization_options()
                )
            return Response()

        starlette_app = Starlette(
            routes=[
                Route("/sse", endpoint=handle_sse),
                Mount("/messages/", app=sse.handle_post_message),
            ],
        )

        config = uvicorn.Config(starlette_app, host="0.0.0.0", port=port)  # noqa: S104
        server = uvicorn.Server(config)
        # serve() keeps uvicorn in the current event loop
        await server.serve()
    else:
        from mcp.server.stdio import stdio_server

        async with stdio_server() as (read_stream, write_stream):
            await app.run(
                read_stream, write_stream, app.create_initialization_options()
            )

import logging
from collections.abc import AsyncIterator, Iterable, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import (
    EmbeddedResource,
    GetPromptResult,
    Prompt,
    Resource,
    TextContent,
    Tool,
)
from pydantic import AnyUrl

from . import __version__
from .exceptions import MCPJiraConfigurationError, MCPJiraNotFoundError
from .jira import JiraFetcher
from .jira.config import JiraConfig
from .logging_config import log_config_param
from .prompts import RECENT_ISSUES_JQL, get_prompt_catalog, render_prompt
from .resources import JSON_MIME_TYPE, issue_key_from_uri, issue_resource, to_json
from .tools import execute_tool, get_tool_catalog

logger = logging.getLogger("mcp-jira-cloud.server")


@dataclass
class AppContext:
    """Application context for MCP Jira Cloud."""

    jira: JiraFetcher


@asynccontextmanager
async def server_lifespan(server: Server) -> AsyncIterator[AppContext]:
    """Build the Jira client once for the lifetime of the server.

    A missing credential is fatal: the error is logged and re-raised.
    """
    logger.info("Starting MCP Jira Cloud server")
    try:
        jira_config = JiraConfig.from_env()
    except MCPJiraConfigurationError as e:
        logger.error(f"Failed to load Jira configuration: {e}")
        raise

    log_config_param(logger, "Jira", "Domain", jira_config.domain)
    log_config_param(logger, "Jira", "Email", jira_config.email)
    log_config_param(
        logger, "Jira", "API Token", jira_config.api_token, sensitive=True
    )
    log_config_param(logger, "Jira", "SSL Verify", str(jira_config.ssl_verify))

    jira = JiraFetcher(config=jira_config)
    logger.info("Jira client initialized successfully.")

    try:
        yield AppContext(jira=jira)
    finally:
        jira.jira.close()
        logger.info("MCP Jira Cloud server stopped")


# Create server instance
app = Server("mcp-jira-cloud", version=__version__, lifespan=server_lifespan)


def _get_jira() -> JiraFetcher:
    ctx: AppContext = app.request_context.lifespan_context
    return ctx.jira


@app.list_resources()
async def list_resources() -> list[Resource]:
    """List the most recently created issues."""
    try:
        issues = _get_jira().search_issues(RECENT_ISSUES_JQL)
    except Exception as e:
        logger.error(f"Error listing Jira issues: {str(e)}")
        raise
    return [issue_resource(issue) for issue in issues]


@app.read_resource()
async def read_resource(uri: AnyUrl) -> Iterable[ReadResourceContents]:
    """Read one issue, identified by a ``jira:///KEY`` URI, as JSON."""
    issue_key = issue_key_from_uri(uri)
    try:
        issues = _get_jira().search_issues(f"key = {issue_key}")
        if not issues:
            raise MCPJiraNotFoundError(f"Issue {issue_key} not found")
    except Exception as e:
        logger.error(f"Error reading Jira issue: {str(e)}")
        raise

    return [ReadResourceContents(content=to_json(issues[0]), mime_type=JSON_MIME_TYPE)]


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List available Jira tools."""
    return get_tool_catalog()


@app.call_tool()
async def call_tool(
    name: str, arguments: dict[str, Any] | None
) -> Sequence[TextContent | EmbeddedResource]:
    """Handle tool calls for Jira operations.

    Failures are re-raised so the host sees the call as failed.
    """
    try:
        return execute_tool(_get_jira(), name, arguments)
    except Exception as e:
        logger.error(f"Tool execution error: {str(e)}")
        raise


@app.list_prompts()
async def list_prompts() -> list[Prompt]:
    """List available analysis prompts."""
    return get_prompt_catalog()


@app.get_prompt()
async def get_prompt(
    name: str, arguments: dict[str, str] | None = None
) -> GetPromptResult:
    """Build a prompt embedding live Jira data."""
    try:
        return render_prompt(_get_jira(), name)
    except Exception as e:
        logger.error(f"Error building prompt {name}: {str(e)}")
        raise


async def run_server(transport: str = "stdio", port: int = 8000) -> None:
    """Run the MCP Jira Cloud server with the specified transport."""
    if transport == "sse":
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

        import uvicorn

        config = uvicorn.Config(starlette_app, host="0.0.0.0", port=port)  # noqa: S104
        server = uvicorn.Server(config)
        # serve() keeps uvicorn on the current event loop
        await server.serve()
    else:
        from mcp.server.stdio import stdio_server

        async with stdio_server() as (read_stream, write_stream):
            await app.run(
                read_stream, write_stream, app.create_initialization_options()
            )

"""Tool catalog and dispatch for the MCP Jira Cloud server.

The tool names and their argument schemas are part of the server's public
contract: hosts call them by name.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from mcp.types import EmbeddedResource, TextContent, Tool

from .exceptions import MCPJiraInvalidArgumentError, MCPJiraUnknownOperationError
from .jira import JiraFetcher
from .resources import json_resource, jira_uri

logger = logging.getLogger("mcp-jira-cloud.server")


@dataclass(frozen=True)
class ToolArgument:
    name: str
    description: str


@dataclass(frozen=True)
class FetchTool:
    """A read-only tool returning one Jira payload as a JSON resource block.

    ``uri`` may reference the tool's arguments, e.g. ``workflows/{workflowId}``.
    """

    name: str
    description: str
    method: str
    uri: str
    arguments: tuple[ToolArgument, ...] = field(default_factory=tuple)


SEARCH_ISSUES_ARGUMENTS = (ToolArgument("jql", "JQL query string"),)

CREATE_ISSUE_ARGUMENTS = (
    ToolArgument("project", "Project key"),
    ToolArgument("summary", "Issue summary"),
    ToolArgument("description", "Issue description"),
)

FETCH_TOOLS = (
    FetchTool(
        "get_permission_schemes",
        "Get all permission schemes",
        "get_permission_schemes",
        "permission-schemes",
    ),
    FetchTool("get_priorities", "Get all priorities", "get_priorities", "priorities"),
    FetchTool(
        "get_notification_schemes",
        "Get all notification schemes",
        "get_notification_schemes",
        "notification-schemes",
    ),
    FetchTool(
        "get_security_schemes",
        "Get all security schemes",
        "get_security_schemes",
        "security-schemes",
    ),
    FetchTool(
        "get_security_levels",
        "Get security levels for a specific scheme",
        "get_security_levels",
        "security-schemes/{schemeId}/levels",
        (ToolArgument("schemeId", "Security scheme ID"),),
    ),
    FetchTool(
        "get_field_configurations",
        "Get all field configurations",
        "get_field_configurations",
        "field-configurations",
    ),
    FetchTool(
        "get_field_configuration_schemes",
        "Get all field configuration schemes",
        "get_field_configuration_schemes",
        "field-configuration-schemes",
    ),
    FetchTool("get_screens", "Get all screens", "get_screens", "screens"),
    FetchTool(
        "get_screen_schemes",
        "Get all screen schemes",
        "get_screen_schemes",
        "screen-schemes",
    ),
    FetchTool(
        "get_issue_type_screen_schemes",
        "Get all issue type screen schemes",
        "get_issue_type_screen_schemes",
        "issue-type-screen-schemes",
    ),
    FetchTool("get_workflows", "Get all workflows", "get_workflows", "workflows"),
    FetchTool(
        "get_workflow_schemes",
        "Get all workflow schemes",
        "get_workflow_schemes",
        "workflow-schemes",
    ),
    FetchTool(
        "get_workflow_statuses",
        "Get all workflow statuses",
        "get_workflow_statuses",
        "workflow-statuses",
    ),
    FetchTool(
        "get_workflow_transitions",
        "Get transitions for a specific workflow",
        "get_workflow_transitions",
        "workflows/{workflowId}/transitions",
        (ToolArgument("workflowId", "Workflow ID"),),
    ),
)

FETCH_TOOLS_BY_NAME = {tool.name: tool for tool in FETCH_TOOLS}


def input_schema(arguments: Sequence[ToolArgument]) -> dict[str, Any]:
    """Build the JSON schema for a tool whose arguments are all required strings."""
    return {
        "type": "object",
        "properties": {
            argument.name: {"type": "string", "description": argument.description}
            for argument in arguments
        },
        "required": [argument.name for argument in arguments],
    }


def get_tool_catalog() -> list[Tool]:
    """Return the sixteen tools exposed by the server, in a stable order."""
    tools = [
        Tool(
            name="search_issues",
            description="Search Jira issues using JQL",
            inputSchema=input_schema(SEARCH_ISSUES_ARGUMENTS),
        ),
        Tool(
            name="create_issue",
            description="Create a new Jira issue",
            inputSchema=input_schema(CREATE_ISSUE_ARGUMENTS),
        ),
    ]
    tools.extend(
        Tool(
            name=tool.name,
            description=tool.description,
            inputSchema=input_schema(tool.arguments),
        )
        for tool in FETCH_TOOLS
    )
    return tools


def require_arguments(
    arguments: dict[str, Any] | None, names: Sequence[str]
) -> dict[str, str]:
    """Check that every named argument is present and non-blank.

    Args:
        arguments: Arguments as received from the host (may be None)
        names: Names of the required arguments

    Returns:
        The required arguments as strings

    Raises:
        MCPJiraInvalidArgumentError: If any required argument is missing or empty
    """
    arguments = arguments or {}
    values: dict[str, str] = {}
    missing: list[str] = []
    for name in names:
        value = arguments.get(name)
        if value is None or isinstance(value, dict | list):
            missing.append(name)
            continue
        value = str(value)
        if not value.strip():
            missing.append(name)
            continue
        values[name] = value

    if missing:
        raise MCPJiraInvalidArgumentError(
            f"Missing required arguments: {', '.join(missing)}"
        )
    return values


def format_search_results(issues: list[dict[str, Any]]) -> str:
    lines = [
        f"{issue['key']}: {issue['fields']['summary']} "
        f"({issue['fields']['status']['name']})"
        for issue in issues
    ]
    return f"Found {len(issues)} issues:\n" + "\n".join(lines)


def execute_tool(
    jira: JiraFetcher, name: str, arguments: dict[str, Any] | None
) -> list[TextContent | EmbeddedResource]:
    """Run one tool against Jira and wrap the result for the host.

    Arguments are validated before any request is made.

    Raises:
        MCPJiraUnknownOperationError: If the tool name is not in the catalog
        MCPJiraInvalidArgumentError: If a required argument is missing
    """
    logger.debug(f"Executing tool {name}")
    if name == "search_issues":
        args = require_arguments(arguments, ["jql"])
        issues = jira.search_issues(args["jql"])
        return [TextContent(type="text", text=format_search_results(issues))]

    if name == "create_issue":
        args = require_arguments(arguments, ["project", "summary", "description"])
        issue = jira.create_issue(
            args["project"], args["summary"], args["description"]
        )
        return [
            TextContent(
                type="text", text=f"Created issue {issue['key']}: {args['summary']}"
            )
        ]

    tool = FETCH_TOOLS_BY_NAME.get(name)
    if tool is None:
        raise MCPJiraUnknownOperationError(f"Unknown tool: {name}")

    args = require_arguments(arguments, [argument.name for argument in tool.arguments])
    data = getattr(jira, tool.method)(*args.values())
    return [json_resource(jira_uri(tool.uri.format(**args)), data)]

"""Unit tests for server"""

import json
from contextlib import contextmanager
from unittest.mock import MagicMock, call, patch

import pytest
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.shared.context import RequestContext
from mcp.shared.session import BaseSession
from mcp.types import EmbeddedResource, GetPromptResult, TextContent
from requests.exceptions import HTTPError

from mcp_jira_cloud.exceptions import (
    MCPJiraConfigurationError,
    MCPJiraInvalidArgumentError,
    MCPJiraNotFoundError,
    MCPJiraUnknownOperationError,
)
from mcp_jira_cloud.jira import JiraFetcher
from mcp_jira_cloud.server import (
    AppContext,
    call_tool,
    get_prompt,
    list_prompts,
    list_resources,
    list_tools,
    read_resource,
    server_lifespan,
)
from tests.utils.factories import JiraIssueFactory


@pytest.fixture
def mock_jira_client():
    """Create a mock JiraFetcher with pre-configured return values."""
    mock_jira = MagicMock(spec=JiraFetcher)
    mock_jira.search_issues.return_value = [
        JiraIssueFactory.create("TEST-1", fields={"summary": "First issue"}),
        JiraIssueFactory.create(
            "TEST-2", fields={"summary": "Second issue", "status": {"name": "Done"}}
        ),
    ]
    mock_jira.create_issue.return_value = {"id": "10001", "key": "DEV-7"}
    return mock_jira


@pytest.fixture
def app_context(mock_jira_client):
    """Create an AppContext with mock clients."""
    return AppContext(jira=mock_jira_client)


@contextmanager
def mock_request_context(app_context):
    """Context manager to set the request_ctx context variable directly."""
    from mcp.server.lowlevel.server import request_ctx

    mock_session = MagicMock(spec=BaseSession)

    context = RequestContext(
        request_id="test-request-id",
        meta=None,
        session=mock_session,
        lifespan_context=app_context,
    )

    token = request_ctx.set(context)
    try:
        yield
    finally:
        request_ctx.reset(token)


@pytest.mark.anyio
async def test_server_lifespan():
    """Test the server_lifespan context manager."""
    with (
        patch("mcp_jira_cloud.server.JiraConfig") as mock_config_cls,
        patch("mcp_jira_cloud.server.JiraFetcher") as mock_fetcher_cls,
        patch("mcp_jira_cloud.server.logger") as mock_logger,
        patch("mcp_jira_cloud.server.log_config_param") as mock_log_config_param,
    ):
        mock_config = MagicMock()
        mock_config.domain = "test.atlassian.net"
        mock_config.email = "test@example.com"
        mock_config.api_token = "test-api-token"
        mock_config.ssl_verify = True
        mock_config_cls.from_env.return_value = mock_config

        async with server_lifespan(MagicMock()) as ctx:
            assert isinstance(ctx, AppContext)
            assert ctx.jira is mock_fetcher_cls.return_value

            mock_fetcher_cls.assert_called_once_with(config=mock_config)
            mock_logger.info.assert_any_call("Starting MCP Jira Cloud server")
            mock_logger.info.assert_any_call("Jira client initialized successfully.")
            mock_log_config_param.assert_any_call(
                mock_logger, "Jira", "Domain", "test.atlassian.net"
            )
            mock_log_config_param.assert_any_call(
                mock_logger, "Jira", "API Token", "test-api-token", sensitive=True
            )

        mock_fetcher_cls.return_value.jira.close.assert_called_once()


@pytest.mark.anyio
async def test_server_lifespan_missing_configuration_is_fatal():
    """A missing credential aborts startup."""
    with (
        patch("mcp_jira_cloud.server.JiraConfig") as mock_config_cls,
        patch("mcp_jira_cloud.server.JiraFetcher") as mock_fetcher_cls,
        patch("mcp_jira_cloud.server.logger") as mock_logger,
    ):
        mock_config_cls.from_env.side_effect = MCPJiraConfigurationError(
            "Missing required environment variables: JIRA_API_TOKEN"
        )

        with pytest.raises(MCPJiraConfigurationError):
            async with server_lifespan(MagicMock()):
                pass

        mock_fetcher_cls.assert_not_called()
        mock_logger.error.assert_called_once_with(
            "Failed to load Jira configuration: "
            "Missing required environment variables: JIRA_API_TOKEN"
        )


@pytest.mark.anyio
async def test_list_resources(app_context):
    with mock_request_context(app_context):
        resources = await list_resources()

    app_context.jira.search_issues.assert_called_once_with("order by created DESC")
    assert len(resources) == 2
    assert str(resources[0].uri) == "jira:///TEST-1"
    assert resources[0].mimeType == "application/json"
    assert resources[0].name == "First issue"
    assert resources[0].description == "TEST-1 - First issue"


@pytest.mark.anyio
async def test_list_resources_error_propagates(app_context):
    app_context.jira.search_issues.side_effect = HTTPError("401 Unauthorized")

    with mock_request_context(app_context):
        with pytest.raises(HTTPError):
            await list_resources()


@pytest.mark.anyio
async def test_read_resource_returns_issue_json(app_context):
    issue = JiraIssueFactory.create("ABC-1", fields={"summary": "Ünïcode"})
    app_context.jira.search_issues.return_value = [issue]

    with mock_request_context(app_context):
        contents = await read_resource("jira:///ABC-1")

    app_context.jira.search_issues.assert_called_once_with("key = ABC-1")
    contents = list(contents)
    assert len(contents) == 1
    assert isinstance(contents[0], ReadResourceContents)
    assert contents[0].mime_type == "application/json"
    assert json.loads(contents[0].content) == issue
    assert contents[0].content == json.dumps(issue, indent=2, ensure_ascii=False)


@pytest.mark.anyio
async def test_read_resource_not_found(app_context):
    app_context.jira.search_issues.return_value = []

    with mock_request_context(app_context):
        with pytest.raises(MCPJiraNotFoundError, match="Issue ABC-1 not found"):
            await read_resource("jira:///ABC-1")


@pytest.mark.anyio
async def test_read_resource_without_key(app_context):
    with mock_request_context(app_context):
        with pytest.raises(MCPJiraInvalidArgumentError, match="Invalid resource URI"):
            await read_resource("jira:///")

    app_context.jira.search_issues.assert_not_called()


@pytest.mark.anyio
async def test_list_tools():
    tools = await list_tools()

    assert len(tools) == 16
    assert len({tool.name for tool in tools}) == 16


@pytest.mark.anyio
async def test_call_tool_search_issues(app_context):
    with mock_request_context(app_context):
        result = await call_tool("search_issues", {"jql": "project = TEST"})

    app_context.jira.search_issues.assert_called_once_with("project = TEST")
    assert len(result) == 1
    assert isinstance(result[0], TextContent)
    assert result[0].text == (
        "Found 2 issues:\nTEST-1: First issue (Open)\nTEST-2: Second issue (Done)"
    )


@pytest.mark.anyio
async def test_call_tool_search_issues_without_jql(app_context):
    with mock_request_context(app_context):
        with pytest.raises(MCPJiraInvalidArgumentError, match="jql"):
            await call_tool("search_issues", {})

    app_context.jira.search_issues.assert_not_called()


@pytest.mark.anyio
async def test_call_tool_create_issue(app_context):
    with mock_request_context(app_context):
        result = await call_tool(
            "create_issue", {"project": "DEV", "summary": "S", "description": "D"}
        )

    app_context.jira.create_issue.assert_called_once_with("DEV", "S", "D")
    assert result[0].text == "Created issue DEV-7: S"


@pytest.mark.anyio
async def test_call_tool_workflow_transitions(app_context):
    app_context.jira.get_workflow_transitions.return_value = [{"id": "11"}]

    with mock_request_context(app_context):
        result = await call_tool("get_workflow_transitions", {"workflowId": "42"})

    app_context.jira.get_workflow_transitions.assert_called_once_with("42")
    assert isinstance(result[0], EmbeddedResource)
    assert str(result[0].resource.uri) == "jira:///workflows/42/transitions"
    assert json.loads(result[0].resource.text) == [{"id": "11"}]


@pytest.mark.anyio
async def test_call_tool_unknown(app_context):
    with mock_request_context(app_context):
        with pytest.raises(MCPJiraUnknownOperationError, match="Unknown tool"):
            await call_tool("delete_everything", {})


@pytest.mark.anyio
async def test_call_tool_remote_error_is_logged_and_reraised(app_context):
    error = HTTPError("500 Server Error")
    app_context.jira.get_priorities.side_effect = error

    with (
        mock_request_context(app_context),
        patch("mcp_jira_cloud.server.logger") as mock_logger,
    ):
        with pytest.raises(HTTPError) as exc_info:
            await call_tool("get_priorities", {})

    assert exc_info.value is error
    mock_logger.error.assert_called_once_with(
        "Tool execution error: 500 Server Error"
    )


@pytest.mark.anyio
async def test_list_prompts():
    prompts = await list_prompts()

    assert [prompt.name for prompt in prompts] == [
        "summarize_issues",
        "analyze_permission_schemes",
        "analyze_priorities",
        "analyze_notification_schemes",
        "analyze_security_schemes",
        "analyze_field_configurations",
        "analyze_screens",
        "analyze_workflows",
    ]


@pytest.mark.anyio
async def test_get_prompt_analyze_workflows(app_context):
    jira = app_context.jira
    jira.get_workflows.return_value = {"values": [{"id": {"name": "wf"}}]}
    jira.get_workflow_schemes.return_value = {"values": [{"id": 1}]}
    jira.get_workflow_statuses.return_value = [{"id": "1", "name": "Open"}]

    with mock_request_context(app_context):
        result = await get_prompt("analyze_workflows", None)

    assert isinstance(result, GetPromptResult)
    assert jira.method_calls == [
        call.get_workflows(),
        call.get_workflow_schemes(),
        call.get_workflow_statuses(),
    ]

    contents = [message.content for message in result.messages]
    assert len(contents) == 5
    assert all(message.role == "user" for message in result.messages)
    assert contents[0].text == (
        "Please analyze the following Jira workflows and related configurations:"
    )
    assert [str(block.resource.uri) for block in contents[1:4]] == [
        "jira:///workflows",
        "jira:///workflow-schemes",
        "jira:///workflow-statuses",
    ]
    assert contents[4].text.startswith("Provide an analysis of the workflows")


@pytest.mark.anyio
async def test_get_prompt_abandoned_on_partial_failure(app_context):
    app_context.jira.get_screens.return_value = []
    app_context.jira.get_screen_schemes.side_effect = HTTPError("403 Forbidden")

    with mock_request_context(app_context):
        with pytest.raises(HTTPError):
            await get_prompt("analyze_screens", None)

    app_context.jira.get_issue_type_screen_schemes.assert_not_called()


@pytest.mark.anyio
async def test_get_prompt_unknown(app_context):
    with mock_request_context(app_context):
        with pytest.raises(MCPJiraUnknownOperationError, match="Unknown prompt"):
            await get_prompt("analyze_everything", None)

"""Prompt catalog for the MCP Jira Cloud server.

Every prompt fetches one or more Jira datasets, embeds each as a JSON
resource block, and frames them between a fixed opening and closing
instruction.
"""

import logging
from dataclasses import dataclass

from mcp.types import GetPromptResult, Prompt, PromptMessage, TextContent

from .exceptions import MCPJiraUnknownOperationError
from .jira import JiraFetcher
from .resources import jira_uri, json_resource

logger = logging.getLogger("mcp-jira-cloud.server")

RECENT_ISSUES_JQL = "order by created DESC"


@dataclass(frozen=True)
class AnalysisPrompt:
    name: str
    description: str
    intro: str
    closing: str
    # (JiraFetcher method, resource path) pairs, fetched in this order
    datasets: tuple[tuple[str, str], ...]


SUMMARIZE_ISSUES = AnalysisPrompt(
    name="summarize_issues",
    description="Summarize Jira issues",
    intro="Please summarize the following Jira issues:",
    closing="Provide a concise summary of all the Jira issues above.",
    datasets=(),
)

ANALYSIS_PROMPTS = (
    AnalysisPrompt(
        name="analyze_permission_schemes",
        description="Analyze permission schemes configuration",
        intro="Please analyze the following Jira permission schemes:",
        closing=(
            "Provide a detailed analysis of the permission schemes, including key "
            "permissions, roles, and any potential security concerns."
        ),
        datasets=(("get_permission_schemes", "permission-schemes"),),
    ),
    AnalysisPrompt(
        name="analyze_priorities",
        description="Analyze priorities configuration",
        intro="Please analyze the following Jira priorities:",
        closing=(
            "Provide a summary of the priority levels and their intended use cases."
        ),
        datasets=(("get_priorities", "priorities"),),
    ),
    AnalysisPrompt(
        name="analyze_notification_schemes",
        description="Analyze notification schemes configuration",
        intro="Please analyze the following Jira notification schemes:",
        closing=(
            "Provide an analysis of the notification schemes, including event "
            "triggers and recipients."
        ),
        datasets=(("get_notification_schemes", "notification-schemes"),),
    ),
    AnalysisPrompt(
        name="analyze_security_schemes",
        description="Analyze security schemes configuration",
        intro="Please analyze the following Jira security schemes:",
        closing=(
            "Provide an analysis of the security schemes, including access levels "
            "and potential security implications."
        ),
        datasets=(("get_security_schemes", "security-schemes"),),
    ),
    AnalysisPrompt(
        name="analyze_field_configurations",
        description="Analyze field configurations",
        intro="Please analyze the following Jira field configurations and schemes:",
        closing=(
            "Provide an analysis of the field configurations and schemes, including "
            "custom fields and their usage."
        ),
        datasets=(
            ("get_field_configurations", "field-configurations"),
            ("get_field_configuration_schemes", "field-configuration-schemes"),
        ),
    ),
    AnalysisPrompt(
        name="analyze_screens",
        description="Analyze screens and screen schemes",
        intro="Please analyze the following Jira screens and screen schemes:",
        closing=(
            "Provide an analysis of the screens and screen schemes, including their "
            "relationships and usage patterns."
        ),
        datasets=(
            ("get_screens", "screens"),
            ("get_screen_schemes", "screen-schemes"),
            ("get_issue_type_screen_schemes", "issue-type-screen-schemes"),
        ),
    ),
    AnalysisPrompt(
        name="analyze_workflows",
        description="Analyze workflows and workflow schemes",
        intro=(
            "Please analyze the following Jira workflows and related configurations:"
        ),
        closing=(
            "Provide an analysis of the workflows, including status transitions, "
            "schemes, and overall process flow."
        ),
        datasets=(
            ("get_workflows", "workflows"),
            ("get_workflow_schemes", "workflow-schemes"),
            ("get_workflow_statuses", "workflow-statuses"),
        ),
    ),
)

PROMPTS_BY_NAME = {
    prompt.name: prompt for prompt in (SUMMARIZE_ISSUES, *ANALYSIS_PROMPTS)
}


def get_prompt_catalog() -> list[Prompt]:
    """Return the eight prompts exposed by the server. None take arguments."""
    return [
        Prompt(name=prompt.name, description=prompt.description)
        for prompt in PROMPTS_BY_NAME.values()
    ]


def _text_message(text: str) -> PromptMessage:
    return PromptMessage(role="user", content=TextContent(type="text", text=text))


def render_prompt(jira: JiraFetcher, name: str) -> GetPromptResult:
    """Fetch the data behind a prompt and assemble its message sequence.

    Fetches run one after another; a failure in any of them abandons the
    whole prompt.

    Raises:
        MCPJiraUnknownOperationError: If the prompt name is not in the catalog
    """
    prompt = PROMPTS_BY_NAME.get(name)
    if prompt is None:
        raise MCPJiraUnknownOperationError(f"Unknown prompt: {name}")

    if prompt is SUMMARIZE_ISSUES:
        issues = jira.search_issues(RECENT_ISSUES_JQL)
        blocks = [json_resource(jira_uri(issue["key"]), issue) for issue in issues]
    else:
        blocks = [
            json_resource(jira_uri(path), getattr(jira, method)())
            for method, path in prompt.datasets
        ]

    logger.debug(f"Rendering prompt {name} with {len(blocks)} resource blocks")
    messages = [_text_message(prompt.intro)]
    messages.extend(PromptMessage(role="user", content=block) for block in blocks)
    messages.append(_text_message(prompt.closing))
    return GetPromptResult(description=prompt.description, messages=messages)

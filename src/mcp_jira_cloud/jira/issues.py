"""Module for Jira issue operations."""

import logging
from typing import Any

from ..models import text_to_adf
from .client import JiraClient
from .constants import DEFAULT_ISSUE_TYPE

logger = logging.getLogger("mcp-jira-cloud.jira")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def create_issue(
        self, project: str, summary: str, description: str
    ) -> dict[str, Any]:
        """
        Create a new Task issue.

        Args:
            project: The project key (e.g. 'DEV')
            summary: Issue summary
            description: Plain text description, sent as a one-paragraph ADF document

        Returns:
            The created issue as returned by Jira (``id``, ``key``, ``self``)

        Raises:
            requests.RequestException: If the create request fails
        """
        fields = {
            "project": {"key": project},
            "summary": summary,
            "description": text_to_adf(description),
            "issuetype": {"name": DEFAULT_ISSUE_TYPE},
        }
        issue = self._post("issue", "creating Jira issue", {"fields": fields})
        logger.info(f"Created issue {issue.get('key')} in project {project}")
        return issue

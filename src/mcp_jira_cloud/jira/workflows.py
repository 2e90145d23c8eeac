"""Module for Jira workflow operations."""

from typing import Any

from .client import JiraClient


class WorkflowsMixin(JiraClient):
    """Mixin for Jira workflows, workflow schemes and statuses."""

    def get_workflows(self) -> Any:
        return self._get("workflow/search", "fetching workflows")

    def get_workflow_schemes(self) -> Any:
        return self._get("workflowscheme", "fetching workflow schemes")

    def get_workflow_statuses(self) -> Any:
        return self._get("status", "fetching workflow statuses")

    def get_workflow_transitions(self, workflow_id: str) -> Any:
        """
        Get the transitions of a workflow.

        Args:
            workflow_id: The workflow ID

        Returns:
            The transitions payload for the workflow
        """
        return self._get(
            f"workflow/{workflow_id}/transitions", "fetching workflow transitions"
        )

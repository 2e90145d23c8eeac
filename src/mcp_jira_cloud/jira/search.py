"""Module for Jira search operations."""

import logging
from typing import Any

from .client import JiraClient
from .constants import DEFAULT_SEARCH_FIELDS

logger = logging.getLogger("mcp-jira-cloud.jira")


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(self, jql: str) -> list[dict[str, Any]]:
        """
        Search for issues using JQL (Jira Query Language).

        Only the fields in DEFAULT_SEARCH_FIELDS are requested. No paging is
        done: whatever the first page holds is returned.

        Args:
            jql: JQL query string, passed through verbatim

        Returns:
            The ``issues`` array of the search response

        Raises:
            requests.RequestException: If the search request fails
        """
        logger.debug(f"Searching issues with JQL: {jql}")
        response = self._get(
            "search",
            "searching Jira issues",
            params={"jql": jql, "fields": DEFAULT_SEARCH_FIELDS},
        )
        return response["issues"]

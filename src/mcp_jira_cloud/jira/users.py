"""Module for Jira user operations."""

from typing import Any

from .client import JiraClient
from .constants import USER_SEARCH_MAX_RESULTS


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    def get_user(self, account_id: str) -> Any:
        """
        Get a user's profile.

        Args:
            account_id: The Atlassian account ID of the user

        Returns:
            The user payload
        """
        return self._get(
            "user", "fetching user information", params={"accountId": account_id}
        )

    def search_users(self, query: str) -> Any:
        """
        Find users matching a display name or email fragment.

        Args:
            query: Search string

        Returns:
            Up to USER_SEARCH_MAX_RESULTS matching users
        """
        return self._get(
            "user/search",
            "searching users",
            params={"query": query, "maxResults": USER_SEARCH_MAX_RESULTS},
        )

    def get_user_groups(self, account_id: str) -> Any:
        return self._get(
            "user/groups", "fetching user groups", params={"accountId": account_id}
        )

"""Module for Jira permission, notification, security and priority settings."""

from typing import Any

from .client import JiraClient


class SchemesMixin(JiraClient):
    """Mixin for Jira scheme and priority lookups.

    All payloads are returned exactly as Jira sends them.
    """

    def get_permission_schemes(self) -> Any:
        return self._get("permissionscheme", "fetching permission schemes")

    def get_priorities(self) -> Any:
        return self._get("priority", "fetching priorities")

    def get_notification_schemes(self) -> Any:
        return self._get("notificationscheme", "fetching notification schemes")

    def get_security_schemes(self) -> Any:
        return self._get("issuesecurityschemes", "fetching security schemes")

    def get_security_levels(self, scheme_id: str) -> Any:
        """
        Get the security levels defined by one issue security scheme.

        Args:
            scheme_id: The issue security scheme ID

        Returns:
            The levels payload for the scheme
        """
        return self._get(
            f"issuesecurityschemes/{scheme_id}/levels", "fetching security levels"
        )
